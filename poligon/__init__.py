"""Shooting-range arcade game with classic and advanced modes, built on pygame."""

__version__ = "2.0.0"