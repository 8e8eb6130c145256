# poligon

A small shooting-range arcade game. Targets pop up in an 800×600 window, and
you shoot them with the mouse before they disappear or shoot back. The
on-screen text is in Turkish.

## Modes

After a five-second welcome fade, the menu offers two modes. Each round
starts with a four-second countdown, "Hazır mısın?" followed by "Başla!".

- **Klasik** (classic): a new target appears every half second to a second.
  Each target stays for three seconds. Each hit scores a point. A round lasts
  20 seconds. The timer on screen counts down from 30.
- **Gelişmiş** (advanced): you start with 30 seconds on the clock. The clock
  is also your health, and one second drains from it per second of play.
  - Targets fire a second after they appear, and again every 0.7–1.2 seconds
    after that. Each shot costs one second.
  - After 30 seconds of play, elite targets appear every four to eight
    seconds. An elite needs three hits, costs three seconds per shot and is
    worth 5 points.
  - From ten seconds into the round, a supply box appears every five to eight
    seconds and stays for three seconds. A health box adds 20 seconds, and the
    clock never goes above 60. A TNT box costs 5 seconds, but it kills every
    target still standing: 3 points for each normal target and 15 for each
    elite.
  - The round ends when the clock reaches zero.

When a round ends, the final score is shown. Two buttons follow:
"Tekrar Oyna" (play again) and "Menüye Dön" (back to the menu).

## Installing and running

```
pip install .
poligon
```

The game loads its sprites from `assets/sprite/` and its sounds from
`assets/sound/`. Both directories sit below an asset root directory. By
default the root is the current directory. Pick another root with `--assets`:

```
poligon --assets /path/to/game
```

If `assets/sprite/icon.png` is missing, the game exits at start with an error.
A missing sprite raises `FileNotFoundError`. A missing sound, or an audio
device that cannot be opened, is skipped silently.

## Controls

- Left click: shoot. In a round, the mouse pointer is replaced by a red
  crosshair.
- Use the on-screen buttons to pick a mode, to play again, or to go back to
  the menu.

## Using the game rules without a window

The rules are kept apart from drawing. `poligon.classic.ClassicGame` and
`poligon.advanced.AdvancedGame` take three arguments:

- a `random.Random`,
- a starting clock value in seconds,
- a callback that receives the path of each sound to play.

Drive a game by calling these methods with your own clock values:

- `tick(now)` advances it.
- `shoot(x, y, now)` fires a shot and returns whether something was hit.
- `enemy_sprite(enemy, now)` returns the image path to draw for a target.
  `AdvancedGame` also has `box_sprite(supply, now)` for supply boxes.

`poligon.media.Media` loads and caches images and sounds below an asset root.
`poligon.app.PoligonApp` moves between the menu and the game screens, one
frame per `update(surface, events, now)` call.

## Limits

The game keeps no high scores and saves nothing between runs. It has no
settings, no keyboard controls and no full-screen mode. The window size is
fixed.

## Development

```
pip install -e .[test]
pytest
```