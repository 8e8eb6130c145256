from poligon.menu import intro_alpha, intro_message, welcome_finished


def test_alpha_starts_transparent():
    assert intro_alpha(0.0) == 0


def test_alpha_fully_opaque_in_the_middle():
    assert intro_alpha(1.0) == 255
    assert intro_alpha(2.5) == 255
    assert intro_alpha(3.99) == 255


def test_alpha_half_way_through_fade_in():
    assert intro_alpha(0.5) == 127


def test_alpha_rises_then_falls():
    rising = [intro_alpha(t / 10) for t in range(11)]
    assert rising == sorted(rising)
    falling = [intro_alpha(4 + t / 10) for t in range(11)]
    assert falling == sorted(falling, reverse=True)


def test_alpha_stays_in_range():
    for t in range(-10, 80):
        assert 0 <= intro_alpha(t / 10) <= 255


def test_alpha_transparent_after_fade_out():
    assert intro_alpha(5.0) == 0
    assert intro_alpha(7.0) == 0


def test_welcome_finishes_after_five_seconds():
    assert welcome_finished(4.99) is False
    assert welcome_finished(5.0) is True


def test_intro_message_sequence():
    assert intro_message(0.0) == "Hazır mısın?"
    assert intro_message(1.99) == "Hazır mısın?"
    assert intro_message(2.0) == "Başla!"
    assert intro_message(3.99) == "Başla!"
    assert intro_message(4.0) is None