import pytest
from ngs_highlights.exceptions import MissingEventError
from ngs_highlights.window_engine import WindowEngine, resolve_interval


def test_window_uses_last_line_set(make_play):
    """
    TEST 1: Motion reset.
    Two 'line_set' tags: the later one starts the live window.
    """
    df = make_play(frames=range(1, 201), events={10: 'line_set', 40: 'line_set', 200: 'tackle'})

    assert resolve_interval(df) == (40, 200)


def test_window_uses_last_terminal_event(make_play):
    """
    TEST 2: Spurious early tag.
    Any of tackle / touchdown / out_of_bounds ends the play; the last one wins.
    """
    df = make_play(frames=range(1, 61), events={5: 'line_set', 30: 'out_of_bounds', 55: 'touchdown'})

    first, final = resolve_interval(df)
    assert (first, final) == (5, 55)


def test_window_missing_terminal_event(make_play):
    """
    TEST 3: No end of play.
    Must raise rather than fall back to the last frame.
    """
    df = make_play(frames=range(1, 11), events={2: 'line_set', 9: 'pass_forward'})

    with pytest.raises(MissingEventError) as err:
        resolve_interval(df)

    assert 'tackle' in err.value.missing
    assert 'line_set' not in err.value.missing


def test_window_missing_line_set(make_play):
    df = make_play(frames=range(1, 11), events={9: 'tackle'})

    with pytest.raises(MissingEventError) as err:
        resolve_interval(df)

    assert err.value.missing == ('line_set',)
    assert err.value.play_key == 242


def test_filter_window_is_inclusive(make_play):
    df = make_play(frames=range(1, 11), events={3: 'line_set', 8: 'tackle'})
    engine = WindowEngine()

    first, final = engine.resolve_interval(df)
    windowed = engine.filter_window(df, first, final)

    assert sorted(windowed['frame'].unique()) == [3, 4, 5, 6, 7, 8]


def test_custom_end_events(make_play):
    df = make_play(frames=range(1, 11), events={2: 'line_set', 6: 'pass_outcome_caught'})
    engine = WindowEngine(end_events=['pass_outcome_caught'])

    assert engine.resolve_interval(df) == (2, 6)
