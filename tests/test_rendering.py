import os
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import pytest
from ngs_highlights.analysis.animation_engine import AnimationEngine, sample_frames
from ngs_highlights.analysis.field import plot_field
from ngs_highlights.analysis.frame_plotter import plot_play_frame, plot_play_sequence, sequence_frames
from ngs_highlights.analysis.interactive_engine import create_field_animation
from ngs_highlights.analysis.plot_builder import (
    LAYER_ORDER, PlotBuilder, Markers, ReferenceLines, TextLabels, Title, VelocityArrows
)
from ngs_highlights.analysis.team_colors import fetch_team_colors
from ngs_highlights.analysis.voronoi import voronoi_polygons


def polygon_area(poly):
    x, y = poly[:, 0], poly[:, 1]
    return 0.5 * abs(np.dot(x, np.roll(y, 1)) - np.dot(y, np.roll(x, 1)))


def test_team_colors_lookup():
    assert fetch_team_colors('SEA', 'KC') == ('#002244', '#69BE28', '#E31837', '#FFB81C')
    # legacy code
    assert fetch_team_colors('OAK', 'LA')[0] == '#000000'

    with pytest.raises(KeyError):
        fetch_team_colors('XXX', 'SEA')


def test_team_colors_diverge():
    """
    Same primary (DAL / LAR): diverge swaps the away side to its secondary.
    """
    assert fetch_team_colors('DAL', 'LAR')[2] == '#003594'
    assert fetch_team_colors('DAL', 'LAR', diverge=True)[2:] == ('#FFA300', '#003594')
    assert fetch_team_colors('SEA', 'KC', diverge=True)[2] == '#E31837'


def test_sample_frames_adds_end_pause():
    assert sample_frames([3, 1, 2, 2], end_pause=2) == [1, 2, 3, 3, 3]
    assert sample_frames([5, 6], end_pause=0) == [5, 6]
    assert sample_frames([]) == []


def test_voronoi_tiles_the_field():
    """
    One closed cell per player, all inside the field, together covering it.
    """
    frame = pd.DataFrame({
        'teamAbbr': ['SEA', 'SEA', 'LA', 'LA', 'LA'],
        'x': [20.0, 45.0, 60.0, 90.0, 119.0],
        'y': [10.0, 40.0, 26.0, 5.0, 50.0],
    })

    polygons = voronoi_polygons(frame)

    assert [team for team, _ in polygons] == ['SEA', 'SEA', 'LA', 'LA', 'LA']
    for _, poly in polygons:
        assert (poly[:, 0] >= 0).all() and (poly[:, 0] <= 120).all()
        assert (poly[:, 1] >= 0).all() and (poly[:, 1] <= 160 / 3 + 1e-9).all()

    total = sum(polygon_area(poly) for _, poly in polygons)
    assert np.isclose(total, 120 * 160 / 3, rtol=1e-6)


def test_builder_draws_in_fixed_order(play_rows):
    """
    Layers added out of order are still stacked field -> lines -> ... -> title.
    """
    fig, ax = plot_field()
    players = play_rows[play_rows['displayName'] != 'football'].assign(v_x=1.0, v_y=0.0)
    ball = play_rows[play_rows['displayName'] == 'football']

    builder = PlotBuilder(ax)
    builder.add(Title('title', 'caption'))
    builder.add(Markers(ball, fill='brown', stroke='white', kind='ball_marker'))
    builder.add(TextLabels(players, 'jerseyNumber'))
    builder.add(Markers(players, fill='blue', stroke='white'))
    builder.add(VelocityArrows(players))
    builder.add(ReferenceLines(35.0, 45.0))

    kinds = [layer.kind for layer in builder.ordered_layers()]
    assert kinds == sorted(kinds, key=LAYER_ORDER.get)
    assert kinds[0] == 'reference_lines' and kinds[-1] == 'title'

    artists = builder.render()
    zorders = [artist.get_zorder() for artist in artists]
    assert zorders == sorted(zorders)

    builder.clear()
    assert builder.artists == [] and builder.layers == []
    plt.close(fig)


def test_builder_rejects_unknown_layer():
    fig, ax = plot_field()
    with pytest.raises(ValueError):
        PlotBuilder(ax).add(Title('t', kind='scoreboard'))
    plt.close(fig)


def test_plot_play_frame_overlays(prepared_play):
    fig = plot_play_frame(prepared_play, 2, velocities=True, voronoi=True)
    ax = fig.axes[0]

    assert ax.get_xlim() == (0, 120)
    assert len(ax.collections) > 0
    plt.close(fig)


def test_plot_play_frame_unknown_frame(prepared_play):
    with pytest.raises(ValueError):
        plot_play_frame(prepared_play, 99)


def test_sequence_frames_snap_and_dedupe(prepared_play):
    assert sequence_frames(prepared_play, n=3) == [1, 2, 3]
    # More requested than exist: snapped duplicates collapse
    assert sequence_frames(prepared_play, n=6) == [1, 2, 3]


def test_plot_play_sequence_grid(prepared_play):
    fig = plot_play_sequence(prepared_play, n=3)

    # 2 columns x 2 rows, one spare cell
    assert len(fig.axes) == 4
    plt.close(fig)


def test_generate_animation_writes_gif(tmp_path, prepared_play):
    engine = AnimationEngine(output_dir=str(tmp_path), end_pause=2)

    path = engine.generate_animation(prepared_play, filename='play.gif')

    assert path == os.path.join(str(tmp_path), 'play.gif')
    assert os.path.getsize(path) > 0


def test_interactive_animation_frames(prepared_play):
    fig = create_field_animation(prepared_play)

    assert [frame.name for frame in fig.frames] == ['1', '2', '3']
    roles = {trace.name for trace in fig.data}
    assert {'Fastest', 'Football'} <= roles
