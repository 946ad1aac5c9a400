import math
import numpy as np
import matplotlib.pyplot as plt
from ngs_highlights.config import pipeline_config
from ngs_highlights.analysis.field import plot_field
from ngs_highlights.analysis.team_colors import fetch_team_colors
from ngs_highlights.analysis.voronoi import voronoi_polygons
from ngs_highlights.analysis.plot_builder import (
    PlotBuilder, VoronoiCells, ReferenceLines, VelocityArrows, Markers, TextLabels, Title
)


def frame_event(play, frame):
    events = play.player_data.loc[play.player_data['frame'] == frame, 'event'].dropna().unique()
    return events[0] if len(events) else None


def frame_layers(play, frame, velocities=False, voronoi=False, title=True):
    """
    Builds the overlay specs for one frame of a prepared play.
    """
    players = play.player_data[play.player_data['frame'] == frame]
    if players.empty:
        raise ValueError(f"Frame {frame} is not part of play {play.play_key}")

    ball = play.ball_data[play.ball_data['frame'] == frame]
    home_primary, home_secondary, away_primary, away_secondary = fetch_team_colors(
        play.home_team, play.away_team, diverge=True)

    home = players[players['homeTeamFlag'] == 1]
    away = players[players['homeTeamFlag'] == 0]

    layers = [ReferenceLines(play.los, play.first_down_marker)]

    if voronoi:
        layers.append(VoronoiCells(
            voronoi_polygons(players),
            colors={play.home_team: home_primary, play.away_team: away_primary}))

    if velocities:
        layers.append(VelocityArrows(players))

    layers += [
        Markers(home, fill=home_primary, stroke=home_secondary),
        Markers(away, fill=away_primary, stroke=away_secondary),
        TextLabels(home, 'jerseyNumber', color=home_secondary),
        TextLabels(away, 'jerseyNumber', color=away_secondary),
        Markers(ball, fill=pipeline_config.BALL_COLOR, stroke='white', radius=3.5, kind='ball_marker'),
        Markers(players[players['isFastestFlag'] == 1], fill='none',
                stroke=pipeline_config.FASTEST_COLOR, radius=10.0, kind='fastest_highlight'),
    ]

    if title:
        event = frame_event(play, frame)
        caption = f"Frame {frame}" + (f" | {event}" if event else "")
        layers.append(Title(play.play_description, caption))

    return layers


def plot_play_frame(play, frame, velocities=False, voronoi=False, ax=None):
    """
    Static picture of one frame.
    Optional velocity arrows and Voronoi (pitch control) cells.
    """
    fig, ax = plot_field(ax=ax)

    builder = PlotBuilder(ax)
    builder.extend(frame_layers(play, frame, velocities=velocities, voronoi=voronoi))
    builder.render()

    return fig


def sequence_frames(play, first_frame=None, final_frame=None, n=None):
    """
    n evenly spaced frames between the bounds, snapped onto frames that exist.
    """
    n = n or pipeline_config.SEQUENCE_FRAMES
    first_frame = play.first_frame if first_frame is None else first_frame
    final_frame = play.final_frame if final_frame is None else final_frame

    available = np.array([f for f in play.frames if first_frame <= f <= final_frame])
    if available.size == 0:
        raise ValueError(f"No frames between {first_frame} and {final_frame}")

    targets = np.linspace(first_frame, final_frame, n)
    snapped = [int(available[np.abs(available - t).argmin()]) for t in targets]

    # dict.fromkeys keeps first-seen order
    return list(dict.fromkeys(snapped))


def plot_play_sequence(play, first_frame=None, final_frame=None, n=None, velocities=False, voronoi=False):
    frames = sequence_frames(play, first_frame, final_frame, n)

    cols = min(pipeline_config.SEQUENCE_COLS, len(frames))
    rows = math.ceil(len(frames) / cols)
    width, height = pipeline_config.figsize

    fig, axes = plt.subplots(rows, cols, figsize=(width * cols, height * rows), squeeze=False)

    for ax, frame in zip(axes.flat, frames):
        plot_field(ax=ax)
        builder = PlotBuilder(ax)
        builder.extend(frame_layers(play, frame, velocities=velocities, voronoi=voronoi, title=False))
        builder.render()
        event = frame_event(play, frame)
        ax.set_title(f"Frame {frame}" + (f" | {event}" if event else ""), fontsize=8)

    # Unused grid cells
    for ax in list(axes.flat)[len(frames):]:
        ax.axis('off')

    fig.suptitle(play.play_description, fontsize=9)
    fig.tight_layout()

    return fig
