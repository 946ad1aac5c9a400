import os
from datetime import datetime
import matplotlib.pyplot as plt

from ngs_highlights.config import pipeline_config
from ngs_highlights.load_data import DataLoader
from ngs_highlights.data_preprocessor import DataPreProcessor
from ngs_highlights.analysis.frame_plotter import plot_play_frame, plot_play_sequence
from ngs_highlights.analysis.animation_engine import AnimationEngine
from ngs_highlights.analysis.interactive_engine import create_field_animation


def run_full_pipeline(TEAM=None, SEASON=None, PLAY_KEY=None, DATA_SOURCE=None, OUTPUT_DIR=None,
                      interactive=False):
    start_time = datetime.now()

    output_dir = OUTPUT_DIR or pipeline_config.OUTPUT_DIR
    os.makedirs(output_dir, exist_ok=True)

    # 1. LIST
    print(f"[1/5] Loading highlights list ({datetime.now().strftime('%H:%M:%S')})...")
    loader = DataLoader(DATA_SOURCE)
    highlights = loader.fetch_highlights_list(team=TEAM, season=SEASON)
    print(f"   -> {len(highlights)} highlight plays for team={TEAM} season={SEASON}")

    if highlights.empty:
        raise ValueError(f"No highlight plays for team={TEAM} season={SEASON}")

    play_key = PLAY_KEY if PLAY_KEY is not None else int(highlights.iloc[0]['playKey'])

    # 2. FETCH
    print(f"[2/5] Fetching tracking data for play {play_key}...")
    raw_play = loader.fetch_play_data(play_key)

    # 3. PREPARE
    print("[3/5] Preparing play (window, split, velocity, fastest player)...")
    play = DataPreProcessor().run(raw_play)
    print(f"   -> Live window: frames {play.first_frame}-{play.final_frame} "
          f"({len(play.frames)} frames, {play.home_team} vs {play.away_team})")

    # 4. STATIC PLOTS
    print("[4/5] Plotting frames...")
    fig = plot_play_frame(play, play.first_frame, velocities=True, voronoi=True)
    frame_path = os.path.join(output_dir, f"play_{play.play_key}_frame_{play.first_frame}.png")
    fig.savefig(frame_path, dpi=pipeline_config.DPI)
    plt.close(fig)

    fig = plot_play_sequence(play)
    sequence_path = os.path.join(output_dir, f"play_{play.play_key}_sequence.png")
    fig.savefig(sequence_path, dpi=pipeline_config.DPI)
    plt.close(fig)
    print(f"   -> Saved {frame_path} and {sequence_path}")

    # 5. ANIMATION
    print("[5/5] Rendering animation...")
    animator = AnimationEngine(output_dir)
    animator.generate_animation(play, filename=f"play_{play.play_key}.gif")

    if interactive:
        html_path = os.path.join(output_dir, f"play_{play.play_key}.html")
        create_field_animation(play).write_html(html_path)
        print(f"   -> Saved interactive animation to {html_path}")

    duration = datetime.now() - start_time
    print(f"PIPELINE FINISHED in {duration}")

    return play


if __name__ == "__main__":
    run_full_pipeline(TEAM="SEA", SEASON=2019)
