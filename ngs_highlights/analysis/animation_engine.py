import os
import matplotlib.pyplot as plt
import matplotlib.animation as animation
from ngs_highlights.config import pipeline_config
from ngs_highlights.analysis.field import plot_field
from ngs_highlights.analysis.plot_builder import PlotBuilder
from ngs_highlights.analysis.frame_plotter import frame_layers


def sample_frames(frames, end_pause=None):
    """
    Distinct frames in order, then the last one repeated end_pause times
    so the final picture holds before the loop restarts.
    """
    end_pause = pipeline_config.END_PAUSE if end_pause is None else end_pause
    ordered = sorted(set(frames))
    if not ordered:
        return []
    return ordered + [ordered[-1]] * end_pause


class AnimationEngine:
    def __init__(self, output_dir=None, fps=None, end_pause=None):
        self.output_dir = output_dir or pipeline_config.OUTPUT_DIR
        os.makedirs(self.output_dir, exist_ok=True)

        self.fps = fps or pipeline_config.FPS
        self.end_pause = pipeline_config.END_PAUSE if end_pause is None else end_pause

    def _writer(self, filename):
        return 'pillow' if filename.lower().endswith('.gif') else 'ffmpeg'

    def generate_animation(self, play, filename="play_animation.gif", velocities=False, voronoi=False):
        print(f"   [Animator] Rendering play {play.play_key} ({len(play.frames)} frames)...")

        frames_list = sample_frames(play.frames, self.end_pause)
        if not frames_list:
            raise ValueError(f"Play {play.play_key} has no frames to animate")

        # Setup Figure (850 x 500 px)
        fig, ax = plot_field(figsize=pipeline_config.figsize)
        builder = PlotBuilder(ax)

        # Update Loop: frames_list holds frame values (the pause repeats the last one)
        def update(frame):
            builder.clear()
            builder.extend(frame_layers(play, frame, velocities=velocities, voronoi=voronoi))
            return builder.render()

        ani = animation.FuncAnimation(fig, update, frames=frames_list,
                                      interval=1000 / self.fps, blit=False, repeat=False)

        save_path = os.path.join(self.output_dir, filename)
        ani.save(save_path, writer=self._writer(filename), fps=self.fps, dpi=pipeline_config.DPI)
        plt.close(fig)

        print(f"   -> Saved animation to {save_path}")
        return save_path
