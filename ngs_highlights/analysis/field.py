import numpy as np
import matplotlib.pyplot as plt
import matplotlib.patches as patches
from ngs_highlights.config import pipeline_config

FIELD_COLOR = '#3d8b40'
END_ZONE_COLOR = '#1b5e20'


def plot_field(ax=None, figsize=None, show_numbers=True, zorder=0):
    """
    Draws the static field background.
    Coordinates: x in [0, 120] yards (end zones included), y in [0, 160/3] yards.
    Returns (fig, ax).
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize or pipeline_config.figsize)
    else:
        fig = ax.figure

    length = pipeline_config.FIELD_LENGTH
    width = pipeline_config.FIELD_WIDTH
    mid_y = width / 2

    ax.set_xlim(0, length)
    ax.set_ylim(0, width)
    ax.set_facecolor(END_ZONE_COLOR)
    ax.set_aspect('equal')
    ax.axis('off')

    # Field of play with sidelines
    field_rect = patches.Rectangle((10, 0), length - 20, width, linewidth=2,
                                   edgecolor='white', facecolor=FIELD_COLOR, zorder=zorder)
    ax.add_patch(field_rect)

    # End zones
    ez_left = patches.Rectangle((0, 0), 10, width, facecolor=END_ZONE_COLOR, edgecolor='white', linewidth=2, zorder=zorder)
    ez_right = patches.Rectangle((length - 10, 0), 10, width, facecolor=END_ZONE_COLOR, edgecolor='white', linewidth=2, zorder=zorder)
    ax.add_patch(ez_left)
    ax.add_patch(ez_right)

    # Yard lines (every 5 yards, bold every 10)
    for x in range(10, int(length) - 9, 5):
        lw = 1.5 if x % 10 == 0 else 0.75
        alpha = 1.0 if x % 10 == 0 else 0.7
        ax.plot([x, x], [0, width], color='white', linewidth=lw, alpha=alpha, zorder=zorder + 0.1)

    if show_numbers:
        for x in range(20, int(length) - 10, 10):
            num = (x - 10) if x <= 60 else (int(length) - 10 - x)
            ax.text(x, width - 5, str(num), color='white', ha='center', va='center',
                    fontsize=9, fontweight='bold', alpha=0.8, rotation=180, zorder=zorder + 0.1)
            ax.text(x, 5, str(num), color='white', ha='center', va='center',
                    fontsize=9, fontweight='bold', alpha=0.8, zorder=zorder + 0.1)

    # Hash marks (NFL spacing: 70'9" from each sideline)
    hash_y_top = width - 23.58
    hash_y_bot = 23.58
    hash_x = np.arange(11, length - 10, 1)
    ax.vlines(hash_x, hash_y_top, hash_y_top + 0.66, color='white', linewidth=0.75, alpha=0.8, zorder=zorder + 0.1)
    ax.vlines(hash_x, hash_y_bot - 0.66, hash_y_bot, color='white', linewidth=0.75, alpha=0.8, zorder=zorder + 0.1)

    ax.text(5, mid_y, 'END ZONE', ha='center', va='center', fontsize=7,
            fontweight='bold', color='white', alpha=0.6, rotation=90, zorder=zorder + 0.1)
    ax.text(length - 5, mid_y, 'END ZONE', ha='center', va='center', fontsize=7,
            fontweight='bold', color='white', alpha=0.6, rotation=270, zorder=zorder + 0.1)

    return fig, ax
