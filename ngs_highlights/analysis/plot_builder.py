"""
Overlay composition for field plots.

Layers are plain specs; PlotBuilder draws them on top of a field canvas in a
fixed stacking order, whatever order they were added in:

    field -> voronoi -> reference lines -> velocity arrows -> player markers
          -> jersey labels -> ball marker -> fastest highlight -> title/caption
"""
import numpy as np
import pandas as pd
from dataclasses import dataclass
from matplotlib.collections import PolyCollection
from typing import Any, Dict, List, Optional
from ngs_highlights.config import pipeline_config

LAYER_ORDER = {
    'voronoi': 1,
    'reference_lines': 2,
    'velocity_arrows': 3,
    'player_markers': 4,
    'jersey_labels': 5,
    'ball_marker': 6,
    'fastest_highlight': 7,
    'title': 8,
}


@dataclass
class VoronoiCells:
    polygons: List[Any]
    colors: Dict[str, str]
    alpha: float = 0.35
    kind: str = 'voronoi'


@dataclass
class ReferenceLines:
    los: float
    first_down: float
    los_color: str = pipeline_config.LOS_COLOR
    first_down_color: str = pipeline_config.FIRST_DOWN_COLOR
    kind: str = 'reference_lines'


@dataclass
class VelocityArrows:
    source: pd.DataFrame
    color: str = 'white'
    scale: float = pipeline_config.ARROW_SCALE # yards drawn per yd/s
    kind: str = 'velocity_arrows'


@dataclass
class Markers:
    source: pd.DataFrame
    fill: Any
    stroke: Any
    shape: str = 'o'
    radius: float = 7.0 # points
    kind: str = 'player_markers' # or 'ball_marker' / 'fastest_highlight'


@dataclass
class TextLabels:
    source: pd.DataFrame
    field: str
    color: Any = 'white'
    fontsize: float = 6.0
    kind: str = 'jersey_labels'


@dataclass
class Title:
    title: str
    caption: Optional[str] = None
    kind: str = 'title'


def _label_text(value):
    if pd.isna(value):
        return ''
    if isinstance(value, (float, np.floating)) and float(value).is_integer():
        return str(int(value))
    return str(value)


class PlotBuilder:
    def __init__(self, ax):
        self.ax = ax
        self.layers = []
        self.artists = []

    def add(self, layer):
        if layer.kind not in LAYER_ORDER:
            raise ValueError(f"Unknown layer kind: {layer.kind}")
        self.layers.append(layer)
        return self

    def extend(self, layers):
        for layer in layers:
            self.add(layer)
        return self

    def ordered_layers(self):
        # sorted() is stable: same-kind layers keep their insertion order
        return sorted(self.layers, key=lambda layer: LAYER_ORDER[layer.kind])

    def render(self):
        for layer in self.ordered_layers():
            zorder = 1 + LAYER_ORDER[layer.kind]
            draw = getattr(self, f"_draw_{layer.kind}")
            self.artists.extend(draw(layer, zorder))
        return self.artists

    def clear(self):
        """Removes everything this builder drew and forgets its layers."""
        for artist in self.artists:
            artist.remove()
        self.artists = []
        self.layers = []
        self.ax.set_title('', loc='left')

    # ------------------------------------------
    # Layer painters
    # ------------------------------------------
    def _draw_voronoi(self, layer, zorder):
        if not layer.polygons:
            return []
        verts = [poly for _, poly in layer.polygons]
        colors = [layer.colors.get(team, '#cccccc') for team, _ in layer.polygons]
        cells = PolyCollection(verts, facecolors=colors, edgecolors='white',
                               linewidths=0.5, alpha=layer.alpha, zorder=zorder)
        self.ax.add_collection(cells)
        return [cells]

    def _draw_reference_lines(self, layer, zorder):
        los = self.ax.axvline(layer.los, color=layer.los_color, linewidth=1.5, zorder=zorder)
        first_down = self.ax.axvline(layer.first_down, color=layer.first_down_color, linewidth=1.5, zorder=zorder)
        return [los, first_down]

    def _draw_velocity_arrows(self, layer, zorder):
        src = layer.source.dropna(subset=['v_x', 'v_y'])
        if src.empty:
            return []
        arrows = self.ax.quiver(
            src['x'], src['y'], src['v_x'] * layer.scale, src['v_y'] * layer.scale,
            angles='xy', scale_units='xy', scale=1, color=layer.color,
            width=0.002, headwidth=4, zorder=zorder)
        return [arrows]

    def _draw_markers(self, layer, zorder):
        if layer.source.empty:
            return []
        hollow = isinstance(layer.fill, str) and layer.fill == 'none'
        scat = self.ax.scatter(
            layer.source['x'], layer.source['y'], s=(2 * layer.radius) ** 2,
            facecolors='none' if hollow else layer.fill,
            edgecolors=layer.stroke, linewidths=1.5, marker=layer.shape, zorder=zorder)
        return [scat]

    _draw_player_markers = _draw_markers
    _draw_ball_marker = _draw_markers
    _draw_fastest_highlight = _draw_markers

    def _draw_jersey_labels(self, layer, zorder):
        texts = []
        for _, row in layer.source.iterrows():
            texts.append(self.ax.text(row['x'], row['y'], _label_text(row[layer.field]),
                                      color=layer.color, ha='center', va='center',
                                      fontsize=layer.fontsize, fontweight='bold', zorder=zorder))
        return texts

    def _draw_title(self, layer, zorder):
        self.ax.set_title(layer.title, fontsize=8, loc='left', wrap=True)
        if not layer.caption:
            return []
        caption = self.ax.text(0.5, -0.02, layer.caption, transform=self.ax.transAxes,
                               ha='center', va='top', fontsize=8, zorder=zorder)
        return [caption]
