import numpy as np
import pandas as pd
from scipy.spatial import Voronoi
from ngs_highlights.config import pipeline_config


def _mirror(points, length, width):
    """
    Reflects the points across all four field boundaries.
    The original points' cells then close exactly on the field edges.
    """
    x, y = points[:, 0], points[:, 1]
    return np.vstack([
        points,
        np.column_stack([-x, y]),
        np.column_stack([2 * length - x, y]),
        np.column_stack([x, -y]),
        np.column_stack([x, 2 * width - y]),
    ])


def _ordered(vertices):
    # Cells are convex: sorting by angle around the centroid gives the outline
    center = vertices.mean(axis=0)
    angles = np.arctan2(vertices[:, 1] - center[1], vertices[:, 0] - center[0])
    return vertices[np.argsort(angles)]


def voronoi_polygons(frame_df: pd.DataFrame, length=None, width=None):
    """
    Pitch-control proxy: each player owns the part of the field nearest to them.
    Returns [(teamAbbr, polygon), ...] in row order of frame_df, polygon is an (k, 2) array.
    """
    length = length or pipeline_config.FIELD_LENGTH
    width = width or pipeline_config.FIELD_WIDTH

    if frame_df.empty:
        return []

    points = frame_df[['x', 'y']].to_numpy(dtype=float)
    points[:, 0] = np.clip(points[:, 0], 0, length)
    points[:, 1] = np.clip(points[:, 1], 0, width)

    vor = Voronoi(_mirror(points, length, width))

    polygons = []
    for i, team in enumerate(frame_df['teamAbbr'].tolist()):
        region_idx = vor.point_region[i]
        if region_idx < 0:
            continue
        region = vor.regions[region_idx]
        if not region or -1 in region:
            continue

        vertices = vor.vertices[region]
        vertices[:, 0] = np.clip(vertices[:, 0], 0, length)
        vertices[:, 1] = np.clip(vertices[:, 1], 0, width)
        polygons.append((team, _ordered(vertices)))

    return polygons
