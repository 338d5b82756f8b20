# -*- coding: utf-8 -*-
# Copyright (c) 2024-2026 Vasile Lucian Borbeleac / FRAGMERGENT TECHNOLOGY S.R.L.
# Cluj-Napoca, Romania

"""Edge detection for PixelOps.

Each pixel is compared with its right and bottom neighbors; if the RGB
distance to either one strictly exceeds the threshold the pixel becomes
black, otherwise white. The last row and last column have no complete
neighbor pair and are dropped, so the output is one pixel narrower and
one pixel shorter than the input.
"""

import math
from typing import Optional

import numpy as np

from pixelops.image import BLACK, MAX_VALUE, WHITE, InvalidThreshold, as_image, freeze
from pixelops.pixels import color_distance, color_distance_map

#: Largest possible distance between two 8-bit RGB pixels.
MAX_DISTANCE = MAX_VALUE * math.sqrt(3)


def validate_threshold(threshold) -> int:
    """Check a threshold against the open interval (0, 255).

    `edge_detect` itself accepts any number; callers use this to reject
    values outside the supported range before running it.

    Args:
        threshold: Candidate threshold.

    Returns:
        The threshold as an int.

    Raises:
        InvalidThreshold: not an integer, or not in (0, 255).
    """
    if isinstance(threshold, bool) or not isinstance(threshold, (int, np.integer)):
        raise InvalidThreshold(f"threshold must be an integer, got {threshold!r}")
    if not 0 < threshold < MAX_VALUE:
        raise InvalidThreshold(f"threshold must satisfy 0 < t < {MAX_VALUE}, got {threshold}")
    return int(threshold)


def is_edge(pixel, neighbor: Optional[tuple], threshold: float) -> bool:
    """True if `neighbor` exists and differs from `pixel` by more than `threshold`."""
    return neighbor is not None and color_distance(pixel, neighbor) > threshold


def classify_pixel(pixel, right: Optional[tuple], bottom: Optional[tuple],
                   threshold: float) -> tuple:
    """BLACK if either neighbor is an edge, WHITE otherwise."""
    if is_edge(pixel, right, threshold) or is_edge(pixel, bottom, threshold):
        return BLACK
    return WHITE


def edge_map(image, threshold: float,
             width: Optional[int] = None,
             height: Optional[int] = None,
             depth: int = MAX_VALUE) -> np.ndarray:
    """Boolean edge map of shape (height - 1, width - 1).

    Args:
        image: Pixel grid accepted by `as_image`.
        threshold: Distance that must be strictly exceeded to mark an edge.
        width, height, depth: Declared header values, checked against the grid.

    Returns:
        Read-only boolean array; True marks an edge.
    """
    img = as_image(image, width, height, depth)
    limit = float(threshold)

    pixel = img[:-1, :-1]
    right = img[:-1, 1:]
    bottom = img[1:, :-1]

    edges = (color_distance_map(pixel, right) > limit) | (color_distance_map(pixel, bottom) > limit)
    return freeze(edges)


def edge_detect(image, threshold: float,
                width: Optional[int] = None,
                height: Optional[int] = None,
                depth: int = MAX_VALUE) -> np.ndarray:
    """Render the edge map as a black/white image.

    Inputs one pixel wide or tall give an empty image. No threshold is
    rejected here: <= 0 marks almost everything, >= MAX_DISTANCE nothing.

    Args:
        image: Pixel grid accepted by `as_image`.
        threshold: Edge threshold, normally 0 < threshold < 255.
        width, height, depth: Declared header values, checked against the grid.

    Returns:
        New read-only image of size (width - 1) x (height - 1).
    """
    edges = edge_map(image, threshold, width, height, depth)
    out = np.where(edges[..., np.newaxis],
                   np.asarray(BLACK, dtype=np.int64),
                   np.asarray(WHITE, dtype=np.int64))
    return freeze(out.astype(np.int64))
