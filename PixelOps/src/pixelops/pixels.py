# -*- coding: utf-8 -*-
# Copyright (c) 2024-2026 Vasile Lucian Borbeleac / FRAGMERGENT TECHNOLOGY S.R.L.
# Cluj-Napoca, Romania

"""Pixel primitives shared by all PixelOps operations.

Scalar helpers take and return plain (r, g, b) tuples; the array helpers
apply the same arithmetic to any (..., 3) array in one vectorised pass.
"""

import numpy as np

from pixelops.image import MAX_VALUE


def clamp(value):
    """Clamp to [0, 255]. Scalars give an int, arrays are clipped element-wise."""
    if np.ndim(value) == 0:
        return max(0, min(int(value), MAX_VALUE))
    return np.clip(value, 0, MAX_VALUE)


def truncate(values) -> np.ndarray:
    """Convert floats to int64, rounding toward zero."""
    return np.trunc(np.asarray(values, dtype=np.float64)).astype(np.int64)


def saturate(values):
    """Truncate toward zero and clamp to [0, 255] in one step.

    Clipping happens before the integer cast, so huge or infinite products
    land on 255 instead of wrapping. NaN (0 * inf) counts as 0.
    """
    x = np.nan_to_num(np.asarray(values, dtype=np.float64), nan=0.0)
    out = np.trunc(np.clip(x, 0, MAX_VALUE)).astype(np.int64)
    if out.ndim == 0:
        return int(out)
    return out


def scale_channels(pixels, factors) -> np.ndarray:
    """Scale each channel, truncate toward zero and clamp.

    Args:
        pixels: Array-like of shape (..., 3).
        factors: (rf, gf, bf) scale factors.

    Returns:
        int64 array with the same shape as `pixels`.
    """
    scaled = np.asarray(factors, dtype=np.float64) * np.asarray(pixels, dtype=np.float64)
    return saturate(scaled)


def update_pixel(pixel, factors) -> tuple:
    """Scale one pixel by (rf, gf, bf) and clamp each channel."""
    return tuple(int(c) for c in scale_channels(pixel, factors))


def color_distance_map(a, b) -> np.ndarray:
    """Euclidean RGB distance between matching pixels of two (..., 3) arrays."""
    d = np.asarray(a, dtype=np.float64) - np.asarray(b, dtype=np.float64)
    return np.sqrt(d[..., 0] * d[..., 0] + d[..., 1] * d[..., 1] + d[..., 2] * d[..., 2])


def color_distance(p1, p2) -> float:
    """Distance between two pixels as points in 3-D color space."""
    return float(color_distance_map(p1, p2))
