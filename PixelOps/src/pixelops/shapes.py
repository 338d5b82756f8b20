# -*- coding: utf-8 -*-
# Copyright (c) 2024-2026 Vasile Lucian Borbeleac / FRAGMERGENT TECHNOLOGY S.R.L.
# Cluj-Napoca, Romania

"""Synthetic RGB test images for PixelOps.

Hard-edged shapes give a known edge layout; the gradient and the smoothed
noise background change slowly enough to stay below typical thresholds.
"""

import numpy as np
from scipy.ndimage import gaussian_filter

BACKGROUND = (30, 60, 90)
FOREGROUND = (230, 200, 40)


# ============================================================
# PRIMITIVES
# ============================================================

def _make_canvas(size: int = 32, color: tuple = BACKGROUND) -> np.ndarray:
    """Create a canvas filled with one color."""
    img = np.zeros((size, size, 3), dtype=np.int64)
    img[:, :] = color
    return img


def _add_rect(img: np.ndarray, x0: int, y0: int, x1: int, y1: int,
              color: tuple = FOREGROUND) -> None:
    """Draw a filled rectangle."""
    img[y0:y1, x0:x1] = color


def _add_circle(img: np.ndarray, cx: int, cy: int, r: int,
                color: tuple = FOREGROUND) -> None:
    """Draw a filled circle."""
    yy, xx = np.indices(img.shape[:2])
    img[(xx - cx) ** 2 + (yy - cy) ** 2 <= r * r] = color


# ============================================================
# SHAPE GENERATORS
# ============================================================

def make_solid(s: int = 32) -> np.ndarray:
    """Uniform color: no edges anywhere."""
    return _make_canvas(s)


def make_square(s: int = 32) -> np.ndarray:
    """Centered square: straight horizontal and vertical edges."""
    img = _make_canvas(s)
    _add_rect(img, s // 4, s // 4, 3 * s // 4, 3 * s // 4)
    return img


def make_circle(s: int = 32) -> np.ndarray:
    """Centered disc: curved edges."""
    img = _make_canvas(s)
    _add_circle(img, s // 2, s // 2, s // 3)
    return img


def make_stripes(s: int = 32, width: int = 4) -> np.ndarray:
    """Vertical stripes: edges only between columns."""
    img = _make_canvas(s)
    for x in range(0, s, 2 * width):
        _add_rect(img, x, 0, min(s, x + width), s)
    return img


def make_checker(s: int = 32, cell: int = 4) -> np.ndarray:
    """Checkerboard: edges along every cell border."""
    img = _make_canvas(s)
    for y in range(0, s, cell):
        for x in range(0, s, cell):
            if ((x // cell) + (y // cell)) % 2 == 0:
                _add_rect(img, x, y, min(s, x + cell), min(s, y + cell))
    return img


def make_gradient(s: int = 32) -> np.ndarray:
    """Horizontal black-to-white ramp: small steps between neighbors."""
    ramp = np.linspace(0, 255, s).astype(np.int64)
    img = np.zeros((s, s, 3), dtype=np.int64)
    img[:, :] = ramp[np.newaxis, :, np.newaxis]
    return img


def make_textured_square(s: int = 32) -> np.ndarray:
    """Square on a low-contrast smoothed-noise background."""
    rng = np.random.default_rng(0)
    base = gaussian_filter(rng.normal(0.0, 1.0, (s, s)), 2.0)
    base = (base - base.min()) / (base.max() - base.min() + 1e-12) * 12.0
    img = _make_canvas(s) + base.astype(np.int64)[..., np.newaxis]
    _add_rect(img, s // 4, s // 4, 3 * s // 4, 3 * s // 4)
    return img


# ============================================================
# REGISTRY
# ============================================================

SHAPES: dict = {
    "solid": make_solid,
    "square": make_square,
    "circle": make_circle,
    "stripes": make_stripes,
    "checker": make_checker,
    "gradient": make_gradient,
    "textured_square": make_textured_square,
}

#: Shapes whose neighbor-to-neighbor distance stays small everywhere
SMOOTH_SHAPES: set = {"solid", "gradient"}

#: Shapes with at least one hard edge
EDGED_SHAPES: list = [k for k in SHAPES if k not in SMOOTH_SHAPES]
