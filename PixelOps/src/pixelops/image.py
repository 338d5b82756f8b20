# -*- coding: utf-8 -*-
# Copyright (c) 2024-2026 Vasile Lucian Borbeleac / FRAGMERGENT TECHNOLOGY S.R.L.
# Cluj-Napoca, Romania

"""Image data model for PixelOps.

An image is a (height, width, 3) int64 NumPy array of RGB triples. Every
operation validates its input through `as_image` and returns a fresh,
read-only array, so images behave as immutable values.
"""

from typing import Optional, Tuple

import numpy as np

MAX_VALUE = 255
CHANNELS = 3

BLACK = (0, 0, 0)
WHITE = (MAX_VALUE, MAX_VALUE, MAX_VALUE)


class ImageError(ValueError):
    """Base class for PixelOps errors."""


class ShapeMismatch(ImageError):
    """Pixel grid is not a rectangular grid of 8-bit RGB triples."""


class InvalidThreshold(ImageError):
    """Edge-detection threshold outside the open interval (0, 255)."""


class UnknownOperation(ImageError):
    """Pipeline step does not name a known operation."""


def freeze(arr: np.ndarray) -> np.ndarray:
    """Clear the write flag so the array can be shared as a value."""
    arr.setflags(write=False)
    return arr


def as_image(rows,
             width: Optional[int] = None,
             height: Optional[int] = None,
             depth: int = MAX_VALUE) -> np.ndarray:
    """Validate a pixel grid and return it as a read-only image array.

    Args:
        rows: Nested rows of (r, g, b) triples, or an array of shape
            (height, width, 3).
        width: Declared width, checked against the grid if given.
        height: Declared height, checked against the grid if given.
        depth: Declared maximum channel value; only 255 is supported.

    Returns:
        New int64 array of shape (height, width, 3) with writes disabled.

    Raises:
        ShapeMismatch: ragged rows, wrong channel count or depth,
            non-integer channels, or dimensions that disagree.
    """
    if depth != MAX_VALUE:
        raise ShapeMismatch(f"unsupported channel depth {depth}, expected {MAX_VALUE}")

    try:
        arr = np.asarray(rows)
    except ValueError as exc:
        raise ShapeMismatch("image rows must all have the same length") from exc

    if arr.size == 0 and arr.ndim < 3:
        # [] or [[], [], ...]
        n_rows = arr.shape[0] if arr.ndim >= 1 else 0
        n_cols = width if (n_rows == 0 and width is not None) else 0
        arr = np.zeros((n_rows, n_cols, CHANNELS), dtype=np.int64)

    if arr.ndim != 3 or arr.shape[2] != CHANNELS:
        raise ShapeMismatch(
            f"expected a height x width x {CHANNELS} grid, got shape {arr.shape}")
    if not np.issubdtype(arr.dtype, np.integer):
        raise ShapeMismatch(f"pixel channels must be integers, got {arr.dtype}")

    h, w = arr.shape[:2]
    if width is not None and width != w:
        raise ShapeMismatch(f"declared width {width} but rows hold {w} pixels")
    if height is not None and height != h:
        raise ShapeMismatch(f"declared height {height} but grid has {h} rows")

    return freeze(arr.astype(np.int64))


def dimensions(image) -> Tuple[int, int]:
    """Return (width, height) of an image array."""
    arr = np.asarray(image)
    return int(arr.shape[1]), int(arr.shape[0])


def to_rows(image) -> list:
    """Convert an image array back to a list of rows of (r, g, b) tuples."""
    return [[tuple(px) for px in row] for row in np.asarray(image).tolist()]
