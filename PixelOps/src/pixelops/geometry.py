# -*- coding: utf-8 -*-
# Copyright (c) 2024-2026 Vasile Lucian Borbeleac / FRAGMERGENT TECHNOLOGY S.R.L.
# Cluj-Napoca, Romania

"""Geometric transformations for images."""

from typing import Optional

import numpy as np

from pixelops.image import MAX_VALUE, as_image, freeze


def flip_horizontal(image,
                    width: Optional[int] = None,
                    height: Optional[int] = None,
                    depth: int = MAX_VALUE) -> np.ndarray:
    """Mirror horizontally (reverse the pixels of each row)."""
    return freeze(np.flip(as_image(image, width, height, depth), axis=1).copy())


def rotate_180(image,
               width: Optional[int] = None,
               height: Optional[int] = None,
               depth: int = MAX_VALUE) -> np.ndarray:
    """Rotate 180° (reverse the row order and each row)."""
    return freeze(np.flip(as_image(image, width, height, depth), axis=(0, 1)).copy())
