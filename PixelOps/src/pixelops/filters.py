# -*- coding: utf-8 -*-
# Copyright (c) 2024-2026 Vasile Lucian Borbeleac / FRAGMERGENT TECHNOLOGY S.R.L.
# Cluj-Napoca, Romania

"""Per-pixel color filters: sepia tone and single-channel intensity scaling."""

from typing import Optional, Tuple

import numpy as np

from pixelops.image import MAX_VALUE, as_image, freeze
from pixelops.pixels import saturate, scale_channels

#: Sepia weights, one row per output channel, columns in (r, g, b) order.
SEPIA_WEIGHTS = (
    (0.393, 0.769, 0.189),
    (0.349, 0.686, 0.168),
    (0.272, 0.534, 0.131),
)

CHANNEL_INDEX = {"r": 0, "g": 1, "b": 2}


def _sepia_channels(r, g, b):
    # r term, then g, then b: the order fixes where truncation lands
    return [saturate(wr * r + wg * g + wb * b) for wr, wg, wb in SEPIA_WEIGHTS]


def sepia_filter(pixel) -> tuple:
    """Apply the sepia remap to a single (r, g, b) pixel."""
    r, g, b = (float(c) for c in pixel)
    return tuple(int(c) for c in _sepia_channels(r, g, b))


def sepia(image,
          width: Optional[int] = None,
          height: Optional[int] = None,
          depth: int = MAX_VALUE) -> np.ndarray:
    """Convert an entire image to sepia tone.

    Args:
        image: Pixel grid accepted by `as_image`.
        width, height, depth: Declared header values, checked against the grid.

    Returns:
        New read-only image with the same dimensions.
    """
    img = as_image(image, width, height, depth).astype(np.float64)
    channels = _sepia_channels(img[..., 0], img[..., 1], img[..., 2])
    return freeze(np.stack(channels, axis=-1).astype(np.int64))


def channel_factors(channel, intensity: float) -> Tuple[float, float, float]:
    """Scale factors for `increase_intensity`.

    Only 'r', 'g' and 'b' select a channel; anything else gives (1, 1, 1).
    """
    factors = [1.0, 1.0, 1.0]
    idx = CHANNEL_INDEX.get(channel)
    if idx is not None:
        factors[idx] = float(intensity)
    return tuple(factors)


def increase_intensity(image, intensity: float, channel,
                       width: Optional[int] = None,
                       height: Optional[int] = None,
                       depth: int = MAX_VALUE) -> np.ndarray:
    """Scale one RGB channel of every pixel by `intensity`.

    An unrecognized `channel` leaves the values unscaled, but they still
    pass through the clamp, so out-of-range input comes back in [0, 255].

    Args:
        image: Pixel grid accepted by `as_image`.
        intensity: Scale factor; values below 1 darken the channel.
        channel: One of 'r', 'g', 'b'.
        width, height, depth: Declared header values, checked against the grid.

    Returns:
        New read-only image with the same dimensions.
    """
    img = as_image(image, width, height, depth)
    return freeze(scale_channels(img, channel_factors(channel, intensity)))
