# -*- coding: utf-8 -*-
# Copyright (c) 2024-2026 Vasile Lucian Borbeleac / FRAGMERGENT TECHNOLOGY S.R.L.
# Cluj-Napoca, Romania

"""Evaluation metrics for PixelOps edge images.

Edge images mark edges with black pixels. Two edge maps are compared
symmetrically: an edge pixel in one map counts as matched when the other
map has an edge within `tol_px`, so one-pixel shifts are not penalised.
"""

import numpy as np
from scipy.ndimage import distance_transform_edt

from pixelops.image import BLACK, ShapeMismatch, as_image


def edge_mask(image) -> np.ndarray:
    """Boolean mask of the black (edge) pixels of an edge image."""
    img = as_image(image)
    return np.all(img == np.asarray(BLACK), axis=-1)


def _as_mask(edges) -> np.ndarray:
    arr = np.asarray(edges)
    if arr.dtype == bool:
        return arr
    return edge_mask(arr)


def edge_density(image) -> float:
    """Fraction of pixels marked as edges (0.0 for an empty image)."""
    mask = _as_mask(image)
    if mask.size == 0:
        return 0.0
    return float(mask.mean())


def _near(mask: np.ndarray, other: np.ndarray, tol_px: int) -> np.ndarray:
    """Pixels of `mask` lying within `tol_px` of an edge in `other`."""
    if not other.any():
        return np.zeros_like(mask)
    return mask & (distance_transform_edt(~other) <= tol_px)


def edge_metrics_symmetric(edges, reference, tol_px: int = 1) -> dict:
    """Score an edge map against a reference edge map.

    Args:
        edges: Edge image or boolean mask being scored.
        reference: Edge image or boolean mask taken as correct.
        tol_px: Largest displacement, in pixels, still counted as a match.

    Returns:
        Dictionary with 'p' (precision), 'r' (recall), 'f1' and the
        'TP', 'FP', 'FN' pixel counts. Two empty maps score 1.0.

    Raises:
        ShapeMismatch: the two maps have different sizes.
    """
    found = _as_mask(edges)
    expected = _as_mask(reference)
    if found.shape != expected.shape:
        raise ShapeMismatch(f"edge maps differ in size: {found.shape} vs {expected.shape}")

    n_found = int(found.sum())
    n_expected = int(expected.sum())
    if n_found == 0 and n_expected == 0:
        return {"p": 1.0, "r": 1.0, "f1": 1.0, "TP": 0, "FP": 0, "FN": 0}

    hits = int(_near(found, expected, tol_px).sum())
    recovered = int(_near(expected, found, tol_px).sum())
    counts = {"TP": hits, "FP": n_found - hits, "FN": n_expected - recovered}

    precision = hits / n_found if n_found else 0.0
    recall = recovered / n_expected if n_expected else 0.0
    f1 = 0.0
    if precision + recall > 0:
        f1 = 2 * precision * recall / (precision + recall)

    return {"p": precision, "r": recall, "f1": f1, **counts}
