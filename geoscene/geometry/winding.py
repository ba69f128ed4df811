"""
Ring Winding Module
===================

Determines ring orientation and normalizes polygon holes.

Consumers that fill polygons by winding (non-zero rule) only cut a hole out
when the hole winds opposite to the outer ring. GeoJSON input does not pin a
winding convention, so holes are normalized here.

Design:
- Shoelace formula over the ring treated as circular
- Pure functions; inputs are never mutated
"""

from typing import List, Sequence, Tuple

import numpy as np

from geoscene.geometry.shapes import LatLng


def signed_area(ring: Sequence[LatLng]) -> float:
    """
    Signed area of a ring in (lat, lng) space.

    area = sum(lat_i * lng_{i+1} - lat_{i+1} * lng_i) / 2, wrapping the last
    point back to the first. A closed ring (last == first) gives the same
    result as its open form.

    Args:
        ring: Ring vertices in order

    Returns:
        Signed area; 0.0 for rings with fewer than 3 points
    """
    if len(ring) < 3:
        return 0.0

    coords = np.array([(p.lat, p.lng) for p in ring], dtype=float)
    lat = coords[:, 0]
    lng = coords[:, 1]

    # np.roll(-1) lines up each vertex with its successor, wrapping around
    area = np.sum(lat * np.roll(lng, -1) - np.roll(lat, -1) * lng) / 2.0
    return float(area)


def is_clockwise(ring: Sequence[LatLng]) -> bool:
    """
    True if the ring winds clockwise (positive signed area in lat/lng order).

    Degenerate rings (zero area) report False.
    """
    return signed_area(ring) > 0


def orient_rings(
    rings: Sequence[List[LatLng]]
) -> Tuple[List[List[LatLng]], List[int]]:
    """
    Make every hole wind opposite to the outer ring.

    Ring 0 is the outer boundary and is never reversed. Each ring at index
    >= 1 that winds the same way as ring 0 is reversed; the rest pass through.

    Args:
        rings: Outer ring followed by holes

    Returns:
        Tuple of:
        - oriented: New list of rings (reversed holes are new lists)
        - reversed_indices: Indices of the holes that were reversed
    """
    if not rings:
        return [], []

    outer = list(rings[0])
    oriented = [outer]
    reversed_indices: List[int] = []

    if len(rings) == 1:
        return oriented, reversed_indices

    outside_clockwise = is_clockwise(outer)

    for index, ring in enumerate(rings[1:], start=1):
        if is_clockwise(ring) == outside_clockwise:
            oriented.append(list(reversed(ring)))
            reversed_indices.append(index)
        else:
            oriented.append(list(ring))

    return oriented, reversed_indices
