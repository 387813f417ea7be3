"""
Stroke Grading Engine
- Normalizes traced strokes into a unit frame
- Resamples strokes by arc-length
- Scores a student stroke against the reference stroke (0-100)
"""

import logging
import math
from typing import Dict, List, Mapping, Sequence, Tuple

import numpy as np

import config

logger = logging.getLogger(__name__)

Point = Tuple[float, float]

# ===============================
# Point Helpers
# ===============================

def _as_array(points) -> np.ndarray:
    """View a point sequence as an (N, 2) float array."""
    return np.asarray(points, dtype=np.float64).reshape(-1, 2)


def _to_points(arr: np.ndarray) -> List[Point]:
    return [(float(x), float(y)) for x, y in arr]


def as_points(raw) -> List[Point]:
    """
    Coerce raw stroke data into a list of (x, y) tuples.
    Accepts (x, y) pairs or {"x": .., "y": ..} mappings, the shape used by
    referenceDrawingPoints in exercise payloads.
    """
    if raw is None:
        return []

    points = []
    for item in raw:
        if isinstance(item, Mapping):
            try:
                x, y = item["x"], item["y"]
            except KeyError as e:
                raise ValueError(f"Point {item!r} is missing {e}") from e
        else:
            try:
                x, y = item
            except (TypeError, ValueError) as e:
                raise ValueError(f"Expected an (x, y) pair, got {item!r}") from e
        try:
            points.append((float(x), float(y)))
        except (TypeError, ValueError) as e:
            raise ValueError(f"Non-numeric coordinate in {item!r}") from e
    return points


def flatten_strokes(strokes: Sequence) -> List[Point]:
    """Join several strokes into one point sequence, in drawing order."""
    return [pt for stroke in strokes for pt in as_points(stroke)]


def polyline_length(points) -> float:
    """Total length of a polyline."""
    pts = _as_array(points)
    if len(pts) < 2:
        return 0.0
    return float(np.sqrt((np.diff(pts, axis=0) ** 2).sum(axis=1)).sum())


# ===============================
# Normalization & Resampling
# ===============================

def normalize(points, min_extent: float = config.MIN_BOX_EXTENT) -> List[Point]:
    """
    Map a stroke into the unit box: translate the bounding box corner to the
    origin and divide by its larger side. Width and height are clamped to
    min_extent so single points and straight lines stay finite.
    """
    arr = _as_array(points)
    if len(arr) == 0:
        return []

    minxy = arr.min(axis=0)
    maxxy = arr.max(axis=0)
    extent = np.maximum(maxxy - minxy, min_extent)
    scale = float(extent.max())
    return _to_points((arr - minxy) / scale)


def resample(
    points,
    n: int = config.RESAMPLE_POINTS,
    preserve_short: bool = config.RESAMPLE_PRESERVE_SHORT,
) -> List[Point]:
    """
    Resample a polyline to n points evenly spaced by arc-length.

    With preserve_short, strokes that already have n points or fewer are
    returned unchanged; otherwise they are interpolated up to exactly n.
    """
    pts = _as_array(points)
    if len(pts) == 0 or n <= 0:
        return []
    if preserve_short and len(pts) <= n:
        return _to_points(pts)

    seg_lens = np.sqrt((np.diff(pts, axis=0) ** 2).sum(axis=1))
    cum_len = np.concatenate([[0.0], np.cumsum(seg_lens)])
    total_len = cum_len[-1]

    if len(pts) == 1 or total_len <= 0.0 or n == 1:
        return _to_points(np.tile(pts[0], (n, 1)))

    targets = np.linspace(0.0, total_len, n)
    resampled = []
    for t in targets:
        idx = int(np.searchsorted(cum_len, t, side="right")) - 1
        idx = max(0, min(idx, len(pts) - 2))
        seg_len = cum_len[idx + 1] - cum_len[idx]
        alpha = (t - cum_len[idx]) / seg_len if seg_len > 0 else 0.0
        resampled.append(pts[idx] + alpha * (pts[idx + 1] - pts[idx]))

    # rounding guard
    while len(resampled) < n:
        resampled.append(resampled[-1])

    return _to_points(np.asarray(resampled))


# ===============================
# Stroke Comparison
# ===============================

def _mean_distance(a: np.ndarray, b: np.ndarray) -> float:
    """Mean index-aligned distance over the shorter of the two sequences."""
    m = min(len(a), len(b))
    if m == 0:
        return 1.0
    return float(np.mean(np.linalg.norm(a[:m] - b[:m], axis=1)))


def _similarity_from_distance(avg_distance: float) -> int:
    """Convert a mean unit-frame distance to an integer score in [0, 100]."""
    similarity = min(max(1.0 - avg_distance, 0.0), 1.0)
    return int(math.floor(similarity * 100 + 0.5))


def compare_detailed(
    reference,
    student,
    n: int = config.RESAMPLE_POINTS,
    allow_reverse: bool = config.ALLOW_REVERSE_STROKES,
    preserve_short: bool = config.RESAMPLE_PRESERVE_SHORT,
) -> Dict:
    """
    Score a student stroke against the reference stroke.

    Algorithm:
    1. Normalize each stroke into its own unit frame
    2. Resample both to n points by arc-length
    3. Average the point-to-point distance (forward and reversed)
    4. Score = round((1 - distance) * 100), clamped to 0-100

    Only the forward distance is scored unless allow_reverse is set.
    Returns dict: score (int), distance, forward_distance, reverse_distance,
    direction_ok (bool).
    """
    if len(_as_array(reference)) == 0 or len(_as_array(student)) == 0:
        return {
            "score": 0,
            "distance": 1.0,
            "forward_distance": 1.0,
            "reverse_distance": 1.0,
            "direction_ok": True,
        }

    ref_rs = _as_array(resample(normalize(reference), n, preserve_short))
    user_rs = _as_array(resample(normalize(student), n, preserve_short))

    fwd_avg = _mean_distance(ref_rs, user_rs)
    rev_avg = _mean_distance(ref_rs[::-1], user_rs)

    direction_ok = fwd_avg <= rev_avg
    best_dist = min(fwd_avg, rev_avg) if allow_reverse else fwd_avg
    score = _similarity_from_distance(best_dist)

    logger.debug(
        "Stroke compare: fwd=%.4f rev=%.4f direction_ok=%s score=%d",
        fwd_avg, rev_avg, direction_ok, score,
    )

    return {
        "score": score,
        "distance": best_dist,
        "forward_distance": fwd_avg,
        "reverse_distance": rev_avg,
        "direction_ok": direction_ok,
    }


def compare(
    reference,
    student,
    n: int = config.RESAMPLE_POINTS,
    allow_reverse: bool = config.ALLOW_REVERSE_STROKES,
    preserve_short: bool = config.RESAMPLE_PRESERVE_SHORT,
) -> int:
    """Similarity score (0-100) between a reference and a student stroke."""
    return compare_detailed(reference, student, n, allow_reverse, preserve_short)["score"]


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG if config.DEBUG_MODE else logging.INFO)

    reference = [(i * 100.0 / 9, i * 100.0 / 9) for i in range(10)]
    shifted = [(x * 1.2 + 5, y * 1.2 + 5) for x, y in reference]
    reversed_stroke = list(reversed(reference))
    zigzag = [(0, 0), (50, 0), (0, 50), (50, 50)]

    print(f"Reference: {len(reference)} points, length {polyline_length(reference):.1f}")
    print(f"Shifted & scaled: {compare(reference, shifted)}")
    print(f"Reversed: {compare(reference, reversed_stroke)}")
    print(f"Reversed (allowed): {compare(reference, reversed_stroke, allow_reverse=True)}")
    print(f"Zigzag: {compare(reference, zigzag)}")
