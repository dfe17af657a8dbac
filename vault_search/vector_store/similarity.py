"""
Cosine similarity with the zero-score convention for degenerate inputs.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Any, List, Sequence


def _is_finite_number(value: Any) -> bool:
    if not isinstance(value, Real) or isinstance(value, bool):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def _is_numeric_sequence(value: Any) -> bool:
    if not isinstance(value, (list, tuple)):
        return False
    return all(_is_finite_number(v) for v in value)


def _scaled(vector: Sequence[float]) -> List[float] | None:
    # Dividing by the largest magnitude keeps squares and products in range;
    # cosine is scale invariant so the result is unchanged.
    scale = max(abs(float(v)) for v in vector)
    if scale == 0:
        return None
    return [float(v) / scale for v in vector]


def cosine_similarity(vec1: Any, vec2: Any) -> float:
    """
    Dot product over the product of Euclidean norms.

    Returns 0.0 when either input is not a list/tuple of finite numbers, is
    empty, the lengths differ, or either norm is zero.
    """
    if not _is_numeric_sequence(vec1) or not _is_numeric_sequence(vec2):
        return 0.0
    if not vec1 or not vec2 or len(vec1) != len(vec2):
        return 0.0

    a = _scaled(vec1)
    b = _scaled(vec2)
    if a is None or b is None:
        return 0.0

    dot_product = math.fsum(x * y for x, y in zip(a, b))
    magnitude1 = math.sqrt(math.fsum(x * x for x in a))
    magnitude2 = math.sqrt(math.fsum(y * y for y in b))
    similarity = dot_product / (magnitude1 * magnitude2)
    if not math.isfinite(similarity):
        return 0.0
    # Rounding can push parallel vectors a hair past the bounds.
    return max(-1.0, min(1.0, similarity))


__all__ = ["cosine_similarity"]
