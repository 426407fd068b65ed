"""Continuous and discrete Fréchet distances between polygonal curves."""

from __future__ import annotations

import math
import sys
import time
from dataclasses import dataclass

from .config import config
from .curve import Curve
from .interval import Interval

ERROR_PERCENT = 1.0
"""Relative precision, in percent of the lower bound, of the continuous distance."""

_EPSILON = sys.float_info.epsilon


@dataclass(frozen=True)
class ContinuousDistance:
    """Result of a continuous Fréchet distance computation."""

    value: float
    time_searches: float = 0.0
    time_bounds: float = 0.0
    number_searches: int = 0

    def __float__(self) -> float:
        return self.value

    def __str__(self) -> str:
        return f"{self.value:g}"


@dataclass(frozen=True)
class DiscreteDistance:
    """Result of a discrete Fréchet distance computation."""

    value: float
    time: float = 0.0

    def __float__(self) -> float:
        return self.value

    def __str__(self) -> str:
        return f"{self.value:g}"


def _log(message: str) -> None:
    if config.verbosity > 2:
        print(f"CFD: {message}")


def _check_pair(curve1: Curve, curve2: Curve) -> None:
    if curve1.complexity < 2 or curve2.complexity < 2:
        raise ValueError("comparison possible only for curves of at least two points")
    if curve1.dimensions != curve2.dimensions:
        raise ValueError(
            "comparison possible only for curves of equal number of dimensions"
        )


def continuous_distance(curve1: Curve, curve2: Curve) -> ContinuousDistance:
    """Continuous Fréchet distance, approximated up to ``ERROR_PERCENT`` of its lower bound."""
    _check_pair(curve1, curve2)
    start = time.process_time()
    _log("computing lower bound")
    lb = projective_lower_bound(curve1, curve2)
    _log("computing upper bound")
    ub = greedy_upper_bound(curve1, curve2)
    elapsed = time.process_time() - start

    result = distance_within_bounds(curve1, curve2, ub, lb)
    return ContinuousDistance(
        value=result.value,
        time_searches=result.time_searches,
        time_bounds=elapsed,
        number_searches=result.number_searches,
    )


def distance_within_bounds(
    curve1: Curve, curve2: Curve, ub: float, lb: float
) -> ContinuousDistance:
    """Binary search for the continuous distance between the bounds ``lb`` and ``ub``."""
    _check_pair(curve1, curve2)
    start = time.process_time()
    if math.isnan(lb) or math.isnan(ub):
        return ContinuousDistance(value=math.nan)

    relative = lb * ERROR_PERCENT / 100
    p_error = relative if relative > _EPSILON else _EPSILON
    number_searches = 0

    if ub - lb > p_error:
        _log("binary search using FSD")
        while ub - lb > p_error:
            number_searches += 1
            split = (ub + lb) / 2.0
            if split in (lb, ub):
                break
            if less_than_or_equal(split, curve1, curve2):
                ub = split
            else:
                lb = split
            _log(f"narrowed distance to [{lb:g}, {ub:g}]")

    return ContinuousDistance(
        value=lb,
        time_searches=time.process_time() - start,
        number_searches=number_searches,
    )


def less_than_or_equal(distance: float, curve1: Curve, curve2: Curve) -> bool:
    """Decide via the free-space diagram whether the distance is at most ``distance``."""
    _check_pair(curve1, curve2)
    _log("constructing FSD")
    dist_sqr = distance * distance
    infty = math.inf
    n1 = curve1.complexity
    n2 = curve2.complexity

    # reachable1[i][j]: earliest reachable parameter on the edge of curve1 segment i at vertex j of curve2
    reachable1 = [[infty] * n2 for _ in range(n1 - 1)]
    # reachable2[i][j]: earliest reachable parameter on curve2 segment j at vertex i of curve1
    reachable2 = [[infty] * (n2 - 1) for _ in range(n1)]

    _log("FSD borders")
    for i in range(n1 - 1):
        reachable1[i][0] = 0.0
        if curve2[0].dist_sqr(curve1[i + 1]) > dist_sqr:
            break
    for j in range(n2 - 1):
        reachable2[0][j] = 0.0
        if curve1[0].dist_sqr(curve2[j + 1]) > dist_sqr:
            break

    _log("computing free space")
    free1: dict[tuple[int, int], Interval] = {}
    free2: dict[tuple[int, int], Interval] = {}
    for i in range(n1):
        for j in range(n2):
            if i < n1 - 1 and j > 0:
                free1[i, j] = curve2[j].ball_intersection_interval(
                    dist_sqr, curve1[i], curve1[i + 1]
                )
            if j < n2 - 1 and i > 0:
                free2[i, j] = curve1[i].ball_intersection_interval(
                    dist_sqr, curve2[j], curve2[j + 1]
                )

    _log("computing reachable space")
    for i in range(n1):
        for j in range(n2):
            if i < n1 - 1 and j > 0:
                interval = free1[i, j]
                if not interval.is_empty():
                    if reachable2[i][j - 1] != infty:
                        reachable1[i][j] = interval.begin
                    elif reachable1[i][j - 1] <= interval.end:
                        reachable1[i][j] = max(interval.begin, reachable1[i][j - 1])
            if j < n2 - 1 and i > 0:
                interval = free2[i, j]
                if not interval.is_empty():
                    if reachable1[i - 1][j] != infty:
                        reachable2[i][j] = interval.begin
                    elif reachable2[i - 1][j] <= interval.end:
                        reachable2[i][j] = max(interval.begin, reachable2[i - 1][j])

    return reachable1[-1][-1] < infty


def greedy_upper_bound(curve1: Curve, curve2: Curve) -> float:
    """Upper bound from a greedy walk along both curves' vertices."""
    result = 0.0
    len1, len2 = curve1.complexity, curve2.complexity
    i = j = 0

    while i < len1 - 1 and j < len2 - 1:
        result = max(result, curve1[i].dist_sqr(curve2[j]))
        dist1 = curve1[i + 1].dist_sqr(curve2[j])
        dist2 = curve1[i].dist_sqr(curve2[j + 1])
        dist3 = curve1[i + 1].dist_sqr(curve2[j + 1])
        if dist1 <= dist2 and dist1 <= dist3:
            i += 1
        elif dist2 <= dist1 and dist2 <= dist3:
            j += 1
        else:
            i += 1
            j += 1

    while i < len1:
        result = max(result, curve1[i].dist_sqr(curve2[j]))
        i += 1
    i -= 1
    while j < len2:
        result = max(result, curve1[i].dist_sqr(curve2[j]))
        j += 1

    return math.sqrt(result)


def _vertex_to_curve_sqr(point, curve: Curve) -> float:
    best = math.inf
    for a, b in zip(curve, list(curve)[1:]):
        if a.dist_sqr(b) > 0:
            d = point.line_segment_dist_sqr(a, b)
        else:
            d = point.dist_sqr(a)
        best = min(best, d)
    return best


def projective_lower_bound(curve1: Curve, curve2: Curve) -> float:
    """Lower bound from vertex-to-curve distances and the endpoint distances."""
    candidates = [_vertex_to_curve_sqr(p, curve2) for p in curve1]
    candidates.extend(_vertex_to_curve_sqr(p, curve1) for p in curve2)
    candidates.append(curve1.front.dist_sqr(curve2.front))
    candidates.append(curve1.back.dist_sqr(curve2.back))
    return math.sqrt(max(candidates))


def discrete_distance(curve1: Curve, curve2: Curve) -> DiscreteDistance:
    """Discrete Fréchet distance by dynamic programming over vertex couplings."""
    if curve1.complexity == 0 or curve2.complexity == 0:
        raise ValueError("comparison possible only for non-empty curves")
    start = time.process_time()

    dists = [[p.dist_sqr(q) for q in curve2] for p in curve1]
    previous: list[float] = []
    for i, row in enumerate(dists):
        current: list[float] = []
        for j, d in enumerate(row):
            if i == 0 and j == 0:
                value = d
            elif i == 0:
                value = max(current[j - 1], d)
            elif j == 0:
                value = max(previous[j], d)
            else:
                value = max(min(previous[j], previous[j - 1], current[j - 1]), d)
            current.append(value)
        previous = current

    return DiscreteDistance(
        value=math.sqrt(previous[-1]), time=time.process_time() - start
    )