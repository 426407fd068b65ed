"""Curve simplification under the continuous Fréchet distance."""

from __future__ import annotations

import math
import sys

from . import frechet
from .config import config
from .curve import Curve
from .frechet import continuous_distance, discrete_distance

_EPSILON = sys.float_info.epsilon


def _log(message: str) -> None:
    if config.verbosity > 1:
        print(message)


def _shortcut_distance(curve: Curve, start: int, end: int) -> float:
    """Continuous distance between a subcurve and the segment joining its ends."""
    segment = Curve([curve[start], curve[end]])
    return continuous_distance(curve.subcurve(start, end), segment).value


class SubcurveShortcutGraph:
    """Distances of every vertex-to-vertex shortcut of a curve.

    The edge from vertex ``i`` to vertex ``j > i`` carries the continuous
    Fréchet distance between the subcurve from ``i`` to ``j`` and the segment
    joining those two vertices.
    """

    def __init__(self, curve: Curve) -> None:
        _log("SIMPL: computing shortcut graph")
        self.curve = curve
        n = curve.complexity
        self._edges = [[math.inf] * n for _ in range(n)]
        for i in range(n - 1):
            for j in range(i + 1, n):
                _log(f"SIMPL: computing shortcut distance from vertex {i} to vertex {j}")
                self._edges[i][j] = _shortcut_distance(curve, i, j)

    def minimum_error_simplification(self, ll: int) -> Curve:
        """The simplification with ``ll`` vertices whose largest shortcut error is minimal."""
        _log("SIMPL: computing exact minimum error simplification using shortcut graph")
        curve = self.curve
        n = curve.complexity
        if ll >= n:
            return Curve(curve, curve.name)
        if ll <= 2:
            return Curve([curve.front, curve.back])

        jumps = ll - 1
        edges = self._edges
        distances = [[math.inf] * jumps for _ in range(n)]
        predecessors = [[0] * jumps for _ in range(n)]

        _log("SIMPL: initializing arrays")
        for j in range(1, n):
            distances[j][0] = edges[0][j]

        for i in range(1, jumps):
            _log(f"SIMPL: computing shortcut using {i} jumps")
            for j in range(1, n):
                others = [max(distances[k][i - 1], edges[k][j]) for k in range(j)]
                best = min(range(j), key=others.__getitem__)
                distances[j][i] = others[best]
                predecessors[j][i] = best

        _log("SIMPL: backwards constructing simplification")
        indices = [n - 1]
        for step in range(jumps - 1, -1, -1):
            indices.append(predecessors[indices[-1]][step])
        return Curve(curve[k] for k in reversed(indices))


def approximate_minimum_link_simplification(curve: Curve, epsilon: float) -> Curve:
    """Greedy simplification whose every shortcut stays within ``epsilon`` of the curve."""
    if epsilon < 0:
        raise ValueError("epsilon must not be negative")
    _log("ASIMPL: computing approximate minimum link simplification")
    complexity = curve.complexity
    simplification = Curve([curve.front])

    i = 0
    distance = 0.0
    while i < complexity - 1:
        j = 0
        _log(f"ASIMPL: computing maximum shortcut starting at {i}")
        _log("ASIMPL: exponential error search")
        while distance <= epsilon:
            j += 1
            if i + 2**j >= complexity:
                break
            distance = _shortcut_distance(curve, i, i + 2**j)

        low = 0 if j <= 1 else 2 ** (j - 1)
        high = min(2**j, complexity - i - 1)

        _log("ASIMPL: binary error search")
        while low < high:
            mid = -(-(low + high) // 2)
            distance = _shortcut_distance(curve, i, i + mid)
            if distance <= epsilon:
                low = mid
            else:
                high = mid - 1

        _log(f"ASIMPL: shortcutting from {i} to {i + low}")
        i += low
        simplification.append(curve[i])
    return simplification


def approximate_minimum_error_simplification(curve: Curve, ell: int) -> Curve:
    """Simplification with exactly ``ell`` vertices found by searching over the error."""
    _log("ASIMPL: computing approximate minimum error simplification")
    segment = Curve([curve.front, curve.back])
    if ell <= 2:
        return segment

    min_distance = 0.0
    max_distance = discrete_distance(curve, segment).value + 1
    simplification = approximate_minimum_link_simplification(curve, max_distance)

    _log("ASIMPL: computing upper bound for error by exponential search")
    while simplification.complexity > ell:
        max_distance *= 2.0
        simplification = approximate_minimum_link_simplification(curve, max_distance)

    _log("ASIMPL: binary search using upper bound")
    epsilon = max(min_distance * frechet.ERROR_PERCENT / 100, _EPSILON)
    while max_distance - min_distance > epsilon:
        mid_distance = (min_distance + max_distance) / 2.0
        if mid_distance in (min_distance, max_distance):
            break
        candidate = approximate_minimum_link_simplification(curve, mid_distance)
        if candidate.complexity > ell:
            min_distance = mid_distance
        else:
            simplification = candidate
            max_distance = mid_distance

    _log("ASIMPL: backwards construction of simplification")
    while simplification.complexity < ell:
        simplification.append(simplification.back)
    return simplification