"""Collections of curves sharing one dimension."""

from __future__ import annotations

from collections.abc import Iterator

from .curve import Curve
from .simplification import (
    SubcurveShortcutGraph,
    approximate_minimum_error_simplification,
)


def _body(curve: Curve) -> str:
    if not curve.complexity:
        return ""
    return "[" + ", ".join(str(p) for p in curve) + "]"


class Curves:
    """An ordered collection of curves of equal dimension."""

    def __init__(self, dimensions: int = 0) -> None:
        self._dimensions = dimensions
        self._m = 0
        self._curves: list[Curve] = []

    def add(self, curve: Curve) -> None:
        """Append a curve; the first curve fixes the dimension if none was given."""
        if curve.dimensions != self._dimensions:
            if self._dimensions != 0:
                raise ValueError(
                    f"Wrong number of dimensions; expected {self._dimensions} "
                    f"dimensions and got {curve.dimensions} dimensions."
                )
            self._dimensions = curve.dimensions
        self._curves.append(curve)
        self._m = max(self._m, curve.complexity)

    def __len__(self) -> int:
        return len(self._curves)

    def __getitem__(self, index: int) -> Curve:
        return self._curves[index]

    def __setitem__(self, index: int, curve: Curve) -> None:
        self._curves[index] = curve

    def __iter__(self) -> Iterator[Curve]:
        return iter(self._curves)

    @property
    def m(self) -> int:
        """Largest complexity among the curves."""
        return self._m

    @property
    def number(self) -> int:
        return len(self._curves)

    @property
    def dimensions(self) -> int:
        return self._dimensions

    def simplify(self, l: int, approx: bool = False) -> Curves:  # noqa: E741
        """Simplify every curve to ``l`` vertices, exactly or approximately."""
        result = Curves(self._dimensions)
        for curve in self._curves:
            if approx:
                simplified = approximate_minimum_error_simplification(curve, l)
            else:
                simplified = SubcurveShortcutGraph(curve).minimum_error_simplification(l)
            simplified.name = f"Simplification of {curve.name}"
            result._curves.append(simplified)
        result._m = l
        return result

    def __str__(self) -> str:
        if not self._curves:
            return ""
        return "{" + ", ".join(_body(c) for c in self._curves) + "}"

    def __repr__(self) -> str:
        return f"frechetkit.Curves collection with {self.number} curves"