"""Parts-per-million mass tolerances."""

from __future__ import annotations

from collections.abc import Iterable
from numbers import Real

from glycomass.errors import InvalidArgument


class PPMTolerance:
    """Callable turning m/z values into absolute tolerances at a fixed ppm.

    >>> tol = ppm(10)
    >>> tol
    ppm(10)
    >>> tol([1000, 2000])
    [0.01, 0.02]
    """

    __slots__ = ("value",)

    def __init__(self, value: float) -> None:
        if isinstance(value, bool) or not isinstance(value, Real):
            raise InvalidArgument(f"ppm value must be a number, got {value!r}")
        if value < 0:
            raise InvalidArgument(f"ppm value must be non-negative, got {value!r}")
        self.value = value

    def __call__(self, mz: float | Iterable[float]) -> float | list[float]:
        if isinstance(mz, Iterable) and not isinstance(mz, (str, bytes)):
            return [self._tolerance(value) for value in mz]
        return self._tolerance(mz)

    def __repr__(self) -> str:
        return f"ppm({self.value})"

    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PPMTolerance):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash((PPMTolerance, self.value))

    def _tolerance(self, mz: float) -> float:
        return self.value * mz / 1e6


def ppm(value: float) -> PPMTolerance:
    """Return a tolerance function for *value* parts per million."""
    return PPMTolerance(value)
