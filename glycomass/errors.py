"""Exceptions raised by glycomass.

Every error is a :class:`ValueError` so callers that only care about
"bad input" can keep catching that.
"""

from __future__ import annotations

from typing import Iterable


class GlycoMassError(ValueError):
    """Base class for all glycomass errors."""


class InvalidArgument(GlycoMassError):
    """A parameter value is malformed (charge, derivatization, mass type, ppm)."""


class InvalidAdduct(GlycoMassError):
    """The adduct does not fit the sign of the charge."""

    def __init__(self, adduct: str, charge: int, allowed: Iterable[str]) -> None:
        self.adduct = adduct
        self.charge = charge
        self.allowed = tuple(allowed)
        sign = "positive" if charge > 0 else "negative"
        choices = ", ".join(f"'{name}'" for name in self.allowed)
        super().__init__(
            f"When charge is {sign}, adduct can only be {choices}; got '{adduct}'"
        )


class InvalidMassDictionary(GlycoMassError):
    """A custom mass dictionary does not have the required names or values."""

    def __init__(
        self,
        message: str,
        missing: Iterable[str] = (),
        unexpected: Iterable[str] = (),
    ) -> None:
        self.missing = tuple(sorted(missing))
        self.unexpected = tuple(sorted(unexpected))
        super().__init__(message)


class UnsupportedResidue(GlycoMassError):
    """A composition contains residues without a mass entry."""

    def __init__(self, residues: Iterable[str], supported: Iterable[str]) -> None:
        self.residues = tuple(sorted(residues))
        self.supported = tuple(supported)
        super().__init__(
            "Unsupported monosaccharides found in the glycans: "
            + ", ".join(self.residues)
            + ". Supported monosaccharides: "
            + ", ".join(self.supported)
        )


class UnparsableInput(GlycoMassError):
    """An input item could not be turned into a composition."""
