"""Glycan m/z calculation toolkit."""

import logging
from importlib.metadata import version, PackageNotFoundError

from glycomass.composition import Composition, to_composition
from glycomass.errors import (
    GlycoMassError,
    InvalidAdduct,
    InvalidArgument,
    InvalidMassDictionary,
    UnparsableInput,
    UnsupportedResidue,
)
from glycomass.mass import MONOSACCHARIDES, get_mass_dictionary
from glycomass.mz import calculate_mz, neutral_mass
from glycomass.ppm import ppm

try:  # pragma: no cover - fallback when package metadata unavailable
    __version__ = version("glycomass")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "Composition",
    "GlycoMassError",
    "InvalidAdduct",
    "InvalidArgument",
    "InvalidMassDictionary",
    "MONOSACCHARIDES",
    "UnparsableInput",
    "UnsupportedResidue",
    "calculate_mz",
    "get_mass_dictionary",
    "neutral_mass",
    "ppm",
    "to_composition",
]
