"""m/z calculation for glycans."""

from __future__ import annotations

import logging
from numbers import Integral, Real
from typing import Any, Mapping

from glycomass.composition import Composition, is_single, to_composition
from glycomass.errors import InvalidAdduct, InvalidArgument, UnsupportedResidue
from glycomass.mass import (
    MONOSACCHARIDES,
    NEGATIVE_ADDUCTS,
    POSITIVE_ADDUCTS,
    check_mass_dictionary,
    get_mass_dictionary,
)

logger = logging.getLogger(__name__)


def calculate_mz(
    glycans: Any,
    charge: int = 1,
    adduct: str = "H+",
    mass_dict: Mapping[str, float] | None = None,
) -> float | list[float]:
    """Calculate the m/z of one glycan or of a collection of glycans.

    Each glycan may be a composition, a residue-count mapping, a Byonic or
    glypy composition string, a structure string or a glypy ``Glycan``.
    *adduct* is ignored at charge 0. Returns a float for a single glycan and
    a list in input order otherwise.
    """
    single = is_single(glycans)
    items = [glycans] if single else list(glycans)
    compositions = [to_composition(item) for item in items]

    charge = _check_charge(charge)
    _check_adduct(adduct, charge)
    if mass_dict is None:
        masses = get_mass_dictionary(derivatization="none", mass_type="mono")
    else:
        masses = check_mass_dictionary(mass_dict)
    _check_supported(compositions)

    adduct_mass = masses[adduct] * abs(charge) if charge else 0.0
    results = []
    for composition in compositions:
        mz = _neutral_mass(composition, masses) + adduct_mass
        if charge:
            mz /= abs(charge)
        results.append(mz)

    logger.debug(
        "Computed %d m/z value(s) at charge %d%s",
        len(results),
        charge,
        f" with {adduct}" if charge else "",
    )
    return results[0] if single else results


def neutral_mass(
    glycans: Any,
    mass_dict: Mapping[str, float] | None = None,
) -> float | list[float]:
    """Return the neutral mass of *glycans*, i.e. their m/z at charge 0."""
    return calculate_mz(glycans, charge=0, mass_dict=mass_dict)


def _neutral_mass(composition: Composition, masses: Mapping[str, float]) -> float:
    total = masses["red_end"]
    for residue in MONOSACCHARIDES:
        total += masses[residue] * composition.count(residue)
    return total


def _check_charge(charge: Any) -> int:
    if isinstance(charge, bool):
        raise InvalidArgument(f"charge must be an integer, got {charge!r}")
    if isinstance(charge, Integral):
        return int(charge)
    if isinstance(charge, Real) and float(charge).is_integer():
        return int(charge)
    raise InvalidArgument(f"charge must be an integer, got {charge!r}")


def _check_adduct(adduct: str, charge: int) -> None:
    if charge > 0 and adduct not in POSITIVE_ADDUCTS:
        raise InvalidAdduct(adduct, charge, POSITIVE_ADDUCTS)
    if charge < 0 and adduct not in NEGATIVE_ADDUCTS:
        raise InvalidAdduct(adduct, charge, NEGATIVE_ADDUCTS)


def _check_supported(compositions: list[Composition]) -> None:
    unsupported = {
        name
        for composition in compositions
        for name in composition
        if name not in MONOSACCHARIDES
    }
    if unsupported:
        raise UnsupportedResidue(unsupported, MONOSACCHARIDES)
