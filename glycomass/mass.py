"""Mass dictionaries for glycan residues and charge carriers.

A mass dictionary maps a residue or ion name to its mass in Dalton. Residue
masses (and the reducing-end term ``red_end``) depend on the derivatization
scheme and the mass type; ion and small-molecule masses depend on the mass
type only, so the two groups are kept in separate tables and merged on each
call.
"""

from __future__ import annotations

from numbers import Real
from typing import Mapping

from glycomass.errors import InvalidArgument, InvalidMassDictionary

MONOSACCHARIDES: tuple[str, ...] = (
    "Hex",
    "HexNAc",
    "dHex",
    "dHexNAc",
    "ddHex",
    "Pent",
    "HexA",
    "HexN",
    "NeuAc",
    "NeuGc",
    "Kdn",
    "Neu",
)
DERIVATIZATIONS: tuple[str, ...] = ("none", "permethyl", "peracetyl")
MASS_TYPES: tuple[str, ...] = ("mono", "average")
POSITIVE_ADDUCTS: tuple[str, ...] = ("H+", "K+", "Na+", "NH4+")
NEGATIVE_ADDUCTS: tuple[str, ...] = ("Cl-", "HCO3-")
ADDUCTS: tuple[str, ...] = POSITIVE_ADDUCTS + NEGATIVE_ADDUCTS

# Anhydro residue masses. Derivatized tables add one CH2 (permethyl) or one
# C2H2O (peracetyl) per derivatized site; red_end is H2O plus the two groups
# picked up by the free reducing end.
# Peracetylation turns HexN into HexNAc and Neu into NeuAc, so those rows
# repeat the HexNAc and NeuAc masses.
VARIABLE_MASSES: dict[tuple[str, str], dict[str, float]] = {
    ("none", "mono"): {
        "Hex": 162.0528,
        "HexNAc": 203.0794,
        "dHex": 146.0579,
        "dHexNAc": 187.0845,
        "ddHex": 130.0630,
        "Pent": 132.0423,
        "HexA": 176.0321,
        "HexN": 161.0688,
        "NeuAc": 291.0954,
        "NeuGc": 307.0903,
        "Kdn": 250.0689,
        "Neu": 249.0848,
        "red_end": 18.0106,
    },
    ("none", "average"): {
        "Hex": 162.1424,
        "HexNAc": 203.1950,
        "dHex": 146.1430,
        "dHexNAc": 187.1931,
        "ddHex": 130.1418,
        "Pent": 132.1161,
        "HexA": 176.1259,
        "HexN": 161.1558,
        "NeuAc": 291.2579,
        "NeuGc": 307.2573,
        "Kdn": 250.2027,
        "Neu": 249.2179,
        "red_end": 18.0153,
    },
    ("permethyl", "mono"): {
        "Hex": 204.0998,
        "HexNAc": 245.1263,
        "dHex": 174.0892,
        "dHexNAc": 215.1158,
        "ddHex": 144.0786,
        "Pent": 160.0736,
        "HexA": 218.0790,
        "HexN": 217.1314,
        "NeuAc": 361.1737,
        "NeuGc": 391.1842,
        "Kdn": 320.1471,
        "Neu": 333.1787,
        "red_end": 46.0419,
    },
    ("permethyl", "average"): {
        "Hex": 204.2230,
        "HexNAc": 245.2756,
        "dHex": 174.1968,
        "dHexNAc": 215.2463,
        "ddHex": 144.1684,
        "Pent": 160.1699,
        "HexA": 218.2066,
        "HexN": 217.2622,
        "NeuAc": 361.3923,
        "NeuGc": 391.4186,
        "Kdn": 320.3357,
        "Neu": 333.3775,
        "red_end": 46.0685,
    },
    ("peracetyl", "mono"): {
        "Hex": 288.0845,
        "HexNAc": 287.1005,
        "dHex": 230.0790,
        "dHexNAc": 229.0950,
        "ddHex": 172.0736,
        "Pent": 216.0634,
        "HexA": 260.0532,
        "HexN": 287.1005,
        "NeuAc": 417.1271,
        "NeuGc": 475.1326,
        "Kdn": 418.1112,
        "Neu": 417.1271,
        "red_end": 102.0317,
    },
    ("peracetyl", "average"): {
        "Hex": 288.2542,
        "HexNAc": 287.2695,
        "dHex": 230.2176,
        "dHexNAc": 229.2298,
        "ddHex": 172.1785,
        "Pent": 216.1907,
        "HexA": 260.2005,
        "HexN": 287.2695,
        "NeuAc": 417.3698,
        "NeuGc": 475.4064,
        "Kdn": 418.3495,
        "Neu": 417.3698,
        "red_end": 102.0887,
    },
}

# Mono "H" is the neutral atom mass (1.00783). An earlier revision of this
# table carried 1.00728 here, close to the proton. Nothing in the m/z formula
# reads "H", so which one is right has not been settled by any result.
FIXED_MASSES: dict[str, dict[str, float]] = {
    "mono": {
        "H": 1.00783,
        "H2O": 18.01056,
        "H+": 1.00727,
        "K+": 38.963707,
        "Na+": 22.989768,
        "NH4+": 18.033823,
        "Cl-": 34.96885271,
        "HCO3-": 60.98014364,
    },
    "average": {
        "H": 1.00794,
        "H2O": 18.01524,
        "H+": 1.00739,
        "K+": 39.0983,
        "Na+": 22.998977,
        "NH4+": 18.0385,
        "Cl-": 35.453,
        "HCO3-": 61.0168,
    },
}

MASS_DICTIONARY_KEYS: frozenset[str] = frozenset(MONOSACCHARIDES) | {"red_end"} | frozenset(
    FIXED_MASSES["mono"]
)


def get_mass_dictionary(
    derivatization: str = "none",
    mass_type: str = "mono",
    overrides: Mapping[str, float] | None = None,
) -> dict[str, float]:
    """Return a new mass dictionary, with *overrides* applied to known names."""
    if derivatization not in DERIVATIZATIONS:
        raise InvalidArgument(
            f"Unknown derivatization '{derivatization}'; "
            f"expected one of {', '.join(DERIVATIZATIONS)}"
        )
    if mass_type not in MASS_TYPES:
        raise InvalidArgument(
            f"Unknown mass type '{mass_type}'; expected one of {', '.join(MASS_TYPES)}"
        )

    table = dict(FIXED_MASSES[mass_type])
    table.update(VARIABLE_MASSES[(derivatization, mass_type)])
    if overrides:
        unknown = set(overrides) - MASS_DICTIONARY_KEYS
        if unknown:
            raise InvalidMassDictionary(
                "Cannot override unknown mass entries: " + ", ".join(sorted(unknown)),
                unexpected=unknown,
            )
        _ensure_numeric(overrides)
        for name, value in overrides.items():
            table[name] = float(value)
    return table


def check_mass_dictionary(mass_dict: Mapping[str, float]) -> dict[str, float]:
    """Validate a caller-supplied mass dictionary and return a float copy.

    The dictionary must hold exactly the names produced by
    :func:`get_mass_dictionary`, each mapped to a number.
    """
    if not isinstance(mass_dict, Mapping):
        raise InvalidMassDictionary(
            f"Mass dictionary must be a mapping, got {type(mass_dict).__name__}"
        )

    names = set(mass_dict)
    missing = MASS_DICTIONARY_KEYS - names
    unexpected = names - MASS_DICTIONARY_KEYS
    if missing or unexpected:
        details = []
        if missing:
            details.append("missing " + ", ".join(sorted(missing)))
        if unexpected:
            details.append("unexpected " + ", ".join(sorted(map(str, unexpected))))
        raise InvalidMassDictionary(
            "Custom mass dictionary must have the same names as get_mass_dictionary(): "
            + "; ".join(details),
            missing=missing,
            unexpected=map(str, unexpected),
        )

    _ensure_numeric(mass_dict)
    return {name: float(value) for name, value in mass_dict.items()}


def _ensure_numeric(masses: Mapping[str, float]) -> None:
    bad = sorted(
        name
        for name, value in masses.items()
        if isinstance(value, bool) or not isinstance(value, Real)
    )
    if bad:
        raise InvalidMassDictionary("Masses must be numeric for: " + ", ".join(bad))
