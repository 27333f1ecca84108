"""Glycan compositions and the helpers that build them from user input.

Everything the calculator accepts is reduced here to a :class:`Composition`:

* Byonic style count strings such as ``Hex(5)HexNAc(4)dHex(1)NeuAc(2)``,
* glypy composition strings such as ``{Hex:5; HexNAc:4}``,
* structure strings (WURCS, GlycoCT or IUPAC condensed), parsed with glypy,
* glypy :class:`~glypy.structure.glycan.Glycan` objects,
* any mapping of residue name to count, including glypy's
  :class:`~glypy.structure.glycan_composition.GlycanComposition`.

Concrete monosaccharides (``Man``, ``GlcNAc``, ``Neu5Ac``...) are folded into
the generic residue vocabulary used by the mass tables. Names with no generic
counterpart are kept as they are so that the calculator can report them.
"""

from __future__ import annotations

import logging
import re
from collections import Counter
from collections.abc import Iterable, Iterator, Mapping
from numbers import Integral
from typing import Any

from glypy.io import glycoct, iupac, wurcs
from glypy.structure.glycan import Glycan
from glypy.structure.glycan_composition import GlycanComposition

from glycomass.errors import InvalidArgument, UnparsableInput
from glycomass.mass import MONOSACCHARIDES

logger = logging.getLogger(__name__)

GENERIC_RESIDUES: dict[str, str] = {
    **dict.fromkeys(
        ["Glc", "Gal", "Man", "All", "Alt", "Gul", "Ido", "Tal"], "Hex"
    ),
    **dict.fromkeys(
        ["GlcNAc", "GalNAc", "ManNAc", "AllNAc", "AltNAc", "GulNAc", "IdoNAc", "TalNAc",
         "Glc2NAc", "Gal2NAc", "Man2NAc"],
        "HexNAc",
    ),
    **dict.fromkeys(
        ["GlcN", "GalN", "ManN", "AllN", "AltN", "GulN", "IdoN", "TalN",
         "Glc2N", "Gal2N", "Man2N"],
        "HexN",
    ),
    # glypy writes uronic acids with the "a-" (acid) modifier prefix
    **dict.fromkeys(
        ["GlcA", "GalA", "ManA", "AllA", "AltA", "GulA", "IdoA", "TalA",
         "a-Hex", "a-Glc", "a-Gal", "a-Man", "a-Ido"],
        "HexA",
    ),
    **dict.fromkeys(["Fuc", "Rha", "Qui", "6dAlt", "6dTal", "6dGul", "6dHex"], "dHex"),
    **dict.fromkeys(["FucNAc", "RhaNAc", "QuiNAc", "6dAltNAc", "6dTalNAc"], "dHexNAc"),
    **dict.fromkeys(["Oli", "Tyv", "Abe", "Par", "Dig", "Col"], "ddHex"),
    **dict.fromkeys(["Ara", "Lyx", "Xyl", "Rib", "Pen"], "Pent"),
    "Neu5Ac": "NeuAc",
    "Neu5Gc": "NeuGc",
}

_BYONIC_TOKEN_RE = re.compile(r"([A-Za-z][A-Za-z0-9]*)\((\d+)\)")
_GLYPY_COMPOSITION_RE = re.compile(r"^\{(.*)\}$")
_OPEN_REDUCING_END_RE = re.compile(r"\([abx?]\d?-\??\)?$")
_STRUCTURE_ERRORS = (
    wurcs.WURCSError,
    glycoct.GlycoCTError,
    iupac.IUPACError,
    ValueError,
    KeyError,
)


class Composition(Mapping):
    """An immutable mapping of monosaccharide residue name to count.

    Zero counts are dropped, so a name is only present when the glycan
    actually contains that residue.

    >>> comp = Composition({"Hex": 3}, HexNAc=2)
    >>> comp["HexNAc"]
    2
    >>> str(comp)
    'Hex(3)HexNAc(2)'
    """

    __slots__ = ("_counts",)

    def __init__(self, counts: Mapping[str, int] | None = None, **kwargs: int) -> None:
        merged: dict[str, Any] = dict(counts or {})
        merged.update(kwargs)
        for name, value in merged.items():
            _validate_count(name, value)
        self._counts = {str(name): int(value) for name, value in merged.items() if int(value)}

    def __getitem__(self, name: str) -> int:
        return self._counts[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __hash__(self) -> int:
        return hash(frozenset(self._counts.items()))

    def __repr__(self) -> str:
        return f"Composition({self._counts!r})"

    def __str__(self) -> str:
        known = [name for name in MONOSACCHARIDES if name in self._counts]
        others = sorted(name for name in self._counts if name not in MONOSACCHARIDES)
        return "".join(f"{name}({self._counts[name]})" for name in known + others)

    def count(self, name: str) -> int:
        """Return the count of *name*, 0 when absent."""
        return self._counts.get(name, 0)


def to_composition(item: Any) -> Composition:
    """Normalize one glycan representation into a :class:`Composition`."""
    if isinstance(item, Composition):
        return item
    if isinstance(item, str):
        return _from_string(item)
    if isinstance(item, Glycan):
        return _from_glycan(item)
    if isinstance(item, Mapping):
        return _from_mapping(item)
    raise UnparsableInput(
        "Glycans must be composition or structure strings, mappings, "
        f"or glypy glycans; got {type(item).__name__}"
    )


def is_single(glycans: Any) -> bool:
    """Return ``True`` when *glycans* is one glycan rather than a collection."""
    if isinstance(glycans, (str, bytes, Mapping, Glycan)):
        return True
    return not isinstance(glycans, Iterable)


def parse_byonic(text: str) -> Composition:
    """Parse a Byonic style composition string, e.g. ``Hex(5)HexNAc(2)``."""
    cleaned = "".join(str(text).split())
    if not cleaned:
        raise ValueError("Composition string cannot be empty")

    pos = 0
    counts: Counter[str] = Counter()
    while pos < len(cleaned):
        match = _BYONIC_TOKEN_RE.match(cleaned, pos)
        if not match:
            snippet = cleaned[pos : pos + 8]
            raise ValueError(f"Invalid token '{snippet}' in composition '{text}'")
        counts[generic_name(match.group(1))] += int(match.group(2))
        pos = match.end()
    return Composition(counts)


def parse_glypy_notation(text: str) -> Composition:
    """Parse glypy's composition notation, e.g. ``{Hex:5; HexNAc:4}``."""
    match = _GLYPY_COMPOSITION_RE.match(text.strip())
    if not match:
        raise ValueError(f"'{text}' is not in {{name:count; ...}} notation")

    counts: Counter[str] = Counter()
    for entry in match.group(1).split(";"):
        entry = entry.strip()
        if not entry:
            continue
        name, sep, value = entry.rpartition(":")
        if not sep or not name.strip():
            raise ValueError(f"Entry '{entry}' must be in name:count format")
        amount = int(value)
        if amount < 0:
            raise ValueError(f"Negative count for residue '{name.strip()}'")
        counts[generic_name(name.strip())] += amount
    return Composition(counts)


def parse_structure(text: str) -> Composition:
    """Parse a structure string with glypy and reduce it to a composition."""
    stripped = text.strip()
    if stripped.startswith("WURCS="):
        glycan = wurcs.loads(stripped)
    elif stripped.startswith("RES"):
        glycan = glycoct.loads(stripped)
    else:
        # IUPAC condensed, e.g. "Gal(b1-3)GalNAc(a1-"
        glycan = iupac.loads(_OPEN_REDUCING_END_RE.sub("", stripped), dialect="simple")
    return _from_glycan(glycan)


def generic_name(name: str) -> str:
    """Map a concrete monosaccharide name onto the generic vocabulary."""
    bare = name.strip()
    return GENERIC_RESIDUES.get(bare, bare)


def _from_string(text: str) -> Composition:
    for route in (parse_byonic, parse_glypy_notation):
        try:
            composition = route(text)
        except ValueError:
            continue
        logger.debug("Parsed %r with %s", text, route.__name__)
        return composition

    try:
        composition = parse_structure(text)
    except _STRUCTURE_ERRORS as exc:
        raise UnparsableInput(
            f"Cannot parse '{text}' as a glycan composition or structure string"
        ) from exc
    logger.debug("Parsed %r as a glycan structure", text)
    return composition


def _from_glycan(glycan: Glycan) -> Composition:
    composition = GlycanComposition.from_glycan(glycan)
    composition.drop_stems().drop_positions().drop_configurations()
    return _from_mapping(composition)


def _from_mapping(mapping: Mapping[Any, Any]) -> Composition:
    counts: Counter[str] = Counter()
    for key, value in mapping.items():
        try:
            _validate_count(key, value)
        except InvalidArgument as exc:
            raise UnparsableInput(str(exc)) from exc
        counts[generic_name(str(key))] += int(value)
    return Composition(counts)


def _validate_count(name: Any, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidArgument(f"Count for residue '{name}' must be an integer, got {value!r}")
    if value < 0:
        raise InvalidArgument(f"Negative count for residue '{name}' is not allowed")
