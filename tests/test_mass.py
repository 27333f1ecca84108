import itertools

import pytest

from glycomass.errors import InvalidArgument, InvalidMassDictionary
from glycomass.mass import (
    DERIVATIZATIONS,
    MASS_TYPES,
    MONOSACCHARIDES,
    check_mass_dictionary,
    get_mass_dictionary,
)

COMBINATIONS = list(itertools.product(DERIVATIZATIONS, MASS_TYPES))

EXPECTED_NAMES = {
    "Hex", "HexNAc", "dHex", "dHexNAc", "ddHex", "Pent", "HexA", "HexN",
    "NeuAc", "NeuGc", "Kdn", "Neu", "red_end",
    "H+", "H", "H2O", "K+", "Na+", "NH4+", "Cl-", "HCO3-",
}


def test_default_dictionary_names():
    assert set(get_mass_dictionary()) == EXPECTED_NAMES


@pytest.mark.parametrize("derivatization,mass_type", COMBINATIONS)
def test_every_combination_has_the_same_names(derivatization, mass_type):
    masses = get_mass_dictionary(derivatization=derivatization, mass_type=mass_type)
    assert set(masses) == EXPECTED_NAMES
    assert all(isinstance(value, float) for value in masses.values())


def test_hex_differs_across_combinations():
    values = [get_mass_dictionary(d, t)["Hex"] for d, t in COMBINATIONS]
    assert len(set(values)) == 6


@pytest.mark.parametrize("name", MONOSACCHARIDES + ("red_end",))
def test_variable_entries_differ_across_combinations(name):
    values = [get_mass_dictionary(d, t)[name] for d, t in COMBINATIONS]
    assert len(set(values)) == 6


@pytest.mark.parametrize("name", ["H+", "H", "H2O", "K+", "Na+", "NH4+", "Cl-", "HCO3-"])
def test_fixed_entries_ignore_derivatization(name):
    for mass_type in MASS_TYPES:
        values = {get_mass_dictionary(d, mass_type)[name] for d in DERIVATIZATIONS}
        assert len(values) == 1


@pytest.mark.parametrize("mass_type", MASS_TYPES)
def test_peracetylated_amines_match_acetylated_residues(mass_type):
    masses = get_mass_dictionary(derivatization="peracetyl", mass_type=mass_type)
    assert masses["HexN"] == masses["HexNAc"]
    assert masses["Neu"] == masses["NeuAc"]


def test_known_monoisotopic_values():
    masses = get_mass_dictionary()
    assert masses["Hex"] == pytest.approx(162.0528)
    assert masses["HexNAc"] == pytest.approx(203.0794)
    assert masses["H+"] == pytest.approx(1.00727)
    assert masses["red_end"] == pytest.approx(masses["H2O"], abs=1e-4)


def test_returns_a_fresh_dictionary():
    first = get_mass_dictionary()
    first["Hex"] = 0.0
    assert get_mass_dictionary()["Hex"] == pytest.approx(162.0528)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"derivatization": "permethylated"},
        {"derivatization": "None"},
        {"mass_type": "monoisotopic"},
        {"mass_type": "avg"},
    ],
)
def test_invalid_parameters(kwargs):
    with pytest.raises(InvalidArgument):
        get_mass_dictionary(**kwargs)


class TestOverrides:
    def test_override_replaces_value(self):
        masses = get_mass_dictionary(overrides={"Hex": 162.0})
        assert masses["Hex"] == 162.0
        assert set(masses) == EXPECTED_NAMES

    def test_unknown_override_name(self):
        with pytest.raises(InvalidMassDictionary) as excinfo:
            get_mass_dictionary(overrides={"Xyl": 150.0})
        assert excinfo.value.unexpected == ("Xyl",)

    def test_non_numeric_override(self):
        with pytest.raises(InvalidMassDictionary):
            get_mass_dictionary(overrides={"Hex": "heavy"})


class TestCheckMassDictionary:
    def test_accepts_default(self):
        masses = get_mass_dictionary("permethyl", "average")
        assert check_mass_dictionary(masses) == masses

    def test_converts_integers(self):
        masses = get_mass_dictionary()
        masses["Hex"] = 162
        checked = check_mass_dictionary(masses)
        assert isinstance(checked["Hex"], float)

    def test_missing_name(self):
        masses = get_mass_dictionary()
        del masses["red_end"]
        with pytest.raises(InvalidMassDictionary) as excinfo:
            check_mass_dictionary(masses)
        assert excinfo.value.missing == ("red_end",)

    def test_extra_name(self):
        masses = get_mass_dictionary()
        masses["Sulfate"] = 79.9568
        with pytest.raises(InvalidMassDictionary) as excinfo:
            check_mass_dictionary(masses)
        assert excinfo.value.unexpected == ("Sulfate",)

    def test_non_numeric_value(self):
        masses = get_mass_dictionary()
        masses["Hex"] = None
        with pytest.raises(InvalidMassDictionary):
            check_mass_dictionary(masses)

    def test_not_a_mapping(self):
        with pytest.raises(InvalidMassDictionary):
            check_mass_dictionary([("Hex", 162.0528)])
