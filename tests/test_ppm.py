import pytest

from glycomass import InvalidArgument, calculate_mz, ppm
from glycomass.ppm import PPMTolerance


def test_scalar():
    tol = ppm(10)
    assert tol(2368.84) == pytest.approx(0.0236884)


def test_vector_input():
    assert ppm(10)([1000, 2000]) == [0.01, 0.02]
    assert ppm(10)((2000, 1000)) == [0.02, 0.01]


def test_iterable_input():
    assert ppm(10)(range(1000, 3000, 1000)) == [0.01, 0.02]
    assert ppm(10)(mz for mz in (1000.0, 2000.0)) == [0.01, 0.02]


def test_label():
    assert repr(ppm(10)) == "ppm(10)"
    assert str(ppm(2.5)) == "ppm(2.5)"


def test_value_is_kept():
    tol = ppm(5)
    assert isinstance(tol, PPMTolerance)
    assert tol.value == 5
    assert tol == ppm(5)
    assert tol != ppm(10)


def test_zero_ppm():
    assert ppm(0)(1500.0) == 0.0


@pytest.mark.parametrize("value", [-1, "10", None, True])
def test_invalid_value(value):
    with pytest.raises(InvalidArgument):
        ppm(value)


def test_works_on_calculated_mz():
    mz = calculate_mz(["Hex(5)HexNAc(2)", "Hex(3)HexNAc(2)"], charge=1)
    tolerances = ppm(20)(mz)
    assert tolerances == pytest.approx([value * 2e-5 for value in mz])
