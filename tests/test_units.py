import numpy as np
import pytest

from Hardware.errors import InputContractError
from Units.conversion import (
    convert_force,
    convert_length,
    convert_mass,
    convert_power,
    convert_tsfc,
)


def test_cruise_altitude_in_meters():
    assert convert_length(35000, "ft", "m") == pytest.approx(10668.0, abs=1e-9)

def test_length_round_trip_and_identity():
    assert convert_length(1.0, "nmi", "m") == 1852.0
    assert convert_length(10668.0, "m", "ft") == pytest.approx(35000.0)
    assert convert_length(3.2, "m", "m") == 3.2

def test_length_array_input_returns_array():
    out = convert_length([0.0, 1000.0, 35000.0], "ft", "m")
    assert isinstance(out, np.ndarray)
    np.testing.assert_allclose(out, [0.0, 304.8, 10668.0])

def test_scalar_input_returns_float():
    assert isinstance(convert_length(np.float32(1.0), "ft", "m"), float)

def test_mass_force_power():
    assert convert_mass(1.0, "lbm", "kg") == pytest.approx(0.45359237)
    assert convert_force(1.0, "lbf", "N") == pytest.approx(4.4482216152605)
    assert convert_power(1.0, "hp", "W") == pytest.approx(745.699872, rel=1e-9)
    assert convert_mass(1.0, "slug", "kg") == pytest.approx(14.593903, rel=1e-6)

def test_tsfc_si_to_imperial():
    """1 kg/(N*s) is 3600 * g0 lbm/(lbf*hr)."""
    assert convert_tsfc(1.0, "SI", "Imp") == pytest.approx(3600.0 * 9.80665, rel=1e-12)

def test_tsfc_imperial_to_si():
    assert convert_tsfc(1103.245, "Imp", "SI") == pytest.approx(0.03124991148, rel=1e-6)

def test_tsfc_same_system_is_identity():
    assert convert_tsfc(0.55, "Imp", "Imp") == 0.55

@pytest.mark.parametrize("func, args", [
    (convert_length, ("furlong", "m")),
    (convert_length, ("m", "parsec")),
    (convert_tsfc, ("SI", "metric")),
    (convert_force, ("N", "kgf")),
])
def test_unknown_units_raise(func, args):
    with pytest.raises(InputContractError, match="unknown"):
        func(1.0, *args)
