"""
Unit conversions used by the engine and flight-condition models.

Scalars come back as floats; lists and arrays come back as numpy arrays.
"""

from __future__ import annotations

import numpy as np

from Hardware.errors import InputContractError

# Exact international definitions
FT_TO_M = 0.3048
LBM_TO_KG = 0.45359237
G0 = 9.80665
LBF_TO_N = LBM_TO_KG * G0
HP_TO_W = 550.0 * FT_TO_M * LBF_TO_N

# Each table maps a unit name to its size in the SI base unit.
LENGTH_UNITS = {
    "m": 1.0,
    "km": 1000.0,
    "ft": FT_TO_M,
    "in": FT_TO_M / 12.0,
    "nmi": 1852.0,
    "mi": 5280.0 * FT_TO_M,
}

MASS_UNITS = {
    "kg": 1.0,
    "g": 1.0e-3,
    "lbm": LBM_TO_KG,
    "slug": LBF_TO_N / FT_TO_M,
}

FORCE_UNITS = {
    "N": 1.0,
    "kN": 1000.0,
    "lbf": LBF_TO_N,
}

POWER_UNITS = {
    "W": 1.0,
    "kW": 1000.0,
    "MW": 1.0e6,
    "hp": HP_TO_W,
}

# TSFC systems: SI is kg/(N*s), Imp is lbm/(lbf*hr)
TSFC_SYSTEMS = {
    "SI": 1.0,
    "Imp": LBM_TO_KG / (LBF_TO_N * 3600.0),
}


def _convert(value, from_unit: str, to_unit: str, table: dict, quantity: str):
    try:
        scale = table[from_unit] / table[to_unit]
    except KeyError as exc:
        raise InputContractError(
            f"unknown {quantity} unit {exc.args[0]!r}; expected one of {sorted(table)}"
        ) from None

    if np.ndim(value) == 0:
        return float(value) * scale
    return np.asarray(value, dtype=float) * scale


def convert_length(value, from_unit: str, to_unit: str):
    """Convert a length, e.g. ``convert_length(35000, "ft", "m") -> 10668.0``."""
    return _convert(value, from_unit, to_unit, LENGTH_UNITS, "length")


def convert_mass(value, from_unit: str, to_unit: str):
    return _convert(value, from_unit, to_unit, MASS_UNITS, "mass")


def convert_force(value, from_unit: str, to_unit: str):
    return _convert(value, from_unit, to_unit, FORCE_UNITS, "force")


def convert_power(value, from_unit: str, to_unit: str):
    return _convert(value, from_unit, to_unit, POWER_UNITS, "power")


def convert_tsfc(value, from_system: str, to_system: str):
    """
    Convert a thrust-specific fuel consumption between unit systems.

    Parameters
    ----------
    value : float or array_like
        TSFC in ``from_system`` units.
    from_system, to_system : str
        ``"SI"`` for kg/(N*s) or ``"Imp"`` for lbm/(lbf*hr).

    Notes
    -----
    1 kg/(N*s) = 3600 * g0 lbm/(lbf*hr), roughly 35304.
    """
    return _convert(value, from_system, to_system, TSFC_SYSTEMS, "TSFC")
