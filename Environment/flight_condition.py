"""
Flight-condition lookup: altitude plus one airspeed (Mach, TAS or EAS) in, the full
set of airspeeds and static properties out.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

import numpy as np

from Environment.atmosphere import AtmosphereModel
from Environment.config import EnvironmentConfig
from Hardware.errors import InputContractError

SPEED_MODES = ("Mach", "TAS", "EAS")

DEFAULT_ATMOSPHERE = EnvironmentConfig().create_atmosphere_model()


@dataclass(frozen=True)
class FlightCondition:
    alt: float          # [m]
    eas: float          # [m/s]
    tas: float          # [m/s]
    mach: float         # [-]
    sound_speed: float  # [m/s]
    temperature: float  # [K]
    pressure: float     # [Pa]
    density: float      # [kg/m^3]

    def as_tuple(self) -> tuple[float, float, float, float, float]:
        """Return ``(eas, tas, sound_speed, temperature, pressure)``."""
        return self.eas, self.tas, self.sound_speed, self.temperature, self.pressure


def compute_flight_condition(
    altitude: float,
    mode: str,
    value: float,
    atmosphere: Optional[AtmosphereModel] = None,
) -> FlightCondition:
    """
    Resolve a flight condition from altitude and one airspeed.

    Parameters
    ----------
    altitude : float
        Geometric altitude [m].
    mode : str
        Which speed ``value`` gives: ``"Mach"``, ``"TAS"`` [m/s] or
        ``"EAS"`` [m/s].
    value : float
        The speed in the units implied by ``mode``.
    atmosphere : AtmosphereModel, optional
        Atmosphere to query; the shared US76 model is used if omitted.

    Returns
    -------
    FlightCondition
    """
    if mode not in SPEED_MODES:
        raise InputContractError(f"unknown speed mode {mode!r}; expected one of {SPEED_MODES}")
    if not (np.isfinite(altitude) and np.isfinite(value)):
        raise InputContractError(f"non-finite flight condition: altitude={altitude}, {mode}={value}")
    if value < 0.0:
        raise InputContractError(f"negative {mode} ({value}) is not a valid flight condition")

    atm = atmosphere or DEFAULT_ATMOSPHERE
    props = atm.properties(altitude)
    props_sl = atm.properties(0.0)
    a = atm.get_speed_of_sound(altitude)
    density_ratio = props.rho / props_sl.rho

    if mode == "Mach":
        mach = float(value)
        tas = mach * a
    elif mode == "TAS":
        tas = float(value)
        mach = tas / a
    else:
        tas = value / math.sqrt(density_ratio)
        mach = tas / a

    return FlightCondition(
        alt=float(altitude),
        eas=tas * math.sqrt(density_ratio),
        tas=tas,
        mach=mach,
        sound_speed=a,
        temperature=props.T,
        pressure=props.p,
        density=props.rho,
    )
