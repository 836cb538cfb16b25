"""
Standard atmosphere for aircraft altitudes, backed by the US Standard
Atmosphere 1976 tables from ``ussa1976``.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
import ussa1976

if TYPE_CHECKING:
    from Environment.config import EnvironmentConfig


@dataclass(frozen=True)
class AtmosphereProperties:
    """Basic thermodynamic properties of the atmosphere at a given altitude.

    Attributes
    ----------
    rho : float
        Mass density [kg/m^3].
    p : float
        Static pressure [Pa].
    T : float
        Temperature [K].
    """
    rho: float
    p: float
    T: float


class AtmosphereModel:
    """US76 atmosphere with a bounded lookup cache.

    Altitudes are geometric and in meters. Lookups are memoized per
    altitude since a mission sweep asks for the sea-level reference on
    every point; the least recently used entries are dropped once
    ``cache_size`` altitudes are held.
    """

    def __init__(self, env_config: EnvironmentConfig | None = None,
                 max_altitude: float = 86_000.0, cache_size: int = 256):
        self.env_config = env_config
        self.max_altitude = max_altitude
        self._lookup = functools.lru_cache(maxsize=cache_size)(self._us76_properties)

    def properties(self, altitude: float) -> AtmosphereProperties:
        """Return atmospheric properties at a given altitude [m]."""
        # Guard against small negative altitudes from numerical noise
        alt = float(np.clip(altitude, 0.0, self.max_altitude))
        return self._lookup(alt)

    def _us76_properties(self, altitude: float) -> AtmosphereProperties:
        # ussa1976 expects an array of altitudes in meters
        ds = ussa1976.compute(
            z=np.array([altitude], dtype=float),
            variables=["t", "p", "rho"],
        )

        # Extract scalars from the Dataset
        T = float(ds["t"][0])   # [K]
        p = float(ds["p"][0])   # [Pa]
        rho = float(ds["rho"][0])  # [kg/m^3]

        return AtmosphereProperties(rho=rho, p=p, T=T)

    def get_speed_of_sound(self, altitude: float) -> float:
        """Returns the local speed of sound [m/s]."""
        gamma = self.env_config.air_gamma if self.env_config else 1.4
        gas_constant = self.env_config.air_gas_constant if self.env_config else 287.05
        T = self.properties(altitude).T
        return float(np.sqrt(max(gamma * gas_constant * T, 0.0)))

    def cache_info(self):
        return self._lookup.cache_info()

    def clear_cache(self):
        self._lookup.cache_clear()
