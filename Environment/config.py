"""
Configuration for the environment models (atmosphere, flight conditions).
"""

from dataclasses import dataclass

from Environment.atmosphere import AtmosphereModel


@dataclass
class EnvironmentConfig:
    # --- Atmosphere ---
    # US76 lower atmosphere; aircraft never leave it
    atmosphere_max_alt_m: float = 86_000.0
    # distinct altitudes memoized per model
    atmosphere_cache_size: int = 256

    # Physics Constants
    G0: float = 9.80665
    P_SL: float = 101325.0
    T_SL: float = 288.15
    RHO_SL: float = 1.225
    air_gamma: float = 1.4
    air_gas_constant: float = 287.05

    def create_atmosphere_model(self) -> AtmosphereModel:
        return AtmosphereModel(self, max_altitude=self.atmosphere_max_alt_m,
                              cache_size=self.atmosphere_cache_size)
