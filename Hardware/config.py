"""
Configuration for the engine models (off-design constants, example engine).
"""

from dataclasses import dataclass

from Hardware.engine import OnDesignEngine


@dataclass
class EngineConfig:
    # --- Off-design fuel-flow model ---
    # Full-throttle lapse: MDotFull = MDotSLS / ((Theta^k / Delta) * exp(c * M^2))
    temperature_exponent: float = 3.8
    ram_coefficient: float = 0.2

    # Calibration coefficients are fitted at cruise; below it they blend to 1 at SL
    calibration_ref_alt: float = 35_000.0
    calibration_ref_alt_unit: str = "ft"

    # --- Example sized engine (CFM56-class turbofan) ---
    sls_fuel_flow_kgps: float = 1.0
    sls_design_thrust_N: float = 120_000.0
    cal_c1: float = 0.9
    cal_c2: float = 0.95

    def create_engine(self) -> OnDesignEngine:
        return OnDesignEngine.from_values(
            mdot=self.sls_fuel_flow_kgps,
            design_thrust=self.sls_design_thrust_N,
            c1=self.cal_c1,
            c2=self.cal_c2,
        )
