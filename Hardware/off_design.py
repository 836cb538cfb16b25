"""
Simple off-design engine model.

Estimates fuel flow and TSFC of a sized engine at a part-throttle flight
condition: the SLS fuel flow is lapsed to full throttle at altitude/Mach,
scaled linearly with the thrust fraction, then corrected with two
calibration factors that blend toward 1 below the calibration altitude.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from Environment.atmosphere import AtmosphereModel
from Environment.flight_condition import compute_flight_condition
from Hardware.config import EngineConfig
from Hardware.engine import EngineCalibration, OffDesignOutputs, OffDesignParams, OnDesignEngine
from Hardware.errors import DomainError, InputContractError
from Units.conversion import convert_length, convert_tsfc

DEFAULT_ENGINE_CONFIG = EngineConfig()


@dataclass(frozen=True)
class BlendedCalibration:
    """Below the calibration altitude: factors go linearly from 1 at SL to (c1, c2)."""
    ref_alt: float

    def factors(self, cal: EngineCalibration, alt: float) -> tuple[float, float]:
        ratio = alt / self.ref_alt
        a2 = 1 - cal.c1
        a1 = 1 - a2 * ratio
        b2 = 1 - cal.c2
        b1 = 1 - b2 * ratio
        return a1, b1


@dataclass(frozen=True)
class DirectCalibration:
    """Above the calibration altitude: factors are the coefficients themselves."""
    ref_alt: float

    def factors(self, cal: EngineCalibration, alt: float) -> tuple[float, float]:
        return cal.c1, cal.c2


CalibrationStrategy = Union[BlendedCalibration, DirectCalibration]


def calibration_ref_alt(config: EngineConfig = DEFAULT_ENGINE_CONFIG) -> float:
    """Calibration (cruise) altitude in meters."""
    return convert_length(config.calibration_ref_alt, config.calibration_ref_alt_unit, "m")


def select_calibration(alt: float, ref_alt: float) -> CalibrationStrategy:
    if alt <= ref_alt:
        return BlendedCalibration(ref_alt)
    return DirectCalibration(ref_alt)


def full_throttle_fuel_flow(mdot_sls: float, theta: float, delta: float, mach: float,
                            config: EngineConfig = DEFAULT_ENGINE_CONFIG) -> float:
    """Lapse the SLS fuel flow to full throttle at a flight condition."""
    lapse = (theta ** config.temperature_exponent / delta) * math.exp(config.ram_coefficient * mach ** 2)
    return mdot_sls / lapse


def simple_off_design(
    engine: OnDesignEngine,
    params: OffDesignParams,
    electric_load: float = 0.0,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
    atmosphere: Optional[AtmosphereModel] = None,
) -> OffDesignOutputs:
    """
    Estimate fuel flow and TSFC at an off-design operating point.

    Parameters
    ----------
    engine : OnDesignEngine
        The sized engine (SLS fuel flow, SLS design thrust, calibration).
    params : OffDesignParams
        Altitude [m], Mach [-] and requested net thrust [N].
    electric_load : float
        Power supplied in parallel by an electric motor [W]; converted to a
        thrust offset through the true airspeed.
    config : EngineConfig
        Model constants.
    atmosphere : AtmosphereModel, optional
        Atmosphere for the flight-condition lookups.

    Returns
    -------
    OffDesignOutputs
        Fuel flow [kg/s], combustion-engine thrust [N], TSFC in SI and
        imperial units.

    Raises
    ------
    InputContractError
        If the descriptors are of the wrong type or the load is not finite.
    DomainError
        If the design thrust or the thrust requirement is zero or negative,
        or if an electric load is given at zero airspeed.
    """
    if not isinstance(engine, OnDesignEngine):
        raise InputContractError(f"engine must be OnDesignEngine, got {type(engine).__name__}")
    if not isinstance(params, OffDesignParams):
        raise InputContractError(f"params must be OffDesignParams, got {type(params).__name__}")
    if isinstance(electric_load, bool) or not isinstance(electric_load, numbers.Real) or not math.isfinite(electric_load):
        raise InputContractError(f"electric_load must be a finite number, got {electric_load!r}")

    thrust_sls = engine.specs.design_thrust
    if thrust_sls <= 0.0:
        raise DomainError(f"zero or negative design thrust: DesignThrust={thrust_sls} N")

    alt = params.flight_con.alt
    mach = params.flight_con.mach

    # temperature and pressure at sea level and at altitude
    ref = compute_flight_condition(0.0, "Mach", 0.0, atmosphere)
    fltcon = compute_flight_condition(alt, "Mach", mach, atmosphere)
    theta = fltcon.temperature / ref.temperature
    delta = fltcon.pressure / ref.pressure

    # subtract the thrust provided by the electric motor
    thrust_req = params.thrust
    if electric_load != 0.0:
        if fltcon.tas == 0.0:
            raise DomainError(
                f"zero true airspeed with nonzero electric load: ElectricLoad={electric_load} W at Mach {mach}"
            )
        thrust_req = thrust_req - electric_load / fltcon.tas
    if thrust_req <= 0.0:
        raise DomainError(
            f"zero or negative thrust requirement: ThrustReq={thrust_req} N "
            f"(Thrust={params.thrust} N, ElectricLoad={electric_load} W)"
        )

    mdot_full = full_throttle_fuel_flow(engine.fuel.mdot, theta, delta, mach, config)

    a1, b1 = select_calibration(alt, calibration_ref_alt(config)).factors(engine.cal, alt)
    if b1 <= 0.0:
        raise DomainError(
            f"calibration factor b1={b1} is not positive at alt={alt} m (Cal.c2={engine.cal.c2})"
        )

    # calibrate for a partially open throttle
    mdot_act = a1 * mdot_full * (1 / b1) * (thrust_req / thrust_sls)

    tsfc = mdot_act / thrust_req

    return OffDesignOutputs(
        fuel=mdot_act,
        thrust=thrust_req,
        tsfc=tsfc,
        tsfc_imperial=convert_tsfc(tsfc, "SI", "Imp"),
    )


def off_design_sweep(
    engine: OnDesignEngine,
    params_seq: Sequence[OffDesignParams],
    electric_loads: Optional[Sequence[float]] = None,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
    atmosphere: Optional[AtmosphereModel] = None,
) -> list[OffDesignOutputs]:
    """Evaluate independent off-design points, returning results in input order."""
    if electric_loads is None:
        electric_loads = [0.0] * len(params_seq)
    if len(electric_loads) != len(params_seq):
        raise InputContractError(
            f"got {len(params_seq)} off-design points but {len(electric_loads)} electric loads"
        )
    return [
        simple_off_design(engine, params, load, config=config, atmosphere=atmosphere)
        for params, load in zip(params_seq, electric_loads)
    ]
