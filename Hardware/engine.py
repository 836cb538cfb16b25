"""
Engine descriptors: the sized (on-design) engine and one off-design query.

All structures are frozen and check their own fields on construction, so a
bad descriptor is rejected before any performance calculation starts.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Any, Mapping

from Hardware.errors import InputContractError


def _require_number(owner: str, name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InputContractError(f"{owner}.{name} must be a number, got {type(value).__name__}")
    if not math.isfinite(value):
        raise InputContractError(f"{owner}.{name} must be finite, got {value}")
    return float(value)


def _require_field(data: Mapping[str, Any], path: str) -> Any:
    node: Any = data
    for key in path.split("."):
        if not isinstance(node, Mapping) or key not in node:
            raise InputContractError(f"missing required field '{path}'")
        node = node[key]
    return node


@dataclass(frozen=True)
class EngineFuel:
    mdot: float  # SLS fuel mass flow [kg/s]

    def __post_init__(self):
        _require_number("Fuel", "mdot", self.mdot)


@dataclass(frozen=True)
class EngineSpecs:
    design_thrust: float  # SLS design thrust [N]

    def __post_init__(self):
        _require_number("Specs", "design_thrust", self.design_thrust)


@dataclass(frozen=True)
class EngineCalibration:
    c1: float
    c2: float

    def __post_init__(self):
        # dimensionless scale factors on the fuel flow; c2 also divides it
        for name in ("c1", "c2"):
            value = _require_number("Cal", name, getattr(self, name))
            if value <= 0.0:
                raise InputContractError(f"Cal.{name} must be positive, got {value}")


@dataclass(frozen=True)
class OnDesignEngine:
    """A sized engine, as handed over by the on-design calibration."""
    fuel: EngineFuel
    specs: EngineSpecs
    cal: EngineCalibration

    def __post_init__(self):
        for name, kind in (("fuel", EngineFuel), ("specs", EngineSpecs), ("cal", EngineCalibration)):
            if not isinstance(getattr(self, name), kind):
                raise InputContractError(f"OnDesignEngine.{name} must be {kind.__name__}")

    @classmethod
    def from_values(cls, mdot: float, design_thrust: float, c1: float = 1.0, c2: float = 1.0) -> "OnDesignEngine":
        return cls(
            fuel=EngineFuel(mdot=mdot),
            specs=EngineSpecs(design_thrust=design_thrust),
            cal=EngineCalibration(c1=c1, c2=c2),
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "OnDesignEngine":
        """
        Build an engine from a nested mapping laid out like
        ``{"Fuel": {"MDot": ...}, "Specs": {"DesignThrust": ...}, "Cal": {"c1": ..., "c2": ...}}``.

        Every field is required; nothing is defaulted.
        """
        return cls.from_values(
            mdot=_require_field(data, "Fuel.MDot"),
            design_thrust=_require_field(data, "Specs.DesignThrust"),
            c1=_require_field(data, "Cal.c1"),
            c2=_require_field(data, "Cal.c2"),
        )


@dataclass(frozen=True)
class OffDesignFlightCon:
    alt: float   # [m]
    mach: float  # [-]

    def __post_init__(self):
        _require_number("FlightCon", "alt", self.alt)
        mach = _require_number("FlightCon", "mach", self.mach)
        if mach < 0.0:
            raise InputContractError(f"FlightCon.mach must be non-negative, got {mach}")


@dataclass(frozen=True)
class OffDesignParams:
    """One off-design query: where the aircraft is and how much thrust it needs."""
    flight_con: OffDesignFlightCon
    thrust: float  # requested net thrust [N]

    def __post_init__(self):
        if not isinstance(self.flight_con, OffDesignFlightCon):
            raise InputContractError("OffDesignParams.flight_con must be OffDesignFlightCon")
        _require_number("OffDesignParams", "thrust", self.thrust)

    @classmethod
    def at(cls, alt: float, mach: float, thrust: float) -> "OffDesignParams":
        return cls(flight_con=OffDesignFlightCon(alt=alt, mach=mach), thrust=thrust)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "OffDesignParams":
        return cls.at(
            alt=_require_field(data, "FlightCon.Alt"),
            mach=_require_field(data, "FlightCon.Mach"),
            thrust=_require_field(data, "Thrust"),
        )


@dataclass(frozen=True)
class OffDesignOutputs:
    fuel: float           # fuel mass flow [kg/s]
    thrust: float         # thrust required of the combustion engine [N]
    tsfc: float           # [kg/(N*s)]
    tsfc_imperial: float  # [lbm/(lbf*hr)]
