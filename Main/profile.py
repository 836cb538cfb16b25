"""
Mission profile sweep: evaluate the off-design engine model at each point of
a flight profile and fill a mission history with the results.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from Environment.atmosphere import AtmosphereModel
from Environment.flight_condition import compute_flight_condition
from Hardware.config import EngineConfig
from Hardware.engine import OffDesignParams, OnDesignEngine
from Hardware.errors import InputContractError
from Hardware.off_design import DEFAULT_ENGINE_CONFIG, simple_off_design
from Main.config import MissionConfig
from Main.mission_history import MissionHistory, record_off_design


@dataclass(frozen=True)
class ProfilePoint:
    segment: str
    alt: float            # [m]
    mach: float           # [-]
    thrust: float         # [N]
    electric_load: float  # [W]
    duration: float       # [s]

    @classmethod
    def from_row(cls, row: Sequence) -> "ProfilePoint":
        if len(row) != 6:
            raise InputContractError(
                f"profile row needs [segment, alt, mach, thrust, electric_load, duration], got {list(row)}"
            )
        segment, alt, mach, thrust, load, duration = row
        if duration < 0.0:
            raise InputContractError(f"negative duration {duration} s in segment {segment!r}")
        return cls(str(segment), float(alt), float(mach), float(thrust), float(load), float(duration))


def run_profile(
    engine: OnDesignEngine,
    mission_config: Optional[MissionConfig] = None,
    engine_config: EngineConfig = DEFAULT_ENGINE_CONFIG,
    atmosphere: Optional[AtmosphereModel] = None,
    transmitter: int = 0,
) -> MissionHistory:
    """
    Fly the configured profile point by point.

    Each point is held for its duration; fuel burned over that duration is
    added to the cumulative burn and removed from the current mass. Points
    are independent for the engine model, only the running totals carry
    over.
    """
    mission_config = mission_config or MissionConfig()
    points = [ProfilePoint.from_row(row) for row in mission_config.profile_points]
    history = mission_config.create_mission_history(npnt=len(points))

    perf = history.si.performance
    weight = history.si.weight

    time = 0.0
    dist = 0.0
    fburn = 0.0
    for i, point in enumerate(points):
        fltcon = compute_flight_condition(point.alt, "Mach", point.mach, atmosphere)
        outputs = simple_off_design(
            engine,
            OffDesignParams.at(alt=point.alt, mach=point.mach, thrust=point.thrust),
            point.electric_load,
            config=engine_config,
            atmosphere=atmosphere,
        )

        history.segment[i] = point.segment
        perf.time[i] = time
        perf.dist[i] = dist
        perf.alt[i] = point.alt
        perf.mach[i] = point.mach
        perf.tas[i] = fltcon.tas
        perf.eas[i] = fltcon.eas
        perf.rho[i] = fltcon.density
        weight.fburn[i] = fburn
        weight.cur_weight[i] = mission_config.takeoff_mass_kg - fburn
        record_off_design(history, i, outputs, transmitter)

        time += point.duration
        dist += fltcon.tas * point.duration
        fburn += outputs.fuel * point.duration

    return history
