"""
Configuration for the mission profile and the mission history layout.
"""

import dataclasses
from dataclasses import dataclass

from Main.mission_history import MissionHistory, init_mission_history


@dataclass
class MissionConfig:
    # --- Propulsion architecture sizes (history columns) ---
    n_components: int = 2
    n_sources: int = 1
    n_transmitters: int = 1
    n_args_upstream: int = 0
    n_args_downstream: int = 0

    # --- Aircraft ---
    takeoff_mass_kg: float = 70_000.0

    # --- Demo profile ---
    # [segment, altitude_m, mach, thrust_N, electric_load_W, duration_s]
    profile_points: list = dataclasses.field(
        default_factory=lambda: [
            ["Takeoff", 0.0, 0.20, 100_000.0, 0.0, 60.0],
            ["Climb", 1_500.0, 0.35, 80_000.0, 500_000.0, 120.0],
            ["Climb", 5_000.0, 0.55, 60_000.0, 500_000.0, 300.0],
            ["Climb", 9_000.0, 0.72, 45_000.0, 250_000.0, 300.0],
            ["Cruise", 10_668.0, 0.78, 32_000.0, 0.0, 3_600.0],
            ["Cruise", 11_500.0, 0.78, 30_000.0, 0.0, 3_600.0],
            ["Descent", 6_000.0, 0.60, 12_000.0, 0.0, 600.0],
            ["Landing", 500.0, 0.25, 20_000.0, 0.0, 180.0],
        ]
    )

    def create_mission_history(self, npnt: int | None = None) -> MissionHistory:
        return init_mission_history(
            npnt=len(self.profile_points) if npnt is None else npnt,
            ncomp=self.n_components,
            nsrc=self.n_sources,
            ntrn=self.n_transmitters,
            nargs_ups=self.n_args_upstream,
            nargs_dwn=self.n_args_downstream,
        )
