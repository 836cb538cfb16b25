"""
Entry point to run the off-design engine model over a demo mission profile.

This builds the atmosphere and the sized engine from their configs, flies
the profile point by point through the off-design fuel-flow model, and
prints a short summary. The engine is loosely sized after a CFM56-class
turbofan with a parallel electric motor assisting in climb.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from Environment.config import EnvironmentConfig
from Hardware.config import EngineConfig
from Hardware.engine import OffDesignParams
from Hardware.errors import OffDesignError
from Hardware.off_design import simple_off_design
from Main.config import MissionConfig
from Main.mission_history import MissionHistory
from Main.profile import ProfilePoint, run_profile
from Logging.config import LoggingConfig
from Logging import generate_logs


def main_orchestrator(
    env_config: Optional[EnvironmentConfig] = None,
    engine_config: Optional[EngineConfig] = None,
    mission_config: Optional[MissionConfig] = None,
    log_config: Optional[LoggingConfig] = None,
):
    # 1. Instantiate all config objects if not provided
    env_config = env_config or EnvironmentConfig()
    engine_config = engine_config or EngineConfig()
    mission_config = mission_config or MissionConfig()
    log_config = log_config or LoggingConfig()

    # 2. Instantiate core components using factory methods from configs
    atmosphere = env_config.create_atmosphere_model()
    engine = engine_config.create_engine()

    return engine, atmosphere, engine_config, mission_config, log_config


def log_profile_points(engine, atmosphere, engine_config: EngineConfig, mission_config: MissionConfig,
                       filename: Optional[str] = None):
    """Evaluate every profile point on its own and append it to the off-design log."""
    generate_logs.ensure_log_header(filename)
    for i, row in enumerate(mission_config.profile_points):
        point = ProfilePoint.from_row(row)
        params = OffDesignParams.at(alt=point.alt, mach=point.mach, thrust=point.thrust)
        label = f"{i}:{point.segment}"
        try:
            outputs = simple_off_design(engine, params, point.electric_load, config=engine_config, atmosphere=atmosphere)
        except OffDesignError as exc:
            generate_logs.log_off_design(label, params, point.electric_load, None, status=f"ERROR: {exc}", filename=filename)
            continue
        generate_logs.log_off_design(label, params, point.electric_load, outputs, filename=filename)


def print_summary(history: MissionHistory, mission_config: MissionConfig, transmitter: int = 0):
    """Prints a summary of the mission results."""
    perf = history.si.performance
    prop = history.si.propulsion
    tsfc_imp = history.ee.propulsion.tsfc[:, transmitter]

    print("\n=== Off-design mission summary ===")
    print(f"{'#':>2} {'segment':<8} {'alt [m]':>9} {'Mach':>5} {'TAS [m/s]':>9} "
          f"{'fuel [kg/s]':>11} {'TSFC [lbm/lbf/hr]':>17}")
    for i in range(history.npnt):
        print(
            f"{i:>2} {history.segment[i]:<8} {perf.alt[i]:>9.0f} {perf.mach[i]:>5.2f} {perf.tas[i]:>9.1f} "
            f"{prop.mdot_fuel[i, transmitter]:>11.4f} {tsfc_imp[i]:>17.4f}"
        )

    last = mission_config.profile_points[-1]
    total_burn = history.si.weight.fburn[-1] + prop.mdot_fuel[-1, transmitter] * float(last[-1])
    print(f"Mission time    : {(perf.time[-1] + float(last[-1])) / 60.0:.1f} min")
    print(f"Fuel burned     : {total_burn:.1f} kg")
    print(f"Min TSFC        : {np.min(tsfc_imp):.4f} lbm/(lbf*hr)")
    print(f"Max TSFC        : {np.max(tsfc_imp):.4f} lbm/(lbf*hr)")


def main():
    engine, atmosphere, engine_config, mission_config, log_config = main_orchestrator()

    try:
        history = run_profile(engine, mission_config, engine_config=engine_config, atmosphere=atmosphere)
    except OffDesignError as exc:
        print(f"Mission profile could not be evaluated: {exc}")
        raise

    if log_config.print_summary:
        print_summary(history, mission_config)

    if log_config.save_log:
        log_profile_points(engine, atmosphere, engine_config, mission_config,
                           filename=log_config.off_design_log_filename)
        generate_logs.save_history_to_csv(history, log_config.history_filename)

    if log_config.plot_profile:
        from Analysis.plotting import plot_mission_profile
        plot_mission_profile(history)

    return history


if __name__ == "__main__":
    main()
