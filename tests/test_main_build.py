import numpy as np
import pytest

import main
from Environment.atmosphere import AtmosphereModel
from Hardware.config import EngineConfig
from Hardware.engine import OnDesignEngine
from Logging import generate_logs
from Logging.config import LoggingConfig
from Main.config import MissionConfig


def test_main_orchestrator_builds_components():
    engine, atmosphere, engine_config, mission_config, log_config = main.main_orchestrator(
        engine_config=EngineConfig(sls_design_thrust_N=90_000.0),
    )
    assert isinstance(engine, OnDesignEngine)
    assert engine.specs.design_thrust == 90_000.0
    assert isinstance(atmosphere, AtmosphereModel)
    assert isinstance(mission_config, MissionConfig)
    assert isinstance(log_config, LoggingConfig)

def test_main_runs_demo_profile(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(generate_logs, "LOG_FILENAME", "unused_default.csv")

    history = main.main()

    out = capsys.readouterr().out
    assert "Off-design mission summary" in out
    assert (tmp_path / "mission_history.csv").exists()
    assert (tmp_path / LoggingConfig().off_design_log_filename).exists()
    assert history.npnt == len(MissionConfig().profile_points)
    assert np.all(history.si.propulsion.mdot_fuel[:, 0] > 0.0)
    assert np.all(np.isfinite(history.ee.propulsion.tsfc))

def test_main_leaves_default_log_filename_alone(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(generate_logs, "LOG_FILENAME", "unused_default.csv")

    main.main()

    assert generate_logs.LOG_FILENAME == "unused_default.csv"
    assert not (tmp_path / "unused_default.csv").exists()

def test_log_profile_points_records_failures(tmp_path):
    log_file = tmp_path / "log.csv"
    engine, atmosphere, engine_config, _, _ = main.main_orchestrator()
    cfg = MissionConfig(profile_points=[
        ["Climb", 3_000.0, 0.5, 100.0, 5.0e6, 60.0],
        ["Cruise", 10_000.0, 0.78, 30_000.0, 0.0, 60.0],
    ])

    main.log_profile_points(engine, atmosphere, engine_config, cfg, filename=str(log_file))

    rows = log_file.read_text().splitlines()
    assert len(rows) == 3
    assert "ERROR: zero or negative thrust requirement" in rows[1]
    assert rows[2].endswith("OK")
