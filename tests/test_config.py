from unittest.mock import patch

import pytest

from Environment.config import EnvironmentConfig
from Hardware.config import EngineConfig
from Logging.config import LoggingConfig
from Main.config import MissionConfig


def test_engine_config_default_values():
    """Off-design model constants default to the calibrated values."""
    cfg = EngineConfig()
    assert cfg.temperature_exponent == 3.8
    assert cfg.ram_coefficient == 0.2
    assert cfg.calibration_ref_alt == 35_000.0
    assert cfg.calibration_ref_alt_unit == "ft"

def test_environment_config_default_values():
    cfg = EnvironmentConfig()
    assert cfg.P_SL == 101325.0
    assert cfg.T_SL == 288.15
    assert cfg.air_gamma == 1.4

def test_mission_config_default_profile():
    cfg = MissionConfig()
    assert len(cfg.profile_points) > 0
    assert all(len(row) == 6 for row in cfg.profile_points)
    # default_factory gives each config its own list
    assert MissionConfig().profile_points is not cfg.profile_points

def test_mission_config_custom_values():
    cfg = MissionConfig(n_transmitters=2, profile_points=[["Cruise", 10_000.0, 0.8, 30_000.0, 0.0, 60.0]])
    assert cfg.n_transmitters == 2
    assert cfg.profile_points == [["Cruise", 10_000.0, 0.8, 30_000.0, 0.0, 60.0]]

def test_logging_config_defaults():
    cfg = LoggingConfig()
    assert cfg.save_log is True
    assert cfg.plot_profile is False

@patch("Environment.config.AtmosphereModel", autospec=True)
def test_environment_config_creates_atmosphere(MockAtmosphereModel):
    cfg = EnvironmentConfig(atmosphere_max_alt_m=20_000.0)
    atm = cfg.create_atmosphere_model()
    MockAtmosphereModel.assert_called_once_with(cfg, max_altitude=20_000.0, cache_size=256)
    assert atm is MockAtmosphereModel.return_value
