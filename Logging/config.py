"""
Configuration for logging outputs and post-run plots.
"""

from dataclasses import dataclass


@dataclass
class LoggingConfig:
    # Logging
    save_log: bool = True
    history_filename: str = "mission_history.csv"
    off_design_log_filename: str = "off_design_log.csv"
    print_summary: bool = True
    plot_profile: bool = False
