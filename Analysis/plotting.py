"""
Functions for plotting mission-profile results.
"""
import numpy as np
import matplotlib.pyplot as plt

from Main.mission_history import MissionHistory


def plot_mission_profile(history: MissionHistory, transmitter: int = 0, show: bool = True):
    """Altitude, fuel flow and TSFC against mission time for one engine."""
    perf = history.si.performance
    t_min = np.asarray(perf.time) / 60.0

    fig, axes = plt.subplots(3, 1, figsize=(8, 9), sharex=True)

    axes[0].step(t_min, perf.alt / 1000.0, where="post")
    axes[0].set_ylabel("Altitude [km]")
    axes[0].set_title("Mission profile")
    axes[0].grid(True)

    axes[1].step(t_min, history.si.propulsion.mdot_fuel[:, transmitter], where="post", color="tab:orange")
    axes[1].set_ylabel("Fuel flow [kg/s]")
    axes[1].grid(True)

    axes[2].step(t_min, history.ee.propulsion.tsfc[:, transmitter], where="post", color="tab:green")
    axes[2].set_ylabel("TSFC [lbm/(lbf*hr)]")
    axes[2].set_xlabel("Time [min]")
    axes[2].grid(True)

    plt.tight_layout()
    if show:
        plt.show()
    return fig
