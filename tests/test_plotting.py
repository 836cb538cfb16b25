import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt

from Analysis.plotting import plot_mission_profile
from Hardware.engine import OffDesignOutputs
from Main.mission_history import init_mission_history, record_off_design


def test_plot_mission_profile_builds_three_panels():
    history = init_mission_history(npnt=3, ncomp=1, nsrc=1, ntrn=1)
    history.si.performance.time[:] = [0.0, 600.0, 1200.0]
    history.si.performance.alt[:] = [0.0, 5000.0, 10668.0]
    for i in range(3):
        record_off_design(history, i, OffDesignOutputs(0.5 - 0.1 * i, 40_000.0, 1.5e-5, 0.53))

    fig = plot_mission_profile(history, show=False)

    assert len(fig.axes) == 3
    assert fig.axes[0].get_ylabel() == "Altitude [km]"
    plt.close(fig)
