"""
Functions for generating and saving off-design and mission-history logs.
"""
from __future__ import annotations

import csv
import datetime as dt
from pathlib import Path

from Hardware.engine import OffDesignOutputs, OffDesignParams
from Main.mission_history import MissionHistory

LOG_FILENAME = "off_design_log.csv"


def _desired_header() -> list[str]:
    return [
        "label", "alt_m", "mach", "thrust_requested_N", "electric_load_W",
        "thrust_engine_N", "fuel_kgps", "tsfc_kg_per_Ns", "tsfc_lbm_per_lbfhr",
        "status",
    ]


def _history_header(ntrn: int) -> list[str]:
    header = ["segment", "t_s", "dist_m", "alt_m", "mach", "tas_mps", "eas_mps", "rho_kgpm3",
              "mass_kg", "fburn_kg"]
    for j in range(ntrn):
        header += [f"tsfc_{j}_kg_per_Ns", f"tsfc_{j}_lbm_per_lbfhr", f"mdot_fuel_{j}_kgps"]
    return header


def save_history_to_csv(history: MissionHistory, filename: str):
    """Write the SI mission history (plus imperial TSFC) to a CSV file."""
    perf = history.si.performance
    weight = history.si.weight
    prop = history.si.propulsion
    ntrn = prop.tsfc.shape[1]

    with open(filename, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(_history_header(ntrn))
        for i in range(history.npnt):
            row = [
                history.segment[i],
                f"{perf.time[i]:.3f}",
                f"{perf.dist[i]:.3f}",
                f"{perf.alt[i]:.3f}",
                f"{perf.mach[i]:.4f}",
                f"{perf.tas[i]:.3f}",
                f"{perf.eas[i]:.3f}",
                f"{perf.rho[i]:.6e}",
                f"{weight.cur_weight[i]:.3f}",
                f"{weight.fburn[i]:.3f}",
            ]
            for j in range(ntrn):
                row += [
                    f"{prop.tsfc[i, j]:.6e}",
                    f"{history.ee.propulsion.tsfc[i, j]:.6f}",
                    f"{prop.mdot_fuel[i, j]:.6f}",
                ]
            writer.writerow(row)
    print(f"Saved mission history to {filename}")


def log_off_design(label: str, params: OffDesignParams, electric_load: float,
                   outputs: OffDesignOutputs | None, status: str = "OK",
                   filename: str | None = None):
    """Append one off-design evaluation to the log (LOG_FILENAME unless ``filename`` is given).

    ``outputs`` is None when the evaluation failed; ``status`` then carries the error.
    """
    if outputs is None:
        results = ["", "", "", ""]
    else:
        results = [
            f"{outputs.thrust:.3f}",
            f"{outputs.fuel:.6f}",
            f"{outputs.tsfc:.6e}",
            f"{outputs.tsfc_imperial:.6f}",
        ]

    with open(filename or LOG_FILENAME, "a", newline="") as f:
        writer = csv.writer(f)
        writer.writerow([
            label,
            f"{params.flight_con.alt:.3f}",
            f"{params.flight_con.mach:.4f}",
            f"{params.thrust:.3f}",
            f"{electric_load:.3f}",
            *results,
            status,
        ])


def _archive_log(log_path: Path) -> Path:
    stamp = dt.datetime.now().strftime("%Y%m%d_%H%M%S")
    archived = log_path.with_name(f"{log_path.stem}_legacy_{stamp}{log_path.suffix}")
    log_path.replace(archived)
    return archived


def ensure_log_header(filename: str | None = None):
    """Start the off-design log with the current header.

    A log already carrying that header is left alone so rows keep appending.
    One written with different columns is archived next to it first.
    """
    log_path = Path(filename or LOG_FILENAME)
    header = _desired_header()

    if log_path.exists() and log_path.stat().st_size > 0:
        with log_path.open(newline="") as f:
            if next(csv.reader(f), None) == header:
                return
        archived = _archive_log(log_path)
        print(f"Log header changed; previous log moved to {archived}", flush=True)

    with log_path.open("w", newline="") as f:
        csv.writer(f).writerow(header)
