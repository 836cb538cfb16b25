"""
Mission history: zero-filled arrays for every quantity tracked along a
mission, in SI ("si") and English ("ee") units.

Only the SI block is filled by the performance code; the English block is
allocated alongside it so that both have identical shapes.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from Hardware.engine import OffDesignOutputs
from Hardware.errors import InputContractError


@dataclass
class PerformanceHistory:
    time: np.ndarray
    dist: np.ndarray
    tas: np.ndarray
    eas: np.ndarray
    rc: np.ndarray
    alt: np.ndarray
    acc: np.ndarray
    fpa: np.ndarray
    mach: np.ndarray
    rho: np.ndarray
    ps: np.ndarray


@dataclass
class PropulsionHistory:
    # one column per transmitter (engine)
    tsfc: np.ndarray
    exit_mach: np.ndarray
    fan_diam: np.ndarray
    mdot_air: np.ndarray
    mdot_fuel: np.ndarray


@dataclass
class WeightHistory:
    cur_weight: np.ndarray
    fburn: np.ndarray


@dataclass
class PowerHistory:
    tv: np.ndarray
    req: np.ndarray
    lam_ups: np.ndarray
    lam_dwn: np.ndarray
    soc: np.ndarray
    pav: np.ndarray
    preq: np.ndarray
    tav: np.ndarray
    treq: np.ndarray
    pout: np.ndarray
    tout: np.ndarray
    voltage: np.ndarray
    current: np.ndarray
    capacity: np.ndarray


@dataclass
class EnergyHistory:
    ke: np.ndarray
    pe: np.ndarray
    e_es: np.ndarray
    eleft_es: np.ndarray


@dataclass
class MissionVars:
    performance: PerformanceHistory
    propulsion: PropulsionHistory
    weight: WeightHistory
    power: PowerHistory
    energy: EnergyHistory


@dataclass
class MissionHistory:
    si: MissionVars
    ee: MissionVars
    segment: np.ndarray

    @property
    def npnt(self) -> int:
        return len(self.segment)


def _check_count(name: str, value: int, minimum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InputContractError(f"{name} must be an integer, got {type(value).__name__}")
    if value < minimum:
        raise InputContractError(f"{name} must be >= {minimum}, got {value}")
    return int(value)


def _mission_vars(npnt: int, ncomp: int, nsrc: int, ntrn: int, nargs_ups: int, nargs_dwn: int) -> MissionVars:
    def scalar():
        return np.zeros(npnt)

    def per(n):
        return np.zeros((npnt, n))

    performance = PerformanceHistory(
        time=scalar(), dist=scalar(), tas=scalar(), eas=scalar(), rc=scalar(), alt=scalar(),
        acc=scalar(), fpa=scalar(), mach=scalar(), rho=scalar(), ps=scalar(),
    )
    propulsion = PropulsionHistory(
        tsfc=per(ntrn), exit_mach=per(ntrn), fan_diam=per(ntrn), mdot_air=per(ntrn), mdot_fuel=per(ntrn),
    )
    weight = WeightHistory(cur_weight=scalar(), fburn=scalar())
    power = PowerHistory(
        tv=scalar(),
        req=scalar(),
        lam_ups=per(max(1, nargs_ups)),
        lam_dwn=per(max(1, nargs_dwn)),
        soc=per(nsrc),
        pav=per(ncomp),
        preq=per(ncomp),
        tav=per(ncomp),
        treq=per(ncomp),
        pout=per(ncomp),
        tout=per(ncomp),
        voltage=per(nsrc),
        current=per(nsrc),
        capacity=per(nsrc),
    )
    energy = EnergyHistory(ke=scalar(), pe=scalar(), e_es=per(nsrc), eleft_es=per(nsrc))
    return MissionVars(performance=performance, propulsion=propulsion, weight=weight, power=power, energy=energy)


def init_mission_history(
    npnt: int,
    ncomp: int,
    nsrc: int,
    ntrn: int,
    nargs_ups: int = 0,
    nargs_dwn: int = 0,
) -> MissionHistory:
    """
    Allocate an empty mission history.

    Parameters
    ----------
    npnt : int
        Number of points in the mission profile (last segment end index).
    ncomp : int
        Number of components in the propulsion architecture.
    nsrc : int
        Number of energy sources.
    ntrn : int
        Number of transmitters (engines, motors, ...).
    nargs_ups, nargs_dwn : int
        Number of upstream/downstream operational split arguments; at least
        one column is always allocated.
    """
    npnt = _check_count("npnt", npnt, 1)
    ncomp = _check_count("ncomp", ncomp, 0)
    nsrc = _check_count("nsrc", nsrc, 0)
    ntrn = _check_count("ntrn", ntrn, 0)
    nargs_ups = _check_count("nargs_ups", nargs_ups, 0)
    nargs_dwn = _check_count("nargs_dwn", nargs_dwn, 0)

    return MissionHistory(
        si=_mission_vars(npnt, ncomp, nsrc, ntrn, nargs_ups, nargs_dwn),
        ee=_mission_vars(npnt, ncomp, nsrc, ntrn, nargs_ups, nargs_dwn),
        segment=np.full(npnt, "", dtype=object),
    )


def record_off_design(history: MissionHistory, index: int, outputs: OffDesignOutputs, transmitter: int = 0):
    """Store one off-design result at mission point ``index`` for one engine."""
    if not 0 <= index < history.npnt:
        raise InputContractError(f"mission point {index} outside history of {history.npnt} points")
    ntrn = history.si.propulsion.tsfc.shape[1]
    if not 0 <= transmitter < ntrn:
        raise InputContractError(f"transmitter {transmitter} outside history with {ntrn} transmitters")

    history.si.propulsion.tsfc[index, transmitter] = outputs.tsfc
    history.si.propulsion.mdot_fuel[index, transmitter] = outputs.fuel
    history.ee.propulsion.tsfc[index, transmitter] = outputs.tsfc_imperial
