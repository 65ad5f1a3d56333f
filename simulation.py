"""
Simulation driver: runs the configured routing algorithms over one topology.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
import logging

from config import SimulationConfig
from dijkstra_engine import compute_lsr
from distance_vector_engine import compute_dvr
from graph import Graph
from routing import DistanceVectorResult, ShortestPathResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationReport:
    dvr: Optional[DistanceVectorResult]
    lsr: Optional[Tuple[ShortestPathResult, ...]]


def run_simulation(graph: Graph, config: Optional[SimulationConfig] = None) -> SimulationReport:
    """
    Run DVR and/or LSR over graph as selected by config.algorithms.
    """
    config = config or SimulationConfig()
    dvr = None
    lsr = None
    if "dvr" in config.algorithms:
        dvr = compute_dvr(graph, max_passes=config.max_passes, record_trace=config.record_trace)
    if "lsr" in config.algorithms:
        lsr = tuple(
            compute_lsr(graph, max_workers=config.lsr_workers, use_processes=config.use_processes)
        )

    if dvr is not None and lsr is not None:
        mismatches = cost_disagreements(dvr, lsr)
        if mismatches:
            logger.warning("DVR and LSR disagree on %d pair(s): %s", len(mismatches), mismatches[:5])
    return SimulationReport(dvr=dvr, lsr=lsr)


def cost_disagreements(
    dvr: DistanceVectorResult, lsr: Sequence[ShortestPathResult]
) -> List[Tuple[int, int, int, int]]:
    """
    List (src, dest, dvr_cost, lsr_cost) for every pair where the engines differ.

    Both engines report the sentinel for unreachable pairs, so a converged
    run on valid input yields an empty list.
    """
    mismatches: List[Tuple[int, int, int, int]] = []
    for result in lsr:
        src = result.source
        for dest in range(dvr.node_count()):
            dv_cost = dvr.cost(src, dest)
            ls_cost = result.cost(dest)
            if dv_cost != ls_cost:
                mismatches.append((src, dest, dv_cost, ls_cost))
    return mismatches
