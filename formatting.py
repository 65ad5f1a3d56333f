"""
Plain-text rendering of routing tables.

Layout follows the classic console output: a header per node, a
tab-separated Dest/Cost/Next Hop table and a trailing blank line.
"""

from typing import Iterable, List, Sequence

from routing import DistanceVectorResult, RouteEntry, ShortestPathResult


DVR_SECTION = "--- Distance Vector Routing Simulation ---"
LSR_SECTION = "--- Link State Routing Simulation ---"


def format_routing_table(node: int, entries: Iterable[RouteEntry], missing_hop: str) -> str:
    lines = [f"Node {node} Routing Table:", "Dest\tCost\tNext Hop"]
    for entry in entries:
        hop = missing_hop if entry.next_hop is None else str(entry.next_hop)
        lines.append(f"{entry.dest}\t{entry.cost}\t{hop}")
    return "\n".join(lines) + "\n"


def _dvr_tables(tables: Sequence[List[RouteEntry]]) -> List[str]:
    return [format_routing_table(node, entries, "-") for node, entries in enumerate(tables)]


def format_dvr(result: DistanceVectorResult, show_trace: bool = True) -> str:
    """
    Render the per-pass DV snapshots (optional) followed by the final tables.
    """
    blocks: List[str] = []
    if show_trace:
        for snapshot in result.trace:
            blocks.append(f"--- DVR Iteration {snapshot.iteration} ---")
            tables = [snapshot.routing_table(node, result.inf) for node in range(result.node_count())]
            blocks.extend(_dvr_tables(tables))
    blocks.append("--- DVR Final Tables ---")
    blocks.extend(_dvr_tables(result.routing_tables()))
    return "\n".join(blocks) + "\n"


def format_lsr(results: Sequence[ShortestPathResult]) -> str:
    # Source rows are omitted and unreachable hops print as -1.
    blocks = [format_routing_table(r.source, r.routing_table(), "-1") for r in results]
    return "\n".join(blocks) + "\n"

