"""
Simulation configuration loaded from YAML.

Every key is optional; missing keys fall back to the defaults below.
"""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional, Sequence

import yaml

from graph import INF, InvalidInputError
from cost_matrix_graph import ZERO_LINK_POLICIES


ALGORITHMS = ("dvr", "lsr")


@dataclass(frozen=True)
class SimulationConfig:
    sentinel: int = INF
    zero_links: str = "absent"
    max_passes: Optional[int] = None
    record_trace: bool = True
    algorithms: Sequence[str] = ALGORITHMS
    lsr_workers: Optional[int] = None
    use_processes: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.sentinel, int) or self.sentinel <= 0:
            raise InvalidInputError(f"sentinel must be a positive integer, got {self.sentinel!r}")
        if self.zero_links not in ZERO_LINK_POLICIES:
            raise InvalidInputError(
                f"zero_links must be one of {ZERO_LINK_POLICIES}, got {self.zero_links!r}"
            )
        for key in ("max_passes", "lsr_workers"):
            value = getattr(self, key)
            if value is not None and (not isinstance(value, int) or value < 1):
                raise InvalidInputError(f"{key} must be a positive integer, got {value!r}")
        unknown = [a for a in self.algorithms if a not in ALGORITHMS]
        if unknown or not self.algorithms:
            raise InvalidInputError(
                f"algorithms must be a non-empty subset of {ALGORITHMS}, got {list(self.algorithms)!r}"
            )
        # Normalise to a tuple so the config stays hashable.
        object.__setattr__(self, "algorithms", tuple(self.algorithms))


def load_config(path: Path) -> SimulationConfig:
    try:
        data = yaml.safe_load(Path(path).read_text())
    except yaml.YAMLError as exc:
        raise InvalidInputError(f"{path}: invalid YAML: {exc}") from exc
    if data is None:
        return SimulationConfig()
    if not isinstance(data, dict):
        raise InvalidInputError(f"{path}: expected a mapping at the top level")

    known = {f.name for f in fields(SimulationConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise InvalidInputError(f"{path}: unknown config key(s): {', '.join(unknown)}")

    algorithms = data.get("algorithms", ALGORITHMS)
    if isinstance(algorithms, str):
        algorithms = [algorithms]
    return SimulationConfig(
        sentinel=data.get("sentinel", INF),
        zero_links=data.get("zero_links", "absent"),
        max_passes=data.get("max_passes"),
        record_trace=bool(data.get("record_trace", True)),
        algorithms=list(algorithms),
        lsr_workers=data.get("lsr_workers"),
        use_processes=bool(data.get("use_processes", False)),
    )
