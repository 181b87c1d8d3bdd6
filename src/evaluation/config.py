"""Run configuration for policy probes."""
from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict

from ..policies.registry import POLICIES
from ..utils.io import PathLike, load_json
from ..utils.logger import resolve_level


@dataclass
class AnalysisConfig:
    policy: str = "null"
    num_cores: int = 1
    log_level: str = "INFO"
    parity_phases: bool = False

    def __post_init__(self) -> None:
        self.policy = str(self.policy).strip().lower()
        if self.policy not in POLICIES:
            raise ValueError(f"Unknown idle-time policy {self.policy!r}; expected one of {sorted(POLICIES)}")
        if int(self.num_cores) < 1:
            raise ValueError("num_cores must be at least 1")
        self.num_cores = int(self.num_cores)
        resolve_level(self.log_level)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnalysisConfig":
        known = {field.name for field in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown configuration keys: {', '.join(unknown)}")
        return cls(**data)

    def merged(self, **overrides: Any) -> "AnalysisConfig":
        """Return a copy where every non-``None`` override replaces a value."""

        values = asdict(self)
        values.update({key: value for key, value in overrides.items() if value is not None})
        return AnalysisConfig.from_dict(values)


def load_config(path: PathLike) -> AnalysisConfig:
    data = load_json(path)
    if not isinstance(data, dict):
        raise ValueError(f"Configuration in {path} must be a JSON object")
    return AnalysisConfig.from_dict(data)
