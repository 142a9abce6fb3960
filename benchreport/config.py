"""Report configuration: environments, metrics and output settings."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any


class ConfigError(ValueError):
    """Raised when a configuration document is missing keys or has bad values."""


def _get(data: Any, key: str, kind: type | tuple[type, ...]) -> Any:
    try:
        value = data[key]
    except (KeyError, TypeError):
        raise ConfigError(f"missing required key {key!r}") from None
    if isinstance(value, bool) or not isinstance(value, kind):
        raise ConfigError(f"key {key!r} has the wrong type")
    return value


@dataclass(frozen=True)
class EnvironmentInfo:
    """One column of the report: a described set of benchmark results."""

    description: str
    path: str

    @classmethod
    def from_dict(cls, data: Any) -> "EnvironmentInfo":
        return cls(_get(data, "Description", str), _get(data, "Path", str))

    def to_dict(self) -> dict[str, Any]:
        return {"Description": self.description, "Path": self.path}


@dataclass(frozen=True)
class MetricInfo:
    """One row of the report: a target benchmark compared with a baseline."""

    name: str
    target_benchmark_name: str
    baseline_benchmark_name: str

    @classmethod
    def from_dict(cls, data: Any) -> "MetricInfo":
        return cls(
            _get(data, "Name", str),
            _get(data, "TargetBenchmarkName", str),
            _get(data, "BaselineBenchmarkName", str),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "Name": self.name,
            "TargetBenchmarkName": self.target_benchmark_name,
            "BaselineBenchmarkName": self.baseline_benchmark_name,
        }


@dataclass(frozen=True)
class ReportConfig:
    """Everything needed to produce one comparison table."""

    target_name: str
    yellow_indicator_threshold: float
    output_path: str
    environments: list[EnvironmentInfo] = field(default_factory=list)
    metrics: list[MetricInfo] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "ReportConfig":
        return cls(
            target_name=_get(data, "TargetName", str),
            yellow_indicator_threshold=float(
                _get(data, "YellowIndicatorThreshold", (int, float))
            ),
            output_path=_get(data, "OutputPath", str),
            environments=[EnvironmentInfo.from_dict(e) for e in _get(data, "Environments", list)],
            metrics=[MetricInfo.from_dict(m) for m in _get(data, "Metrics", list)],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "TargetName": self.target_name,
            "YellowIndicatorThreshold": self.yellow_indicator_threshold,
            "OutputPath": self.output_path,
            "Environments": [env.to_dict() for env in self.environments],
            "Metrics": [metric.to_dict() for metric in self.metrics],
        }


def load_config(path) -> ReportConfig:
    """Read a JSON configuration file and return the parsed configuration."""
    with open(path, "rb") as stream:
        try:
            data = json.load(stream)
        except ValueError as exc:
            raise ConfigError(f"invalid JSON in {path}: {exc}") from exc
    return ReportConfig.from_dict(data)