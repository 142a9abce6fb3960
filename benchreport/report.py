"""Build a Markdown comparison table from benchmark result files."""

from __future__ import annotations

import json
import math
import sys
from collections.abc import Mapping, Sequence

from benchreport.config import ReportConfig, load_config

MEDIAN_SUFFIX = "_median"
USAGE = "Usage: report_generator <config file path>"


def parse_benchmarks(path) -> dict[str, float]:
    """Return median real times keyed by benchmark name (suffix removed)."""
    with open(path, "rb") as stream:
        data = json.load(stream)
    result: dict[str, float] = {}
    for node in data.get("benchmarks") or []:
        name = node["name"]
        if name.endswith(MEDIAN_SUFFIX):
            result.setdefault(name[: -len(MEDIAN_SUFFIX)], float(node["real_time"]))
    return result


def describe_rate(target_name: str, target: float, baseline: float, threshold: float) -> str:
    """Describe how much faster or slower the target is than the baseline."""
    diff = (baseline - target) * 100
    try:
        rate = diff / target
    except ZeroDivisionError:
        rate = math.nan if diff == 0 else math.copysign(math.inf, diff) * math.copysign(1.0, target)
    is_negative = rate < 0
    rate = abs(rate) if is_negative else rate
    if rate < threshold:
        indicator = "\U0001F7E1"
    elif is_negative:
        indicator = "\U0001F534"
    else:
        indicator = "\U0001F7E2"
    rate_str = f"{rate:.1f}"
    if rate_str == "0.0":
        return f"{indicator}{target_name} has similar performance"
    verdict = "slower" if is_negative else "faster"
    return f"{indicator}{target_name} is about **{rate_str}% {verdict}**"


def render_report(config: ReportConfig, benchmarks: Sequence[Mapping[str, float]]) -> str:
    """Render the Markdown table; benchmarks line up with config.environments."""
    lines = [
        "| |" + "".join(f" {env.description} |" for env in config.environments),
        "| - |" + " - |" * len(config.environments),
    ]
    for metric in config.metrics:
        cells = "".join(
            " "
            + describe_rate(
                config.target_name,
                bench[metric.target_benchmark_name],
                bench[metric.baseline_benchmark_name],
                config.yellow_indicator_threshold,
            )
            + " |"
            for bench in benchmarks
        )
        lines.append(f"| {metric.name} |{cells}")
    return "".join(line + "\n" for line in lines)


def generate_report(config_path) -> None:
    """Load the configuration and append the rendered table to its output file."""
    config = load_config(config_path)
    benchmarks = [parse_benchmarks(env.path) for env in config.environments]
    with open(config.output_path, "ab") as out:
        out.write(render_report(config, benchmarks).encode("utf-8"))


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point; returns the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print(USAGE)
        return 0
    try:
        generate_report(args[0])
    except Exception as exc:  # noqa: BLE001 - every failure is reported the same way
        message = exc.args[0] if isinstance(exc, KeyError) and exc.args else exc
        print(f"An error occurred: {message}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())