import json

import pytest

from benchreport.config import EnvironmentInfo, MetricInfo, ReportConfig
from benchreport.report import (
    describe_rate,
    generate_report,
    main,
    parse_benchmarks,
    render_report,
)

YELLOW = "\U0001F7E1"
RED = "\U0001F534"
GREEN = "\U0001F7E2"


def _write_benchmarks(path, entries):
    path.write_text(json.dumps({"benchmarks": entries}), encoding="utf-8")
    return path


def _sample_entries():
    return [
        {"name": "BM_Proxy_mean", "real_time": 1.0},
        {"name": "BM_Proxy_median", "real_time": 100.0},
        {"name": "BM_Virtual_median", "real_time": 150},
        {"name": "BM_Other", "real_time": 7.0},
    ]


def test_parse_benchmarks_keeps_only_medians(tmp_path):
    path = _write_benchmarks(tmp_path / "b.json", _sample_entries())
    result = parse_benchmarks(path)
    assert result == {"BM_Proxy": 100.0, "BM_Virtual": 150.0}


def test_parse_benchmarks_first_duplicate_wins(tmp_path):
    entries = [
        {"name": "X_median", "real_time": 1.0},
        {"name": "X_median", "real_time": 2.0},
    ]
    path = _write_benchmarks(tmp_path / "b.json", entries)
    assert parse_benchmarks(path) == {"X": 1.0}


def test_parse_benchmarks_without_list(tmp_path):
    path = tmp_path / "b.json"
    path.write_text("{}", encoding="utf-8")
    assert parse_benchmarks(path) == {}


def test_describe_rate_similar():
    text = describe_rate("proxy", 10.0, 10.0, 5.0)
    assert text == YELLOW + "proxy has similar performance"


def test_describe_rate_faster_is_green():
    text = describe_rate("proxy", 100.0, 150.0, 5.0)
    assert text == GREEN + "proxy is about **50.0% faster**"


def test_describe_rate_slower_is_red():
    text = describe_rate("proxy", 200.0, 100.0, 5.0)
    assert text.startswith(RED + "proxy is about **")
    assert text.endswith("% slower**")


def test_describe_rate_below_threshold_is_yellow():
    text = describe_rate("proxy", 200.0, 100.0, 1000.0)
    assert text.startswith(YELLOW)
    assert text.endswith("slower**")


def test_describe_rate_zero_target():
    assert describe_rate("p", 0.0, 1.0, 5.0) == GREEN + "p is about **inf% faster**"


def _config(tmp_path, environments, metrics, output="out.md"):
    return ReportConfig(
        target_name="proxy",
        yellow_indicator_threshold=5.0,
        output_path=str(tmp_path / output),
        environments=environments,
        metrics=metrics,
    )


def test_render_report_structure(tmp_path):
    envs = [EnvironmentInfo("A", "a.json"), EnvironmentInfo("B", "b.json")]
    metrics = [MetricInfo("Speed", "BM_Proxy", "BM_Virtual")]
    config = _config(tmp_path, envs, metrics)
    bench = {"BM_Proxy": 100.0, "BM_Virtual": 150.0}
    text = render_report(config, [bench, bench])
    lines = text.split("\n")
    assert lines[0] == "| | A | B |"
    assert lines[1] == "| - | - | - |"
    cell = describe_rate("proxy", 100.0, 150.0, 5.0)
    assert lines[2] == f"| Speed | {cell} | {cell} |"
    assert text.endswith("\n")
    assert len(lines) == 4


def test_render_report_missing_benchmark(tmp_path):
    config = _config(
        tmp_path,
        [EnvironmentInfo("A", "a.json")],
        [MetricInfo("Speed", "BM_Proxy", "BM_Missing")],
    )
    with pytest.raises(KeyError):
        render_report(config, [{"BM_Proxy": 1.0}])


def _write_config(tmp_path):
    bench = _write_benchmarks(tmp_path / "bench.json", _sample_entries())
    config = _config(
        tmp_path,
        [EnvironmentInfo("Env", str(bench))],
        [MetricInfo("Speed", "BM_Proxy", "BM_Virtual")],
    )
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps(config.to_dict()), encoding="utf-8")
    return config, config_path


def test_generate_report_appends(tmp_path):
    config, config_path = _write_config(tmp_path)
    generate_report(config_path)
    with open(config.output_path, encoding="utf-8") as stream:
        first = stream.read()
    assert first == render_report(config, [parse_benchmarks(config.environments[0].path)])
    generate_report(config_path)
    with open(config.output_path, encoding="utf-8") as stream:
        assert stream.read() == first * 2


def test_main_usage(capsys):
    assert main([]) == 0
    assert "Usage: report_generator <config file path>" in capsys.readouterr().out


def test_main_success(tmp_path):
    config, config_path = _write_config(tmp_path)
    assert main([str(config_path)]) == 0
    with open(config.output_path, encoding="utf-8") as stream:
        assert "Speed" in stream.read()


def test_main_error(tmp_path, capsys):
    assert main([str(tmp_path / "missing.json")]) == 1
    assert capsys.readouterr().err.startswith("An error occurred: ")