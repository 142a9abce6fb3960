# benchreport

`benchreport` reads benchmark result files in JSON form, one per environment,
and appends a Markdown table to a report file. Each row compares a target
benchmark against a baseline benchmark. Each cell has a coloured indicator and
a short verdict such as "MyLib is about **12.3% faster**".

## Installation

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Configuration

A JSON configuration file drives the tool:

```json
{
  "TargetName": "MyLib",
  "YellowIndicatorThreshold": 5.0,
  "OutputPath": "report.md",
  "Environments": [
    {"Description": "Linux, GCC", "Path": "linux-gcc.json"},
    {"Description": "Windows, MSVC", "Path": "windows-msvc.json"}
  ],
  "Metrics": [
    {
      "Name": "Indirect call",
      "TargetBenchmarkName": "BM_MyLibCall",
      "BaselineBenchmarkName": "BM_VirtualCall"
    }
  ]
}
```

Every key is required. `YellowIndicatorThreshold` may be an integer or a
float. All the other scalar values must be strings.

Each environment file may hold a `benchmarks` list. The tool reads only the
entries whose `name` ends in `_median`, and it takes their `real_time`. The
suffix is removed before the name is matched against the metrics. If the same
name appears more than once, the first entry is used.

## Usage

```
benchreport config.json
```

The same command can also be run as `python -m benchreport.report config.json`.

Each environment becomes one column and each metric becomes one row. The
table is appended to `OutputPath` in UTF-8. If the tool is not given exactly
one argument, it prints a usage line and exits with status 0. If anything
fails, for example a missing file, bad JSON or a benchmark name that is not in
an environment file, it writes `An error occurred: <message>` to standard
error and exits with status 1.

Each cell is built from a rate, computed as
`(baseline - target) * 100 / target`:

- 🟡 when the absolute rate is below `YellowIndicatorThreshold`
- 🔴 otherwise, when the target is slower (the rate is negative)
- 🟢 otherwise, when the target is faster

The absolute rate is printed with one decimal place. If that comes out as
`0.0`, the cell reads "*TargetName* has similar performance".

## Library use

```python
from benchreport.config import ConfigError, load_config
from benchreport.report import describe_rate, generate_report, parse_benchmarks, render_report

config = load_config("config.json")
benchmarks = [parse_benchmarks(env.path) for env in config.environments]
print(render_report(config, benchmarks))

print(describe_rate("MyLib", 80.0, 100.0, 5.0))  # 🟢MyLib is about **25.0% faster**

generate_report("config.json")  # appends the table to config.output_path
```

- `benchreport.config` holds the frozen dataclasses `ReportConfig`,
  `EnvironmentInfo` and `MetricInfo`. Each has `from_dict` and `to_dict`,
  which use the JSON key names shown above. Their attributes are snake_case,
  for example `target_name` and `yellow_indicator_threshold`.
  `load_config(path)` reads a configuration file. `ConfigError`, a subclass
  of `ValueError`, is raised for missing keys, values of the wrong type and
  invalid JSON.
- `benchreport.report.parse_benchmarks(path)` returns a dict that maps each
  benchmark name to its median real time.
- `render_report(config, benchmarks)` returns the table as a string. The
  `benchmarks` mappings are given in the same order as
  `config.environments`. A `KeyError` is raised if a metric's benchmark is
  missing from one of them.
- `main(argv=None)` is the command entry point and returns the exit status.

## Limitations

The tool only compares medians that have already been recorded. It does not
run benchmarks. It does not rewrite or deduplicate the report file, and
running it twice appends the table twice.