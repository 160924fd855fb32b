"""Run the benchmark binary of several YAML parsers and compare their times."""

from __future__ import annotations

import subprocess
import sys
import tomllib
from collections.abc import Mapping, Sequence
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

import yaml

CONFIG_FILE = "bench_compare.toml"
"""The configuration file read from the current directory."""

USAGE = "Usage: bench_compare <time_parse|run_bench>"
_MODES = ("time_parse", "run_bench")
_U32_MAX = 2**32 - 1
_U64_MAX = 2**64 - 1


def _field(data: Mapping[str, Any], key: str, kind: type, context: str) -> Any:
    if key not in data:
        raise ValueError(f"{context}: missing field `{key}`")
    value = data[key]
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ValueError(f"{context}: field `{key}` must be of type {kind.__name__}")
    return value


def _unsigned(data: Mapping[str, Any], key: str, maximum: int, context: str) -> int:
    value = _field(data, key, int, context)
    if not 0 <= value <= maximum:
        raise ValueError(f"{context}: field `{key}` is out of range")
    return value


@dataclass(frozen=True)
class ParserConfig:
    """A parser to benchmark."""

    name: str
    """The name of the parser."""
    path: str
    """The directory holding the parser's ``run_bench`` and ``time_parse``."""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ParserConfig:
        """Build a parser configuration, raising ValueError on a bad field."""
        if not isinstance(data, Mapping):
            raise ValueError("parser entry must be a table")
        return cls(
            name=_field(data, "name", str, "parser"),
            path=_field(data, "path", str, "parser"),
        )


@dataclass(frozen=True)
class Config:
    """General configuration of a comparison run."""

    yaml_input_dir: str
    """The directory containing the input YAML files."""
    iterations: int
    """Number of iterations given to ``run_bench``."""
    parsers: tuple[ParserConfig, ...]
    """The parsers to run."""
    yaml_output_dir: str
    """The directory in which the YAML output of ``run_bench`` is saved."""
    csv_output: str
    """The path of the CSV aggregating averages for each parser and file."""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Config:
        """Build a configuration, raising ValueError on a bad field."""
        parsers = _field(data, "parsers", list, "config")
        return cls(
            yaml_input_dir=_field(data, "yaml_input_dir", str, "config"),
            iterations=_unsigned(data, "iterations", _U32_MAX, "config"),
            parsers=tuple(ParserConfig.from_dict(entry) for entry in parsers),
            yaml_output_dir=_field(data, "yaml_output_dir", str, "config"),
            csv_output=_field(data, "csv_output", str, "config"),
        )


@dataclass(frozen=True)
class BenchYamlOutput:
    """The output of ``run_bench`` for one parser and one input; times in nanoseconds."""

    parser: str
    input: str
    average: int
    min: int
    max: int
    percentile95: int
    iterations: int
    times: tuple[int, ...]

    @classmethod
    def from_yaml(cls, text: str) -> BenchYamlOutput:
        """Parse the YAML output of ``run_bench``, raising ValueError if it is invalid."""
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ValueError(str(exc)) from exc
        if not isinstance(data, Mapping):
            raise ValueError("expected a mapping")
        context = "bench output"
        times = _field(data, "times", list, context)
        for value in times:
            if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= _U64_MAX:
                raise ValueError(f"{context}: field `times` must hold unsigned integers")
        return cls(
            parser=_field(data, "parser", str, context),
            input=_field(data, "input", str, context),
            average=_unsigned(data, "average", _U64_MAX, context),
            min=_unsigned(data, "min", _U64_MAX, context),
            max=_unsigned(data, "max", _U64_MAX, context),
            percentile95=_unsigned(data, "percentile95", _U64_MAX, context),
            iterations=_unsigned(data, "iterations", _U64_MAX, context),
            times=tuple(times),
        )

    def to_yaml(self) -> str:
        """Serialize the output as YAML."""
        data = asdict(self)
        data["times"] = list(self.times)
        return yaml.safe_dump(data, sort_keys=False)


def load_config(path: str | Path) -> Config:
    """Read a TOML configuration file.

    Raises OSError if it cannot be read and ValueError if it is invalid.
    """
    with open(path, "rb") as handle:
        data = tomllib.load(handle)
    return Config.from_dict(data)


def list_input_files(config: Config) -> list[str]:
    """Return the paths of the ``.yaml`` files (any case) in the input directory."""
    return sorted(
        str(entry)
        for entry in Path(config.yaml_input_dir).iterdir()
        if entry.suffix[1:].lower() == "yaml"
    )


def _run_one(config: Config, parser: ParserConfig, input_path: str, basename: str) -> int:
    command = [
        str(Path(parser.path) / "run_bench"),
        input_path,
        str(config.iterations),
        "--output-yaml",
    ]
    result = subprocess.run(command, capture_output=True, check=False)
    if result.returncode != 0:
        print("Errored: process did exit non-zero")
        return 0
    try:
        output = BenchYamlOutput.from_yaml(result.stdout.decode("utf-8", errors="replace"))
    except ValueError as exc:
        print(f"Errored: Invalid YAML output: {exc}")
        return 0
    saved = Path(f"{config.yaml_output_dir}/{parser.name}-{basename}")
    saved.write_text(output.to_yaml(), encoding="utf-8")
    return output.average


def run_bench(config: Config) -> None:
    """Run ``run_bench`` of every parser on every input file and save the averages.

    A run that fails or prints invalid YAML is recorded with an average of 0.
    """
    Path(config.yaml_output_dir).mkdir(parents=True, exist_ok=True)
    inputs = list_input_files(config)
    averages = []
    for input_path in inputs:
        basename = Path(input_path).name
        input_times = []
        for parser in config.parsers:
            print(f"Running {basename} against {parser.name}")
            input_times.append(_run_one(config, parser, input_path, basename))
        averages.append(input_times)
    save_run_bench_csv(config, inputs, averages)


def save_run_bench_csv(
    config: Config, inputs: Sequence[str], averages: Sequence[Sequence[int]]
) -> None:
    """Write a CSV with one column per parser and one row per input file."""
    with open(config.csv_output, "w", encoding="utf-8", newline="") as csv:
        csv.write("".join(f",{parser.name}" for parser in config.parsers) + "\n")
        for path, row in zip(inputs, averages):
            csv.write(Path(path).name + "".join(f",{avg}" for avg in row) + "\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the comparison named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        config = load_config(CONFIG_FILE)
    except (OSError, ValueError) as exc:
        print(f"{CONFIG_FILE}: {exc}", file=sys.stderr)
        return 1
    if not config.parsers:
        print("Please add at least one parser. Refer to the README for instructions.")
        return 0
    if len(args) != 1 or args[0] not in _MODES:
        print(USAGE)
        return 0
    if args[0] == "time_parse":
        print("time_parse comparison is unavailable", file=sys.stderr)
        return 1
    try:
        run_bench(config)
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())