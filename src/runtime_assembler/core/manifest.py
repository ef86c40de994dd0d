import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ManifestError

OUTPUT_FORMATS = ("json", "yaml")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class RuntimeConfig:
    """Where the runtime declaration lives."""

    source: Path = Path("runtime.rt")


@dataclass
class OutputConfig:
    """How assembled artifacts are written."""

    format: str = "json"  # "json" | "yaml"
    path: Path | None = None  # stdout when unset


@dataclass
class LoggingConfig:
    level: str = "WARNING"

    @property
    def level_number(self) -> int:
        return logging.getLevelName(self.level)


@dataclass
class AssemblyManifest:
    """Contents of assembly.toml, with paths resolved against its directory."""

    root: Path
    runtime: RuntimeConfig = field(default_factory=RuntimeConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @property
    def source_path(self) -> Path:
        return self.root / self.runtime.source

    @property
    def output_path(self) -> Path | None:
        if self.output.path is None:
            return None
        return self.root / self.output.path


def load_manifest(path: Path) -> AssemblyManifest:
    """
    Load assembly.toml.

    Raises:
        ManifestError: If the file is missing, not valid TOML, or holds
            an unsupported output format or log level
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ManifestError(f"Manifest not found: {path}") from e
    except tomllib.TOMLDecodeError as e:
        raise ManifestError(f"Invalid TOML in {path}: {e}") from e

    runtime_data = data.get("runtime", {})
    output_data = data.get("output", {})
    logging_data = data.get("logging", {})

    output_format = output_data.get("format", "json")
    if output_format not in OUTPUT_FORMATS:
        raise ManifestError(
            f"Unsupported output format '{output_format}' in {path}; "
            f"expected one of: {', '.join(OUTPUT_FORMATS)}"
        )

    level = str(logging_data.get("level", "WARNING")).upper()
    if level not in LOG_LEVELS:
        raise ManifestError(f"Unknown log level '{level}' in {path}")

    output_path = output_data.get("path")

    return AssemblyManifest(
        root=path.resolve().parent,
        runtime=RuntimeConfig(source=Path(runtime_data.get("source", "runtime.rt"))),
        output=OutputConfig(
            format=output_format,
            path=Path(output_path) if output_path else None,
        ),
        logging=LoggingConfig(level=level),
    )
