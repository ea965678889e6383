from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from relver.core.config import CONFIG_FILENAME
from relver.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    console: ConsoleProtocol
    config_path: Path


def build_context(config_path: Path | None = None) -> CLIContext:
    path = config_path if config_path is not None else Path.cwd() / CONFIG_FILENAME
    return CLIContext(console=RichConsole(), config_path=path)
