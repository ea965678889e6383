"""Typed loading of ``release.toml``.

Example::

    tag_format = "v${version}"

    [[branches]]
    name = "1.x"
    tags = ["v1.0.0", "v1.1.0"]

    [[branches]]
    name = "main"
    channel = "latest"
    tags = ["v1.0.0", "v1.1.0", "v2.0.0"]
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from relver.versions.tags import DEFAULT_TAG_FORMAT

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_bool, get_str, get_str_list, get_table_list

__all__ = [
    "CONFIG_FILENAME",
    "BranchConfig",
    "Config",
    "ConfigError",
    "load_config",
    "load_config_or_default",
]

CONFIG_FILENAME = "release.toml"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None
    # "io" when the file could not be read at all, "invalid" for bad content.
    kind: Literal["io", "invalid"] = "invalid"


@dataclass(frozen=True, slots=True)
class BranchConfig:
    """One ``[[branches]]`` entry. Tags are raw tag names."""

    name: str
    range: str | None = None
    channel: str | None = None
    prerelease: bool = False
    tags: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> BranchConfig:
        name = get_str(data, "name")
        if name is None:
            raise ValueError("branch entry is missing 'name'")

        tags: list[str] = []
        if "tags" in data:
            parsed = get_str_list(data, "tags")
            if parsed is None:
                raise ValueError(f"branch '{name}': 'tags' must be a list of strings")
            tags = parsed

        return cls(
            name=name,
            range=get_str(data, "range"),
            channel=get_str(data, "channel"),
            prerelease=get_bool(data, "prerelease") or False,
            tags=tuple(tags),
        )


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    tag_format: str = DEFAULT_TAG_FORMAT
    branches: tuple[BranchConfig, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML)."""
        branches: list[StrDict] = []
        if "branches" in data:
            tables = get_table_list(data, "branches")
            if tables is None:
                raise ValueError("'branches' must be an array of tables")
            branches = tables

        tag_format = get_str(data, "tag_format") or DEFAULT_TAG_FORMAT
        if "${version}" not in tag_format:
            raise ValueError(f"tag_format must contain ${{version}}: {tag_format!r}")

        return cls(
            tag_format=tag_format,
            branches=tuple(BranchConfig.from_dict(b) for b in branches),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path, kind="io"))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path, kind="io"))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(path: Path) -> Config:
    """Load config from file, or return the default config on any error."""
    result = load_config(path)
    if isinstance(result, Ok):
        return result.value
    return Config()
