"""Typed release configuration.

Settings come from ``relkit.toml`` in the project root when present,
otherwise from a ``"relkit"`` object inside ``package.json``. Both are
optional; command-line flags override whatever is loaded here.

Example relkit.toml:
    before_release = "npm test"
    loose_versions = false
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .manifest import PackageManifest
from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_bool, get_str, get_table

__all__ = [
    "CONFIG_NAME",
    "ConfigError",
    "ReleaseConfig",
    "load_config",
    "load_release_config",
]

CONFIG_NAME = "relkit.toml"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class ReleaseConfig:
    """Release settings.

    Attributes:
        before_release: Shell command run before prompting, None to skip
        loose_versions: Accept multi-digit version components
    """

    before_release: str | None = None
    loose_versions: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> ReleaseConfig:
        """Create ReleaseConfig from a parsed mapping.

        Raises:
            TypeError: A known key holds a value of the wrong type.
        """
        if "before_release" in data and not isinstance(data["before_release"], str):
            raise TypeError("before_release must be a string")
        if "loose_versions" in data and not isinstance(data["loose_versions"], bool):
            raise TypeError("loose_versions must be a boolean")

        return cls(
            before_release=get_str(data, "before_release"),
            loose_versions=get_bool(data, "loose_versions") or False,
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    import tomllib

    try:
        data_obj: object = tomllib.loads(path.read_bytes().decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError(f"{CONFIG_NAME} must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"cannot read {path}: permission denied", path=path))
    except OSError as e:
        return Err(ConfigError(f"cannot read {path}: {e.strerror or e}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"{CONFIG_NAME} is not UTF-8: {e}", path=path))


def load_config(path: Path) -> Result[ReleaseConfig, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to relkit.toml

    Returns:
        Ok(ReleaseConfig) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(ReleaseConfig.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_release_config(manifest: PackageManifest) -> Result[ReleaseConfig, ConfigError]:
    """Resolve the configuration for the project owning ``manifest``.

    relkit.toml wins over the ``"relkit"`` key of package.json; with
    neither present the defaults apply.
    """
    toml_path = manifest.root / CONFIG_NAME
    if toml_path.is_file():
        return load_config(toml_path)

    if "relkit" not in manifest.raw:
        return Ok(ReleaseConfig())

    table = get_table(manifest.raw, "relkit")
    if table is None:
        return Err(ConfigError('"relkit" in package.json must be an object', path=manifest.path))
    try:
        return Ok(ReleaseConfig.from_dict(table))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=manifest.path))
