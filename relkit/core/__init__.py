"""Core domain types and logic."""

from .config import CONFIG_NAME, ConfigError, ReleaseConfig, load_config, load_release_config
from .errors import ErrorCode
from .manifest import MANIFEST_NAME, ManifestError, PackageManifest, load_manifest
from .result import Err, Ok, Result

__all__ = [
    # config
    "CONFIG_NAME",
    "ConfigError",
    "ReleaseConfig",
    "load_config",
    "load_release_config",
    # errors
    "ErrorCode",
    # manifest
    "MANIFEST_NAME",
    "ManifestError",
    "PackageManifest",
    "load_manifest",
    # result
    "Err",
    "Ok",
    "Result",
]
