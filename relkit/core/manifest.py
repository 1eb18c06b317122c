"""The consuming project's ``package.json``.

The manifest is read exactly once per invocation and handed to the
orchestrator as a value.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str

__all__ = ["MANIFEST_NAME", "ManifestError", "PackageManifest", "load_manifest"]

MANIFEST_NAME = "package.json"


@dataclass(frozen=True, slots=True)
class ManifestError:
    """Error when package.json cannot be read or lacks required fields."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class PackageManifest:
    """Fields of package.json that a release needs.

    Attributes:
        name: Package name (used in status lines only)
        version: Current version string, unvalidated
        path: Location of the manifest file
        raw: The whole parsed document
    """

    name: str
    version: str
    path: Path
    raw: StrDict = field(default_factory=dict, compare=False, repr=False)

    @property
    def root(self) -> Path:
        return self.path.parent


def load_manifest(root: Path) -> Result[PackageManifest, ManifestError]:
    """Load ``package.json`` from a project root.

    Args:
        root: Project directory

    Returns:
        Ok(PackageManifest) on success, Err(ManifestError) on failure
    """
    path = root / MANIFEST_NAME
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return Err(ManifestError(f"{MANIFEST_NAME} not found in {root}", path=path))
    except UnicodeDecodeError as e:
        return Err(ManifestError(f"{MANIFEST_NAME} is not UTF-8: {e}", path=path))
    except OSError as e:
        return Err(ManifestError(f"failed to read {MANIFEST_NAME}: {e}", path=path))

    try:
        data_obj: object = json.loads(text)
    except json.JSONDecodeError as e:
        return Err(ManifestError(f"invalid JSON in {MANIFEST_NAME}: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ManifestError(f"{MANIFEST_NAME} root must be an object", path=path))

    # Kept verbatim; surrounding whitespace makes it an invalid version later.
    version = data.get("version")
    if not isinstance(version, str) or not version.strip():
        return Err(ManifestError(f"{MANIFEST_NAME} has no version field", path=path))

    name = get_str(data, "name") or root.name
    return Ok(PackageManifest(name=name, version=version, path=path, raw=data))
