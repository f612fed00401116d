"""
unity-patcher: find installed Unity editors and the patches that apply to them
"""

__version__ = "1.0.0"

from .installation import (
    Installation,
    InstallationKind,
    PlatformKind,
    default_editor_root,
    enumerate_installations,
)
from .patches import PatchInfo, load_patches, parse_catalog
from .exceptions import PatcherError, CatalogError

__all__ = [
    "Installation",
    "InstallationKind",
    "PlatformKind",
    "default_editor_root",
    "enumerate_installations",
    "PatchInfo",
    "load_patches",
    "parse_catalog",
    "PatcherError",
    "CatalogError",
]
