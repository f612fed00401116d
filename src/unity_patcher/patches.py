"""
Patch definitions and the JSON patch catalog
"""

import json
import logging
from pathlib import Path
from dataclasses import dataclass
from typing import Any, Dict, List, Union

from .constants import CATALOG_PATCHES_KEY, CATALOG_ENCODING
from .exceptions import CatalogError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PatchInfo:
    """A patch and the editor versions it applies to.

    ``version`` is a regular expression searched for in an installation's
    version string.
    """

    version: str
    name: str = ""
    description: str = ""

    @property
    def label(self) -> str:
        return self.name or self.version


def _parse_patch(entry: Any, index: int) -> PatchInfo:
    if not isinstance(entry, dict):
        raise CatalogError(f"Patch #{index} must be a JSON object")
    if "version" not in entry:
        raise CatalogError(f"Patch #{index} is missing required key 'version'")

    fields: Dict[str, str] = {}
    for key in ("version", "name", "description"):
        if key in entry:
            if not isinstance(entry[key], str):
                raise CatalogError(f"Patch #{index}: '{key}' must be a string")
            fields[key] = entry[key]
    return PatchInfo(**fields)


def parse_catalog(data: Any) -> List[PatchInfo]:
    """Build patches from decoded catalog JSON, keeping their order"""
    if isinstance(data, dict):
        if CATALOG_PATCHES_KEY not in data:
            raise CatalogError(f"Patch catalog missing required key '{CATALOG_PATCHES_KEY}'")
        data = data[CATALOG_PATCHES_KEY]
    if not isinstance(data, list):
        raise CatalogError("Patch catalog must contain a list of patches")
    return [_parse_patch(entry, index) for index, entry in enumerate(data, start=1)]


def load_patches(catalog_file: Union[str, Path]) -> List[PatchInfo]:
    """Load a patch catalog from a JSON file"""
    path = Path(catalog_file)
    try:
        with open(path, 'r', encoding=CATALOG_ENCODING) as f:
            data = json.load(f)
    except FileNotFoundError:
        raise CatalogError(f"Patch catalog not found: {path}")
    except json.JSONDecodeError as e:
        raise CatalogError(f"Invalid JSON in patch catalog: {e}")
    except OSError as e:
        raise CatalogError(f"Cannot read patch catalog: {e}")

    patches = parse_catalog(data)
    logger.debug("Loaded %d patches from %s", len(patches), path)
    return patches
