"""
Unity editor installations and patch matching
"""

import os
import re
import sys
import ntpath
import logging
import posixpath
from enum import Enum
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

from .constants import (
    WINDOWS_EDITOR_ROOT,
    MACOS_EDITOR_ROOT,
    LINUX_EDITOR_ROOT,
    WINDOWS_EXECUTABLE,
    MACOS_EXECUTABLE,
    LINUX_EXECUTABLE,
    ADVANCE_MODE_VERSION,
    EXECUTABLE_PROMPT,
)

logger = logging.getLogger(__name__)


class PlatformKind(Enum):
    """Operating systems Unity Hub installs editors on"""

    WINDOWS = "windows"
    MACOS = "macos"
    LINUX = "linux"

    @classmethod
    def current(cls) -> "PlatformKind":
        """Platform of the running interpreter"""
        if sys.platform in ("win32", "cygwin"):
            return cls.WINDOWS
        if sys.platform == "darwin":
            return cls.MACOS
        return cls.LINUX

    @classmethod
    def from_name(cls, name: str) -> "PlatformKind":
        """Parse a case-insensitive platform name such as 'macos'"""
        try:
            return cls(name.lower())
        except ValueError:
            raise ValueError(f"Unknown platform: {name!r}") from None


class InstallationKind(Enum):
    """Where an installation record came from"""

    DISCOVERED = "discovered"
    MANUAL = "manual"


_EDITOR_ROOTS = {
    PlatformKind.WINDOWS: WINDOWS_EDITOR_ROOT,
    PlatformKind.MACOS: MACOS_EDITOR_ROOT,
    PlatformKind.LINUX: LINUX_EDITOR_ROOT,
}

_EXECUTABLES = {
    PlatformKind.WINDOWS: WINDOWS_EXECUTABLE,
    PlatformKind.MACOS: MACOS_EXECUTABLE,
    PlatformKind.LINUX: LINUX_EXECUTABLE,
}


def _path_flavour(platform: PlatformKind) -> Any:
    # Windows locations always use backslashes, whatever the host OS
    if platform is PlatformKind.WINDOWS:
        return ntpath
    if platform in (PlatformKind.MACOS, PlatformKind.LINUX):
        return posixpath
    raise ValueError(f"Unknown platform: {platform!r}")


def _lookup(table: dict, platform: PlatformKind) -> str:
    try:
        return table[platform]
    except (KeyError, TypeError):
        raise ValueError(f"Unknown platform: {platform!r}") from None


def default_editor_root(platform: PlatformKind) -> str:
    """Directory Unity Hub installs editors into on the given platform"""
    root = _lookup(_EDITOR_ROOTS, platform)
    if platform is PlatformKind.LINUX:
        root = os.path.expanduser(root)
    return root


@dataclass(frozen=True)
class Installation:
    """A Unity editor installation on disk, or the manual 'Advance Mode' entry.

    The manual entry has an empty location. It reports itself as supported by
    every patch list but never matches a concrete patch, and its executable
    path has to be asked from the user.
    """

    location: str
    platform: PlatformKind
    kind: InstallationKind = InstallationKind.DISCOVERED

    def __post_init__(self) -> None:
        if self.location is None:
            raise TypeError("Installation location must not be None")
        if not isinstance(self.platform, PlatformKind):
            raise ValueError(f"Unknown platform: {self.platform!r}")
        if not isinstance(self.kind, InstallationKind):
            raise ValueError(f"Unknown installation kind: {self.kind!r}")

    @classmethod
    def manual(cls, platform: PlatformKind) -> "Installation":
        """The 'Advance Mode' entry, located by asking the user"""
        return cls("", platform, InstallationKind.MANUAL)

    @property
    def is_manual(self) -> bool:
        return self.kind is InstallationKind.MANUAL

    @property
    def version(self) -> str:
        """Editor version, taken from the installation directory name"""
        if self.is_manual:
            return ADVANCE_MODE_VERSION
        return _path_flavour(self.platform).basename(self.location)

    def executable_path(self) -> str:
        """Path to the editor executable, empty for the manual entry"""
        if self.is_manual:
            return ""
        suffix = _lookup(_EXECUTABLES, self.platform)
        return _path_flavour(self.platform).join(self.location, suffix)

    def prompt_executable_path(self, input_func: Callable[[], str] = input,
                               output_func: Callable[[str], Any] = print) -> str:
        """Ask the user where the editor executable is.

        Blocks until a line is read and returns it unchanged.
        """
        output_func(EXECUTABLE_PROMPT)
        return input_func()

    def resolve_executable_path(self, input_func: Callable[[], str] = input,
                                output_func: Callable[[str], Any] = print) -> str:
        """Executable path, prompting for it when this is the manual entry"""
        if self.is_manual:
            return self.prompt_executable_path(input_func, output_func)
        return self.executable_path()

    def get_patch(self, patches: Iterable[Any]) -> Optional[Any]:
        """First patch whose version pattern is found in this version.

        Patterns are tried in the order given. An invalid pattern raises
        re.error. The manual entry never matches.
        """
        if self.is_manual:
            return None

        version = self.version
        for patch in patches:
            if re.search(patch.version, version):
                logger.debug("Version %s matched pattern %r", version, patch.version)
                return patch
        return None

    def is_supported(self, patches: Iterable[Any]) -> bool:
        """Whether a patch applies; always true for the manual entry"""
        if self.is_manual:
            return True
        return self.get_patch(patches) is not None


def _scan(root: str, platform: PlatformKind) -> Iterator[Installation]:
    if os.path.isdir(root):
        with os.scandir(root) as entries:
            directories = sorted(entry.path for entry in entries if entry.is_dir())
        for directory in directories:
            logger.debug("Found editor directory: %s", directory)
            yield Installation(directory, platform)
    else:
        logger.debug("Editor root does not exist: %s", root)

    yield Installation.manual(platform)


def enumerate_installations(platform: PlatformKind,
                            root: Optional[str] = None) -> Iterator[Installation]:
    """Lazily list the editors under the Unity Hub root for a platform.

    Installations come sorted by path and are always followed by the manual
    entry, also when the root is missing. Every call rescans the disk.
    """
    if root is None:
        root = default_editor_root(platform)
    else:
        _lookup(_EDITOR_ROOTS, platform)
    logger.debug("Scanning %s editors in %s", platform.value, root)
    return _scan(root, platform)
