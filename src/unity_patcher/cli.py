"""
Command-line interface for unity-patcher tool
"""

import re
import sys
import logging
import argparse
from typing import List, Optional

from .exceptions import PatcherError
from .installation import Installation, PlatformKind, enumerate_installations
from .patches import PatchInfo, load_patches


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser"""
    parser = argparse.ArgumentParser(
        description="Find installed Unity editors and the patches that apply to them",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List editors installed through Unity Hub
  unity-patcher

  # Show which editors a patch catalog supports
  unity-patcher --patches patches.json

  # Pick the second editor and print its executable
  unity-patcher --patches patches.json --select 2

  # Look for Linux editors in a custom location
  unity-patcher --platform linux --editor-dir /opt/unity/editors

Note: the last entry is always "Advance Mode", which asks for the path
      of the editor executable instead of looking it up
        """
    )

    parser.add_argument(
        "--platform", "-p",
        choices=[kind.value for kind in PlatformKind],
        help="Platform whose Unity Hub layout to use (default: this machine)"
    )

    parser.add_argument(
        "--editor-dir", "-d",
        help="Directory containing the editor versions (default: Unity Hub location)"
    )

    parser.add_argument(
        "--patches", "-P",
        metavar="FILE",
        help="JSON patch catalog to match installations against"
    )

    parser.add_argument(
        "--select", "-s",
        type=int,
        metavar="N",
        help="Show details for the N-th listed installation"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print debug logging"
    )

    return parser


def print_installations(installations: List[Installation],
                        patches: Optional[List[PatchInfo]] = None) -> None:
    """Print a numbered list of installations"""
    if patches is None:
        for number, installation in enumerate(installations, start=1):
            print(f"{number:3}. {installation.version}")
        return

    for number, installation in enumerate(installations, start=1):
        status = "✓" if installation.is_supported(patches) else "✗"
        patch = installation.get_patch(patches)
        detail = f"  [{patch.label}]" if patch else ""
        print(f"{number:3}. {status} {installation.version}{detail}")


def show_installation(installation: Installation,
                      patches: Optional[List[PatchInfo]] = None) -> None:
    """Print version, matching patch and executable of one installation"""
    print(f"Version:    {installation.version}")
    if patches is not None:
        patch = installation.get_patch(patches)
        supported = "yes" if installation.is_supported(patches) else "no"
        print(f"Supported:  {supported}")
        print(f"Patch:      {patch.label if patch else '-'}")
    executable = installation.resolve_executable_path()
    print(f"Executable: {executable}")


def main() -> None:
    """Main entry point for CLI"""
    parser = create_parser()
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format="%(levelname)s %(name)s: %(message)s")

    if args.platform:
        platform = PlatformKind.from_name(args.platform)
    else:
        platform = PlatformKind.current()

    try:
        patches = load_patches(args.patches) if args.patches else None
        installations = list(enumerate_installations(platform, args.editor_dir))

        if args.select is None:
            print_installations(installations, patches)
            sys.exit(0)

        if not 1 <= args.select <= len(installations):
            print(f"✗ Error: no installation number {args.select} "
                  f"(choose 1-{len(installations)})")
            sys.exit(1)

        show_installation(installations[args.select - 1], patches)
    except PatcherError as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
    except re.error as e:
        print(f"✗ Invalid version pattern in patch catalog: {e}")
        sys.exit(1)

    sys.exit(0)


if __name__ == "__main__":
    main()
