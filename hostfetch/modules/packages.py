#!/usr/bin/env python3
"""
Installed package counting.

The native count comes from the first package manager that answers with a
non-zero count; flatpak applications are counted separately.
"""

import glob
import os
from typing import Callable, List, Optional

from .base import FactProbe, split_lines

GENTOO_PKG_DB_GLOB = "/var/db/pkg/*/*"


def count_lines(output: str) -> int:
    return len(split_lines(output))


def count_zypper(output: str) -> int:
    # Only rows whose status column marks the package as installed
    return sum(1 for line in split_lines(output) if line.startswith("i"))


def count_eopkg(output: str) -> int:
    return sum(
        1 for line in split_lines(output)
        if line and not line.startswith("Installed")
    )


def count_swupd(output: str) -> int:
    return sum(
        1 for line in split_lines(output)
        if line and "bundles installed" not in line
    )


# (ecosystem, command, counter) in priority order
NATIVE_PACKAGE_MANAGERS = [
    ("dpkg", ["dpkg-query", "-f", "${binary:Package}\n", "-W"], count_lines),
    ("rpm", ["rpm", "-qa"], count_lines),
    ("pacman", ["pacman", "-Q"], count_lines),
    ("xbps", ["xbps-query", "-l"], count_lines),
    ("apk", ["apk", "info"], count_lines),
    ("qlist", ["qlist", "-I"], count_lines),
    ("nix", ["nix-store", "--query", "--requisites", "/run/current-system"], count_lines),
    ("zypper", ["zypper", "search", "--installed-only"], count_zypper),
    ("eopkg", ["eopkg", "list-installed"], count_eopkg),
    ("swupd", ["swupd", "bundle-list"], count_swupd),
]

FLATPAK_COMMAND = ["flatpak", "list"]


class NativePackageProbe(FactProbe):
    """Probe for the number of packages installed by the native package manager."""

    default = 0

    def __init__(self, **kwargs):
        super().__init__("native_packages", "Native Packages", **kwargs)

    def strategies(self) -> List[Callable[[], Optional[int]]]:
        strategies = []
        for manager, command, counter in NATIVE_PACKAGE_MANAGERS:
            strategies.append(self.command_counter(manager, command, counter))
            if manager == "qlist":
                strategies.append(self.from_portage_db)
        return strategies

    def command_counter(self, manager: str, command: List[str],
                        counter: Callable[[str], int]) -> Callable[[], Optional[int]]:
        def strategy() -> Optional[int]:
            output = self.safe_run_command(command)
            if output is None:
                return None
            return counter(output)

        strategy.__name__ = manager
        return strategy

    def from_portage_db(self) -> Optional[int]:
        # Gentoo without portage-utils: one directory per installed package
        pattern = GENTOO_PKG_DB_GLOB
        if self.root not in ("", "/"):
            pattern = os.path.join(glob.escape(self.root), pattern.lstrip("/"))
        return len(glob.glob(pattern))


class FlatpakPackageProbe(FactProbe):
    """Probe for the number of installed flatpak refs."""

    default = 0

    def __init__(self, **kwargs):
        super().__init__("flatpak_packages", "Flatpak Packages", **kwargs)

    def strategies(self):
        return [self.from_flatpak_list]

    def from_flatpak_list(self) -> Optional[int]:
        output = self.safe_run_command(FLATPAK_COMMAND)
        if output is None:
            return None
        return count_lines(output)
