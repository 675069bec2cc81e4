#!/usr/bin/env python3
"""
Init system detection.

The heuristics are ordered by confidence: the systemd runtime directory is
authoritative, process and marker checks come next, and resolving the
/sbin/init symlink is the last resort.
"""

import os
from typing import Optional

from .base import FactProbe

SYSTEMD_MARKER = "/run/systemd/system"
RUNIT_PROCESS_TOKENS = (" runit", "/runit")
RUNIT_MARKERS = ("/etc/runit", "/etc/sv", "/run/runit", "/var/service")
OPENRC_MARKERS = ("/etc/init.d", "/etc/runlevels")
UPSTART_DIR = "/etc/init"
S6_MARKERS = ("/etc/s6", "/bin/s6-svscan")
DINIT_MARKERS = ("/etc/dinit.d", "/bin/dinit")
INIT_BINARY = "/sbin/init"

# Order used when matching the resolved /sbin/init target
INIT_NAMES = ("systemd", "upstart", "openrc", "runit", "s6", "dinit")


class InitSystemProbe(FactProbe):
    """Probe for the init system (PID 1 service manager)."""

    default = "unknown"

    def __init__(self, **kwargs):
        super().__init__("init_system", "Init System", **kwargs)

    def strategies(self):
        return [
            self.from_systemd_marker,
            self.from_process_list,
            self.from_runit_markers,
            self.from_openrc_markers,
            self.from_upstart_jobs,
            self.from_s6_markers,
            self.from_dinit_markers,
            self.from_init_symlink,
        ]

    def from_systemd_marker(self) -> Optional[str]:
        if self.path_exists(SYSTEMD_MARKER):
            return "systemd"
        return None

    def from_process_list(self) -> Optional[str]:
        # The listing is used even when ps exits non-zero
        output = self.runner.run(["ps", "ax"]).stdout
        if output and any(token in output for token in RUNIT_PROCESS_TOKENS):
            return "runit"
        return None

    def from_runit_markers(self) -> Optional[str]:
        if any(self.path_exists(path) for path in RUNIT_MARKERS):
            return "runit"
        return None

    def from_openrc_markers(self) -> Optional[str]:
        if all(self.path_exists(path) for path in OPENRC_MARKERS):
            return "openrc"
        return None

    def from_upstart_jobs(self) -> Optional[str]:
        if not self.is_dir(UPSTART_DIR):
            return None
        for entry in self.list_dir(UPSTART_DIR):
            if os.path.splitext(entry)[1] == ".conf":
                return "upstart"
        return None

    def from_s6_markers(self) -> Optional[str]:
        if any(self.path_exists(path) for path in S6_MARKERS):
            return "s6"
        return None

    def from_dinit_markers(self) -> Optional[str]:
        if any(self.path_exists(path) for path in DINIT_MARKERS):
            return "dinit"
        return None

    def from_init_symlink(self) -> Optional[str]:
        if not self.path_exists(INIT_BINARY):
            return None

        output = self.safe_run_command(["readlink", "-f", INIT_BINARY])
        if output is None:
            return None

        target = output.strip()
        for name in INIT_NAMES:
            if name in target:
                return name
        return None
