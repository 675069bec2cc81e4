#!/usr/bin/env python3
"""
Host fact snapshot and the collector that builds it.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .modules import CommandRunner, get_all_probes

logger = logging.getLogger("hostfetch")


@dataclass(frozen=True)
class HostFacts:
    """Immutable snapshot of everything detected about the host in one run."""
    hostname: str = "unknown"
    distro: str = "unknown"
    kernel: str = "unknown"
    init_system: str = "unknown"
    native_package_count: int = 0
    flatpak_package_count: int = 0
    used_memory_gb: float = 0.0
    total_memory_gb: float = 0.0


class HostFactCollector:
    """Runs every probe once and assembles a HostFacts snapshot."""

    def __init__(self, runner: Optional[CommandRunner] = None, root: str = "/"):
        # All probes share one runner so a single fake can serve every command
        self.runner = runner or CommandRunner()
        self.probes = get_all_probes(runner=self.runner, root=root)

    def collect(self) -> HostFacts:
        results = {}
        for name, probe in self.probes.items():
            logger.debug(f"Running probe: {name}")
            results[name] = probe.run()

        used_memory_gb, total_memory_gb = results["memory"]
        return HostFacts(
            hostname=results["hostname"],
            distro=results["distro"],
            kernel=results["kernel"],
            init_system=results["init_system"],
            native_package_count=results["native_packages"],
            flatpak_package_count=results["flatpak_packages"],
            used_memory_gb=used_memory_gb,
            total_memory_gb=total_memory_gb
        )
