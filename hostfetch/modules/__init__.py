#!/usr/bin/env python3
"""
Module initialization - imports all fact probes and provides a function to get all probe instances.
"""

from .base import CommandResult, CommandRunner, FactProbe, ProbeChain

# Import all probes
from .identity import HostnameProbe, DistroProbe, KernelProbe
from .init_system import InitSystemProbe
from .packages import NativePackageProbe, FlatpakPackageProbe
from .memory import MemoryProbe


def get_all_probes(runner=None, root="/"):
    """Return probe instances keyed by name, in collection order."""
    probes = [
        # Identity probes
        HostnameProbe(runner=runner, root=root),
        DistroProbe(runner=runner, root=root),
        KernelProbe(runner=runner, root=root),

        # Service manager
        InitSystemProbe(runner=runner, root=root),

        # Package probes
        NativePackageProbe(runner=runner, root=root),
        FlatpakPackageProbe(runner=runner, root=root),

        # Memory
        MemoryProbe(runner=runner, root=root)
    ]
    return {probe.name: probe for probe in probes}
