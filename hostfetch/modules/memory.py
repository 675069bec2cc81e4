#!/usr/bin/env python3
"""
Memory usage from the kernel's memory accounting.
"""

from typing import Dict, Optional, Tuple

from .base import FactProbe, split_lines

MEMINFO_FILE = "/proc/meminfo"

# "MemTotal:       16318284 kB"
MEMINFO_VALUE_FIELD = 1
MEMINFO_KEYS = ("MemTotal:", "MemFree:", "Buffers:", "Cached:")
KIB_PER_GIB = 1024 ** 2


def parse_mem_value(line: str) -> float:
    """Parse the kibibyte value of a meminfo line, 0.0 if malformed."""
    parts = line.split()
    if len(parts) <= MEMINFO_VALUE_FIELD:
        return 0.0
    try:
        return float(parts[MEMINFO_VALUE_FIELD])
    except ValueError:
        return 0.0


def parse_meminfo(content: str) -> Tuple[float, float]:
    """
    Compute used and total memory in GiB from /proc/meminfo content.

    Used memory excludes buffers and page cache. "SwapCached:" is never
    mistaken for "Cached:" since keys are matched from the start of the line.
    """
    values: Dict[str, float] = {}
    for line in split_lines(content):
        for key in MEMINFO_KEYS:
            if key not in values and line.startswith(key):
                values[key] = parse_mem_value(line)
                break

        if len(values) == len(MEMINFO_KEYS):
            break

    total = values.get("MemTotal:", 0.0)
    used = (total
            - values.get("MemFree:", 0.0)
            - values.get("Buffers:", 0.0)
            - values.get("Cached:", 0.0))

    return used / KIB_PER_GIB, total / KIB_PER_GIB


class MemoryProbe(FactProbe):
    """Probe for (used, total) memory in GiB."""

    default = (0.0, 0.0)

    def __init__(self, **kwargs):
        super().__init__("memory", "Memory", **kwargs)

    def strategies(self):
        return [self.from_meminfo]

    def from_meminfo(self) -> Optional[Tuple[float, float]]:
        content = self.safe_read_file(MEMINFO_FILE)
        if content is None:
            return None
        return parse_meminfo(content)
