#!/usr/bin/env python3
"""
Host identity probes: hostname, distribution and kernel release.
"""

from typing import Optional

from .base import FactProbe, split_lines

HOSTNAME_FILE = "/etc/hostname"
OS_RELEASE_FILE = "/etc/os-release"
LSB_RELEASE_FILE = "/etc/lsb-release"
PROC_VERSION_FILE = "/proc/version"

# "Linux version 6.1.0-13-amd64 (debian-kernel@...) ..."
KERNEL_VERSION_FIELD = 2

UNKNOWN = "unknown"


def parse_key_value(content: str, key: str) -> Optional[str]:
    """
    Return the value of the first `key=` line in os-release style content.

    Surrounding whitespace and double quotes are stripped from the value.
    """
    prefix = f"{key}="
    for line in split_lines(content):
        if line.startswith(prefix):
            return line[len(prefix):].strip().strip('"')
    return None


class HostnameProbe(FactProbe):
    """Probe for the system hostname."""

    default = UNKNOWN

    def __init__(self, **kwargs):
        super().__init__("hostname", "Hostname", **kwargs)

    def strategies(self):
        return [self.from_hostname_file, self.from_hostname_command]

    def from_hostname_file(self) -> Optional[str]:
        content = self.safe_read_file(HOSTNAME_FILE)
        return content.strip() if content is not None else None

    def from_hostname_command(self) -> Optional[str]:
        output = self.safe_run_command(["hostname"])
        return output.strip() if output is not None else None


class DistroProbe(FactProbe):
    """Probe for the human-readable distribution name."""

    default = UNKNOWN

    def __init__(self, **kwargs):
        super().__init__("distro", "Distribution", **kwargs)

    def strategies(self):
        return [self.from_os_release, self.from_lsb_release]

    def from_os_release(self) -> Optional[str]:
        content = self.safe_read_file(OS_RELEASE_FILE)
        if content is None:
            return None
        return parse_key_value(content, "PRETTY_NAME")

    def from_lsb_release(self) -> Optional[str]:
        content = self.safe_read_file(LSB_RELEASE_FILE)
        if content is None:
            return None
        return parse_key_value(content, "DISTRIB_DESCRIPTION")


class KernelProbe(FactProbe):
    """Probe for the running kernel release."""

    default = UNKNOWN

    def __init__(self, **kwargs):
        super().__init__("kernel", "Kernel", **kwargs)

    def strategies(self):
        return [self.from_uname, self.from_proc_version]

    def from_uname(self) -> Optional[str]:
        output = self.safe_run_command(["uname", "-r"])
        return output.strip() if output is not None else None

    def from_proc_version(self) -> Optional[str]:
        content = self.safe_read_file(PROC_VERSION_FILE)
        if content is None:
            return None

        parts = content.split()
        if len(parts) <= KERNEL_VERSION_FIELD:
            return None
        return parts[KERNEL_VERSION_FIELD]
