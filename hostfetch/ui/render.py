#!/usr/bin/env python3
"""
Terminal renderer: logo and host facts side by side.
"""

import sys
import logging
from typing import List, Optional, TextIO

from ..facts import HostFacts
from ..modules.base import CommandRunner, split_lines
from .ansi import visible_width

logger = logging.getLogger("hostfetch.render")

LABEL_COLOR = "\x1b[1;34m"
LOGO_COLOR = "\x1b[1;35m"
RESET = "\x1b[0m"

LOGO = (
    f"{LOGO_COLOR}.------.\n"
    f"{LOGO_COLOR}|H.--. |\n"
    f"{LOGO_COLOR}| :/\\: |\n"
    f"{LOGO_COLOR}| (__) |\n"
    f"{LOGO_COLOR}| '--'H|\n"
    f"{LOGO_COLOR}`------'\n"
    f"{RESET}"
)

DEFAULT_TERMINAL_WIDTH = 80
WIDE_PADDING = 4
NARROW_PADDING = 2


def format_fact_lines(facts: HostFacts) -> List[str]:
    """Build the labelled, coloured info column for a snapshot."""

    def label(name):
        return f"{LABEL_COLOR}{name}:{RESET}"

    return [
        f"{label('hostname')} {facts.hostname}",
        f"{label('distro')} {facts.distro}",
        f"{label('kernel')} {facts.kernel}",
        f"{label('init')} {facts.init_system}",
        f"{label('packages')} native: {facts.native_package_count} | "
        f"flatpak: {facts.flatpak_package_count}",
        f"{label('memory')} {facts.used_memory_gb:.2f} GB | {facts.total_memory_gb:.2f} GB",
    ]


def get_terminal_width(runner: Optional[CommandRunner] = None) -> int:
    """Query the terminal width with `stty size`, falling back to 80 columns."""
    result = (runner or CommandRunner()).run(["stty", "size"])
    if result.success:
        parts = result.stdout.split()
        if len(parts) >= 2:
            try:
                width = int(parts[1])
            except ValueError:
                width = -1
            if width >= 0:
                return width

    logger.debug(f"Could not query terminal size, assuming {DEFAULT_TERMINAL_WIDTH} columns")
    return DEFAULT_TERMINAL_WIDTH


class TerminalRenderer:
    """Writes the logo and the fact lines as two aligned columns."""

    def __init__(self, logo: str = LOGO, width: Optional[int] = None,
                 runner: Optional[CommandRunner] = None, stream: Optional[TextIO] = None):
        self.logo_lines = split_lines(logo)
        self.runner = runner or CommandRunner()
        self.width = width if width is not None else get_terminal_width(self.runner)
        self.stream = stream or sys.stdout

    def compose(self, info_lines: List[str]) -> List[str]:
        """Return one string per output row, without trailing newlines."""
        logo_height = len(self.logo_lines)
        info_height = len(info_lines)
        max_logo_width = max((visible_width(line) for line in self.logo_lines), default=0)

        rows = []
        for i in range(max(logo_height, info_height)):
            if i < logo_height:
                logo_line = self.logo_lines[i]
                if visible_width(logo_line) < self.width // 2:
                    padding = WIDE_PADDING
                else:
                    padding = NARROW_PADDING
                row = logo_line + " " * padding
            else:
                # Logo is shorter than the info column; keep the column aligned
                row = " " * (max_logo_width + WIDE_PADDING)

            if i < info_height:
                row += info_lines[i]
            rows.append(row)

        return rows

    def render(self, facts: HostFacts):
        """Write the composed display for facts to the output stream."""
        for row in self.compose(format_fact_lines(facts)):
            self.stream.write(row + "\n")
        self.stream.flush()
