"""
Output formatter for the launcher.

Provides colored console output and the span table printed by --dump.
"""

import math
import sys
from typing import List, Sequence

import colorama
from colorama import Fore, Style

from hoverpie.core.application.chart_service import FULL_TURN, total_sweep
from hoverpie.core.domain.models import AngleSpan

class OutputFormatter:
    """Formats output for console display."""

    def __init__(self, use_colors: bool = True):
        """
        Initialize formatter.

        Args:
            use_colors: Whether to use colored output
        """
        self.use_colors = use_colors
        if self.use_colors:
            colorama.init(autoreset=True)

    def _colorize(self, text: str, color: str) -> str:
        """Apply color to text if colors are enabled."""
        if self.use_colors and color:
            return f"{color}{text}{Style.RESET_ALL}"
        return text

    def error(self, text: str) -> str:
        return self._colorize(text, Fore.RED)

    def warning(self, text: str) -> str:
        return self._colorize(text, Fore.YELLOW)

    def bold(self, text: str) -> str:
        if self.use_colors:
            return f"{Style.BRIGHT}{text}{Style.RESET_ALL}"
        return text

    def print_error(self, text: str):
        print(self.error(text), file=sys.stderr)

    def print_warning(self, text: str):
        print(self.warning(text))

    def format_spans(self, spans: Sequence[AngleSpan]) -> List[str]:
        """
        Formats spans as table rows.

        Line breaks in labels are shown as spaces.
        """
        header = f"{'#':>3}  {'label':<20} {'start':>9} {'end':>9} {'sweep':>9}"
        lines = [self.bold(header)]

        for index, span in enumerate(spans):
            label = span.label.replace("\n", " ")
            lines.append(
                f"{index:>3}  {label:<20} {span.start_angle:>9.3f} "
                f"{span.end_angle:>9.3f} {span.sweep:>9.3f}"
            )

        return lines

    def print_spans(self, spans: Sequence[AngleSpan]):
        """Prints the span table and a note on incomplete or over-full sweeps."""
        for line in self.format_spans(spans):
            print(line)

        sweep = total_sweep(spans)
        if math.isclose(sweep, FULL_TURN, abs_tol=1e-9):
            return
        if sweep < FULL_TURN:
            self.print_warning(f"Sweep covers {sweep:.3f} degrees; the rest is unassigned")
        else:
            self.print_warning(f"Sweep exceeds a full turn ({sweep:.3f} degrees)")
