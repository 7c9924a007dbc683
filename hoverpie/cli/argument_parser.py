"""
Argument parser for the hoverpie launcher.

Handles parsing of command line arguments and their validation.
"""

import argparse
from typing import Any, Dict, List, Optional

from hoverpie import __version__
from hoverpie.core.application.chart_service import BoundsMode
from hoverpie.core.colors import COLOR_POLICY_NAMES
from hoverpie.core.domain.models import Slice
from hoverpie.core.settings import THEMES

PREVIEW_SLICES = [
    Slice("a\n4kb", 0.4),
    Slice("b\n1kb", 0.3),
    Slice("c\n1kb", 0.1),
    Slice("d\n1kb", 0.1),
    Slice("e\n1kb", 0.1),
]

def parse_slice(text: str) -> Slice:
    """
    Parses LABEL=FRACTION into a Slice.

    The last '=' separates the fraction, and a literal backslash-n
    in the label becomes a line break.
    """
    label, sep, fraction = text.rpartition("=")
    if not sep or not label:
        raise argparse.ArgumentTypeError(f"expected LABEL=FRACTION, got {text!r}")

    try:
        value = float(fraction)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid fraction in {text!r}")

    return Slice(label.replace("\\n", "\n"), value)

class ArgumentParser:
    """Parses command line arguments for the launcher."""

    def __init__(self):
        """Initialize argument parser."""
        self.parser = argparse.ArgumentParser(
            prog="hoverpie",
            description="hoverpie - interactive pie chart",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Show the preview chart
  hoverpie

  # Custom data with palette colors
  hoverpie --slice Docs=0.5 --slice Media=0.25 --slice Other=0.25 --colors palette

  # Print the computed angles without opening a window
  hoverpie --slice A=0.3 --dump
            """,
        )

        self.parser.add_argument(
            "--debug", "-d",
            action="store_true",
            help="Enable debug logging",
        )
        self.parser.add_argument(
            "--version", "-v",
            action="version",
            version=f"hoverpie {__version__}",
        )

        self.parser.add_argument(
            "--slice", "-s",
            dest="slices",
            action="append",
            type=parse_slice,
            metavar="LABEL=FRACTION",
            help="Add a wedge (repeatable, order is kept)",
        )
        self.parser.add_argument(
            "--colors",
            choices=COLOR_POLICY_NAMES,
            help="Color assignment policy",
        )
        self.parser.add_argument(
            "--seed",
            type=int,
            help="Seed for the random color policy",
        )
        self.parser.add_argument(
            "--bounds",
            choices=[mode.value for mode in BoundsMode],
            help="Radial test used for hover detection",
        )
        self.parser.add_argument(
            "--theme",
            choices=THEMES,
            help="Color theme",
        )
        self.parser.add_argument(
            "--inset",
            type=float,
            help="Shrink wedges by this fraction of the radius",
        )
        self.parser.add_argument(
            "--no-highlight",
            action="store_true",
            help="Do not raise the hovered wedge",
        )
        self.parser.add_argument(
            "--dump",
            action="store_true",
            help="Print the computed angle spans and exit",
        )

    def parse_args(self, args: Optional[List[str]] = None) -> argparse.Namespace:
        """Parse command line arguments."""
        return self.parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> List[str]:
        """
        Validate parsed arguments.

        Returns:
            List[str]: Validation issues (empty if valid)
        """
        issues = []

        if args.inset is not None and not 0.0 <= args.inset < 1.0:
            issues.append("--inset must be in [0, 1)")

        if args.seed is not None and args.colors not in (None, "random"):
            issues.append("--seed only applies to --colors random")

        return issues

    def settings_overrides(self, args: argparse.Namespace) -> Dict[str, Any]:
        """Converts parsed arguments to settings overrides."""
        return {
            "theme": args.theme,
            "bounds_mode": BoundsMode(args.bounds) if args.bounds else None,
            "color_policy": args.colors,
            "color_seed": args.seed,
            "inset": args.inset,
            "highlight_enabled": False if args.no_highlight else None,
            "debug": True if args.debug else None,
        }

    def slices(self, args: argparse.Namespace) -> List[Slice]:
        """Returns the requested slices, or the preview data when none were given."""
        return list(args.slices) if args.slices else list(PREVIEW_SLICES)
