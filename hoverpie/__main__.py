import logging
import sys
from typing import List, Optional

from hoverpie.cli.argument_parser import ArgumentParser
from hoverpie.cli.output_formatter import OutputFormatter
from hoverpie.core.application.chart_service import compute_spans
from hoverpie.core.logging_setup import setup_logging
from hoverpie.core.settings import load_settings

main_logger = logging.getLogger("Main")

def run_gui(slices, settings) -> int:
    from PyQt6.QtWidgets import QApplication

    from hoverpie.ui.main_window import PieChartWindow
    from hoverpie.ui.theme import ThemeManager

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("hoverpie")
    app.setApplicationDisplayName("hoverpie")

    theme_manager = ThemeManager.get_instance()
    theme_manager.set_theme(settings.theme, app)

    window = PieChartWindow(slices, settings, theme_manager=theme_manager)
    window.show()

    return app.exec()

def main(args: Optional[List[str]] = None) -> int:
    """
    Launcher entry point.

    Args:
        args: Command line arguments (default: sys.argv[1:])

    Returns:
        int: Exit code (0 for success, 1 for error)
    """
    formatter = OutputFormatter()

    try:
        parser = ArgumentParser()
        parsed_args = parser.parse_args(args)

        validation_issues = parser.validate_args(parsed_args)
        if validation_issues:
            formatter.print_error("Argument validation failed:")
            for issue in validation_issues:
                formatter.print_error(f"  - {issue}")
            return 1

        settings = load_settings(overrides=parser.settings_overrides(parsed_args))
        setup_logging(settings.debug)

        slices = parser.slices(parsed_args)
        main_logger.debug(f"Starting with {len(slices)} slices and {settings}")

        if parsed_args.dump:
            formatter.print_spans(compute_spans(slices))
            return 0

        return run_gui(slices, settings)

    except KeyboardInterrupt:
        formatter.print_warning("\nOperation cancelled by user")
        return 130

    except Exception as e:
        formatter.print_error(f"Unexpected error: {e}")
        main_logger.debug("Unhandled exception", exc_info=True)
        return 1

if __name__ == "__main__":
    sys.exit(main())
