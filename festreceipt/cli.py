"""Run festreceipt with command line interface."""

import logging
import logging.config
import pathlib
import sys

from festreceipt.driver import main as festreceipt_main

logger = logging.getLogger(__name__)

PACKAGE_DIR = pathlib.Path(__file__).parent


def find_logging_conf(debug: bool) -> pathlib.Path | None:
    """A logging.conf in the working directory wins over the bundled ones."""
    candidates = [
        pathlib.Path("logging.conf"),
        PACKAGE_DIR / ("logging-debug.conf" if debug else "logging.conf"),
    ]
    return next((path for path in candidates if path.exists()), None)


def setup_logging(debug: bool) -> None:
    """Configure logging for a run."""
    conf = find_logging_conf(debug)
    if conf is not None:
        logging.config.fileConfig(conf)
        logger.info(f"Logging configuration loaded from {conf}")
        return

    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(level=level)
    logger.info(f"No logging configuration found, using {logging.getLevelName(level)}")


def parse_args(argv: list[str]) -> tuple[str, bool, bool]:
    """Split arguments into the config file, --debug and --preview."""
    config_file = next(
        (arg for arg in argv if arg.endswith(".toml")), "config.toml"
    )
    return config_file, "--debug" in argv, "--preview" in argv


def main() -> None:
    """Entry point for the festreceipt application."""
    config_file, debug, preview = parse_args(sys.argv[1:])

    setup_logging(debug)
    logger.info(f"Using config file: {config_file}")
    if preview:
        logger.info("Rendering a preview receipt only.")

    try:
        festreceipt_main(config_file, preview=preview)
    except Exception as e:
        if debug:
            logger.critical(e, exc_info=True)
        else:
            logger.critical(f"festreceipt failed: {e}")
            logger.critical("Run with --debug for more details.")
        sys.exit(1)

    sys.exit(0)
