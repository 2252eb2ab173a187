import logging
import sys
import json
from colorlog import ColoredFormatter

LOGGER_NAME = "rum_provider"


def setup_logger(debug_mode=False):
    logger = logging.getLogger(LOGGER_NAME)
    level = logging.DEBUG if debug_mode else logging.INFO
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)

        formatter = ColoredFormatter(
            "%(log_color)s[%(levelname)s] %(message)s",
            log_colors={
                "DEBUG":    "cyan",
                "INFO":     "green",
                "WARNING":  "yellow",
                "ERROR":    "red",
                "CRITICAL": "red,bg_white",
            }
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(level)

    return logger


# Logger defaults to INFO unless reconfigured later.
DEBUG_MODE = False
logger = setup_logger(debug_mode=DEBUG_MODE)


def configure_logger(mode: str):
    """
    Switch the shared logger between INFO and DEBUG output.

    Args:
        mode: Project mode from config.json ("DEBUG" enables debug output)
    """
    global DEBUG_MODE
    DEBUG_MODE = (mode or "").upper() == "DEBUG"
    setup_logger(debug_mode=DEBUG_MODE)
    if DEBUG_MODE:
        logger.debug("Debug mode is active.")


def configure_logger_from_file(config_path):
    try:
        with open(config_path) as f:
            config = json.load(f)
        configure_logger(config.get("mode", ""))
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to configure logger from file: {e}. Using default settings.")
