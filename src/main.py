import argparse
import logging
import sys
from typing import Optional, Sequence

from textual.logging import TextualHandler

from app_config import AppConfigurationError, LoggingSettings, load_app_config
from notify import DesktopNotifier, NotifierConfig, NotifierConfigurationError
from tui import PomodoroApp

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(settings: Optional[LoggingSettings] = None) -> logging.Logger:
    """Configure logging for the application.

    The terminal belongs to the Textual UI, so records go either to the
    configured log file or to Textual's own log handler.
    """
    settings = settings or LoggingSettings()
    level = logging.getLevelName(settings.level)
    if settings.file:
        logging.basicConfig(
            level=level,
            format=LOG_FORMAT,
            datefmt=LOG_DATE_FORMAT,
            filename=settings.file,
            force=True,
        )
    else:
        logging.basicConfig(level=level, handlers=[TextualHandler()], force=True)
    return logging.getLogger("pomodoro_app")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Terminal Pomodoro timer.")
    parser.add_argument(
        "-c", "--config",
        default=None,
        help="Path to config.toml (default: $POMODORO_CONFIG_FILE or ./config.toml)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )
    return parser.parse_args(argv)


def build_notifier(app_config, logger: logging.Logger) -> Optional[DesktopNotifier]:
    try:
        config = NotifierConfig.from_settings(app_config.notifications)
    except NotifierConfigurationError as error:
        logger.error("Notification configuration error: %s", error)
        logger.warning("Continuing without desktop notifications.")
        return None
    if not config.enabled:
        logger.info("Desktop notifications disabled")
        return None
    return DesktopNotifier(config, logger=logging.getLogger("notify"))


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    try:
        app_config = load_app_config(args.config)
    except AppConfigurationError as error:
        logger = setup_logging(LoggingSettings(level=args.log_level or "INFO"))
        logger.error("App configuration error: %s", error)
        print(f"App configuration error: {error}", file=sys.stderr)
        return 1

    logging_settings = app_config.logging
    if args.log_level:
        logging_settings = LoggingSettings(level=args.log_level, file=logging_settings.file)
    logger = setup_logging(logging_settings)
    if app_config.source_file:
        logger.info("Loaded runtime config: %s", app_config.source_file)
    else:
        logger.info("No config file found, using built-in defaults")

    notifier = build_notifier(app_config, logger)

    try:
        PomodoroApp(app_config, notifier=notifier, logger=logger).run()
    except Exception as error:
        logger.error("Unexpected error: %s", error, exc_info=True)
        return 1

    logger.info("Pomodoro timer stopped")
    return 0


if __name__ == "__main__":
    sys.exit(main())
