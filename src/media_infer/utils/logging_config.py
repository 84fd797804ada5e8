import logging
import sys

import structlog

from media_infer.config import get_settings


def configure_logging(level: str | None = None) -> None:
    """Configure structlog for console and optional file output.

    Args:
        level: Log level override (defaults to settings.log_level)
    """
    settings = get_settings()
    level_name = (level or settings.log_level).upper()

    # Define processors
    processors = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if settings.log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    # stdout carries detection results, logs go to stderr
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level_name),
        force=True,
    )

    structlog.configure(
        processors=processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    if settings.log_file:
        try:
            file_handler = logging.FileHandler(settings.log_file)
            file_handler.setFormatter(logging.Formatter('%(asctime)s [%(levelname)s] %(name)s: %(message)s'))
            logging.getLogger().addHandler(file_handler)
        except OSError as e:
            print(f"Warning: Could not initialize file logging: {e}", file=sys.stderr)
