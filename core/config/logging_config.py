"""
Logging configuration for node execution using structlog.

Configures structlog with:
- Pretty console output (human-readable, colored)
- Optional JSON-lines file output with daily rotation (UTC)

Both destinations can be tuned through the arguments of setup_logging or the
NODE_LOG_LEVEL / NODE_LOG_DIR environment variables.
"""

import logging
import os
import structlog
from pathlib import Path
from logging.handlers import TimedRotatingFileHandler
from typing import Optional, Union
import sys


def setup_logging(
    log_dir: Optional[Union[str, Path]] = None,
    console_level: Optional[str] = None,
    json_file: bool = True,
) -> Optional[Path]:
    """
    Configure structlog with pretty console and JSON file output.

    This should be called once by the host at startup.
    After calling this, modules can use: logger = structlog.get_logger(__name__)

    Returns:
        Path of the JSON-lines log file, or None when file output is disabled.
    """
    console_level = (console_level or os.environ.get("NODE_LOG_LEVEL", "INFO")).upper()

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    structlog.configure(
        processors=shared_processors
        + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.dev.ConsoleRenderer(colors=True),
            foreign_pre_chain=shared_processors,
        )
    )
    root_logger.addHandler(console_handler)

    if not json_file:
        return None

    logs_dir = Path(log_dir or os.environ.get("NODE_LOG_DIR", "logs"))
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_path = logs_dir / "nodes.jsonl"

    file_handler = TimedRotatingFileHandler(
        filename=log_path,
        when="midnight",
        interval=1,
        backupCount=30,
        encoding="utf-8",
        utc=True,
    )
    file_handler.suffix = "%Y-%m-%d.jsonl"
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.processors.JSONRenderer(),
            foreign_pre_chain=shared_processors,
        )
    )
    root_logger.addHandler(file_handler)
    return log_path
