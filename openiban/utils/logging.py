"""
Structured logging configuration using structlog.

Nothing is configured on import; applications (and the ``openiban`` CLI)
call :func:`configure_logging` once at startup.
"""

import logging
import sys
from typing import Any, cast

import structlog
from structlog.types import EventDict, Processor

# Event dict keys that may hold a full account number
IBAN_KEYS = ("iban", "bban")


def mask_iban(value: str) -> str:
    """
    Mask an account number for logs, keeping country code and last 4 chars.

    >>> mask_iban("DE89370400440532013000")
    'DE****************3000'
    """
    if len(value) <= 6:
        return "*" * len(value)
    return value[:2] + "*" * (len(value) - 6) + value[-4:]


def mask_sensitive_data(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """
    Mask account numbers in log entries.

    IBANs identify a person's bank account; only enough is kept to tell
    entries apart.
    """
    for key in IBAN_KEYS:
        value = event_dict.get(key)
        if isinstance(value, str):
            event_dict[key] = mask_iban(value)
    return event_dict


def add_app_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Add application context to every log entry."""
    from openiban import __version__

    event_dict["app"] = "openiban"
    event_dict["version"] = __version__
    return event_dict


def configure_logging(
    log_level: str = "WARNING",
    json_logs: bool = False,
    dev_mode: bool = True,
    mask_ibans: bool = True,
) -> None:
    """
    Configure structured logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        json_logs: Whether to output JSON logs
        dev_mode: Whether to use development-friendly output
        mask_ibans: Whether to mask IBAN values in log entries
    """
    shared_processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        add_app_context,
    ]
    if mask_ibans:
        shared_processors.append(mask_sensitive_data)

    if json_logs:
        processors = shared_processors + [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]
    elif dev_mode:
        processors = shared_processors + [structlog.dev.ConsoleRenderer(colors=True)]
    else:
        processors = shared_processors + [
            structlog.processors.KeyValueRenderer(key_order=["timestamp", "level", "event"]),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Logs go to stderr so command output on stdout stays machine-readable
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, log_level.upper()),
        force=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Usage:
        logger = get_logger(__name__)
        logger.info("iban_rejected", iban=iban, error="IbanFormatException")
    """
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))


__all__ = [
    "configure_logging",
    "get_logger",
    "mask_iban",
    "mask_sensitive_data",
]
