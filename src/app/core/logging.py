"""Logging setup for the API process.

Log records are emitted as JSON lines with PII (tokens, card-like numbers,
email addresses) replaced by placeholders.
"""

import json
import logging
import re
import sys

# PII patterns to filter from logs
PII_PATTERNS = [
    # Bearer tokens / JWTs (three base64url segments)
    (re.compile(r'\beyJ[\w-]+\.[\w-]+\.[\w-]+\b'), '[TOKEN]'),
    # Card numbers (13-19 digits, with or without spaces/dashes)
    (re.compile(r'\b\d{4}[\s-]?\d{4}[\s-]?\d{4}[\s-]?\d{1,7}\b'), '[CARD]'),
    # Email addresses
    (re.compile(r'\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b'), '[EMAIL]'),
]

# Extra attributes copied from log records into the JSON payload
STRUCTURED_FIELDS = (
    "request_id",
    "user_id",
    "method",
    "path",
    "status_code",
    "duration_ms",
    "error_code",
    "error_type",
    "client_ip",
    "resource_type",
    "category_id",
    "transaction_id",
)


def filter_pii(text: str) -> str:
    """Remove PII from text using regex patterns.

    Args:
        text: Input text that may contain PII

    Returns:
        Text with PII replaced by placeholders
    """
    if not text:
        return text

    filtered = text
    for pattern, replacement in PII_PATTERNS:
        filtered = pattern.sub(replacement, filtered)

    return filtered


class JSONLogFormatter(logging.Formatter):
    """Format log records as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": filter_pii(record.getMessage()),
        }

        for field in STRUCTURED_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                log_data[field] = value

        if record.exc_info:
            log_data["exception"] = filter_pii(self.formatException(record.exc_info))

        return json.dumps(log_data, default=str)


def setup_logging(level: str = "INFO") -> None:
    """
    Configure root logger to write JSON lines to stdout.

    Args:
        level: Log level ('DEBUG', 'INFO', 'WARNING', 'ERROR')
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(JSONLogFormatter())

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    # Replace handlers so repeated app creation doesn't duplicate output
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
    root_logger.addHandler(console_handler)
