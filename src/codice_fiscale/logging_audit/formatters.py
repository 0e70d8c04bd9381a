"""Custom log formatters for the codice fiscale toolkit.

This module provides specialized formatters for logging, including PII redaction.
"""

import logging
import re
from typing import List, Tuple

# Canonical or omocode fiscal code, with or without the checksum letter
FISCAL_CODE_PATTERN = re.compile(
    r"\b[A-Z]{6}[0-9LMNPQRSTUV]{2}[ABCDEHLMPRST][0-9LMNPQRSTUV]{2}"
    r"[A-Z][0-9LMNPQRSTUV]{3}[A-Z]?\b",
    re.IGNORECASE,
)


class PIIRedactingFormatter(logging.Formatter):
    """Formatter that redacts fiscal codes and names from log messages.

    A fiscal code embeds birth date, gender and birth place, so it is treated
    as personal data in its entirety.

    Attributes:
        redact_pii: Whether to enable PII redaction
        patterns: List of (regex_pattern, replacement_text) tuples for redaction

    Example:
        >>> formatter = PIIRedactingFormatter(
        ...     fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        ...     redact_pii=True
        ... )
        >>> handler = logging.StreamHandler()
        >>> handler.setFormatter(formatter)
    """

    def __init__(
        self,
        fmt: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt: str | None = None,
        redact_pii: bool = False,
    ) -> None:
        """Initialize the PIIRedactingFormatter.

        Args:
            fmt: Log message format string
            datefmt: Date format string (optional)
            redact_pii: Whether to enable PII redaction
        """
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.redact_pii = redact_pii

        self.patterns: List[Tuple[re.Pattern[str], str]] = [
            (FISCAL_CODE_PATTERN, "[CF-REDACTED]"),
            # Matches: name="Maria Rossi", name='Rossi', name=Rossi (up to whitespace)
            (
                re.compile(r"""name=(?:"[^"]*"|'[^']*'|[^\s,]+)"""),
                "name=[NAME-REDACTED]",
            ),
        ]

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record with optional PII redaction.

        Args:
            record: Log record to format

        Returns:
            Formatted log message with PII redacted if enabled
        """
        original = super().format(record)

        if self.redact_pii:
            for pattern, replacement in self.patterns:
                original = pattern.sub(replacement, original)

        return original
