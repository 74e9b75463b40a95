from __future__ import annotations


class LocalizerError(Exception):
    """Base class for errors raised by the localizer package."""


class DecodeError(LocalizerError, ValueError):
    """A translation source is not a JSON object of string values."""

    def __init__(self, locale: str, reason: str) -> None:
        self.locale = locale
        self.reason = reason
        super().__init__(f"Cannot decode translations for {locale!r}: {reason}")
