from __future__ import annotations

from .core.config import Settings, settings
from .core.errors import DecodeError, LocalizerError
from .core.i18n import TranslationStore, Translator
from .core.logging_config import get_logger, setup_logging
from .core.resources import DirectoryResources, PackageResources, ResourceResolver

__all__ = [
    "DecodeError",
    "DirectoryResources",
    "LocalizerError",
    "PackageResources",
    "ResourceResolver",
    "Settings",
    "TranslationStore",
    "Translator",
    "get_logger",
    "settings",
    "setup_logging",
]

__version__ = "1.0.0"
