from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from typing import IO, Any, Dict, FrozenSet, Mapping, Optional, Union

from pydantic import TypeAdapter, ValidationError

from .config import Settings, settings as default_settings
from .errors import DecodeError
from .resources import PackageResources, ResourceResolver
from .tags import language_of, normalize, platform_default


log = logging.getLogger(__name__)

Source = Union[str, os.PathLike, bytes, IO[Any]]

_TABLE = TypeAdapter(Dict[str, str])


def decode_table(content: Union[str, bytes], locale: str) -> Dict[str, str]:
    """Decode a JSON object of string values, raising ``DecodeError`` otherwise."""
    if isinstance(content, bytes):
        try:
            content = content.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise DecodeError(locale, f"not UTF-8 ({e.reason})") from e
    try:
        return _TABLE.validate_json(content, strict=True)
    except ValidationError as e:
        first = e.errors()[0]
        where = ".".join(str(p) for p in first.get("loc", ())) or "<root>"
        raise DecodeError(locale, f"{where}: {first.get('msg')}") from e


def _substitute(message: str, params: Mapping[str, Any]) -> str:
    # Sequential literal replacement, a value may feed a later placeholder
    for name, value in params.items():
        message = message.replace("{" + name + "}", str(value))
    return message


def _read(source: Source) -> Union[str, bytes]:
    if isinstance(source, bytes):
        return source
    if isinstance(source, (str, os.PathLike)):
        return Path(source).read_bytes()
    return source.read()


class TranslationStore:
    """Per-locale translation tables with single-step fallback.

    Each load publishes a new locale -> table mapping under a lock; readers
    only ever look at one published mapping, so they never see a table that
    is being replaced.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        resolver: Optional[ResourceResolver] = None,
    ) -> None:
        self.settings = settings or default_settings
        self.resolver = resolver or PackageResources(self.settings.BUNDLE_PACKAGE)
        self._tables: Dict[str, Dict[str, str]] = {}
        self._lock = threading.Lock()

    # ----- loading -----

    def load_from_source(self, source: Source, locale: str) -> None:
        key = normalize(locale)
        try:
            content = _read(source)
        except UnicodeDecodeError as e:
            # text streams decode while reading
            raise DecodeError(key, f"not UTF-8 ({e.reason})") from e
        table = decode_table(content, key)
        with self._lock:
            tables = dict(self._tables)
            tables[key] = table
            self._tables = tables
        log.debug("Loaded %d messages for locale %s", len(table), key)

    def load_file(self, path: Union[str, os.PathLike], locale: str) -> None:
        self.load_from_source(Path(path), locale)

    def load_bundled(self, *locales: str) -> bool:
        """Load ``<language>.json`` from the resolver for every locale.

        Returns False if any locale could not be loaded; the ones that did
        load stay loaded.
        """
        ok = True
        for loc in locales:
            name = None
            try:
                name = f"{language_of(loc)}.json"
                stream = self.resolver.open(name)
                if stream is None:
                    log.warning("No bundled resource %s for locale %s", name, loc)
                    ok = False
                    continue
                with stream:
                    self.load_from_source(stream, loc)
            except (DecodeError, OSError, ValueError) as e:
                log.warning("Failed to load locale %r from %s: %s", loc, name, e)
                ok = False
        return ok

    # ----- queries -----

    @staticmethod
    def _key(locale: Optional[str]) -> str:
        if locale is None:
            return ""
        try:
            return normalize(locale)
        except ValueError:
            log.debug("Ignoring blank locale tag %r", locale)
            return ""

    def _target(self, locale: Optional[str]) -> str:
        # blank tags mean the default locale
        return self._key(locale) or self.settings.DEFAULT_LOCALE or platform_default()

    def _fallback(self, locale: Optional[str]) -> str:
        return self._key(locale) or self.settings.FALLBACK_LOCALE

    def get_message(
        self,
        id: str,
        locale: Optional[str] = None,
        fallback_locale: Optional[str] = None,
    ) -> str:
        tables = self._tables
        table = tables.get(self._target(locale))
        if table is not None:
            # A loaded locale never falls through, missing ids are blank
            return table.get(id, "")
        table = tables.get(self._fallback(fallback_locale))
        if table is not None:
            return table.get(id, "")
        return id

    def format_message(
        self,
        id: str,
        params: Optional[Mapping[str, Any]] = None,
        locale: Optional[str] = None,
    ) -> str:
        return _substitute(self.get_message(id, locale), params or {})

    def has_translation(self, id: str, locale: Optional[str] = None) -> bool:
        table = self._tables.get(self._target(locale))
        return table is not None and id in table

    def available_locales(self) -> FrozenSet[str]:
        return frozenset(self._tables)

    def translator(
        self, locale: Optional[str] = None, fallback_locale: Optional[str] = None
    ) -> "Translator":
        return Translator(self, self._target(locale), self._fallback(fallback_locale))


class Translator:
    """A store bound to one locale, called like ``t("greeting", name="Ann")``."""

    def __init__(self, store: TranslationStore, locale: str, fallback_locale: str) -> None:
        self.store = store
        self.locale = locale
        self.fallback_locale = fallback_locale

    def __call__(self, id: str, /, **params: Any) -> str:
        return _substitute(
            self.store.get_message(id, self.locale, self.fallback_locale), params
        )

    def __repr__(self) -> str:
        return f"Translator(locale={self.locale!r}, fallback={self.fallback_locale!r})"
