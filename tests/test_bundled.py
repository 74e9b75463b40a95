import json
import logging

from localizer.core.i18n import TranslationStore
from localizer.core.resources import DirectoryResources, PackageResources


def test_missing_bundle_fails_but_keeps_loaded_locales(store):
    assert store.load_bundled("en", "xx") is False
    assert store.available_locales() == {"en"}
    assert store.get_message("greeting", "en") == "Hello"


def test_every_locale_is_attempted_after_a_failure(store):
    assert store.load_bundled("xx", "de") is False
    assert store.available_locales() == {"de"}


def test_region_variants_share_language_bundle(store):
    assert store.load_bundled("fr-CA", "fr_FR") is True
    assert store.available_locales() == {"fr-ca", "fr-fr"}
    assert store.get_message("greeting", "fr-CA") == "Bonjour"
    assert store.format_message("greeting.named", {"name": "Zoé"}, "fr-fr") == "Bonjour, Zoé !"


def test_bundled_locales_are_complete(store):
    assert store.load_bundled("en", "fr", "de") is True
    assert store.has_translation("errors.not_found", "de")
    # fr.json has no errors.not_found and does not borrow English
    assert store.get_message("errors.not_found", "fr") == ""


def test_no_locales_is_success(store):
    assert store.load_bundled() is True
    assert store.available_locales() == frozenset()


def test_decode_failure_is_swallowed_and_logged(settings, tmp_path, caplog):
    (tmp_path / "en.json").write_text(json.dumps({"greeting": "Hi"}), encoding="utf-8")
    (tmp_path / "es.json").write_text("{broken", encoding="utf-8")
    store = TranslationStore(settings=settings, resolver=DirectoryResources(tmp_path))

    with caplog.at_level(logging.WARNING, logger="localizer.core.i18n"):
        assert store.load_bundled("es", "en") is False

    assert store.available_locales() == {"en"}
    assert any("es" in r.getMessage() for r in caplog.records)


def test_unknown_package_resolves_nothing(settings):
    store = TranslationStore(settings=settings, resolver=PackageResources("no_such_pkg_for_tests"))
    assert store.load_bundled("en") is False
    assert store.available_locales() == frozenset()


def test_resolver_follows_bundle_package_setting(settings):
    store = TranslationStore(settings=settings.model_copy(update={"BUNDLE_PACKAGE": "localizer"}))
    # the top level package holds no json files
    assert store.load_bundled("en") is False


class ExplodingResolver:
    def open(self, name):
        raise PermissionError(f"denied: {name}")


def test_blank_locale_fails_without_raising(store):
    assert store.load_bundled("en", "", "  ", ".UTF-8") is False
    assert store.available_locales() == {"en"}


def test_resolver_errors_are_swallowed(settings):
    store = TranslationStore(settings=settings, resolver=ExplodingResolver())
    assert store.load_bundled("en", "fr") is False
    assert store.available_locales() == frozenset()

