import json

import pytest

from localizer.core.config import Settings
from localizer.core.i18n import TranslationStore


@pytest.fixture
def settings():
    return Settings(_env_file=None, DEFAULT_LOCALE="en", FALLBACK_LOCALE="en")


@pytest.fixture
def store(settings):
    return TranslationStore(settings=settings)


@pytest.fixture
def write_json(tmp_path):
    def _write(name, data):
        path = tmp_path / name
        text = data if isinstance(data, str) else json.dumps(data)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
