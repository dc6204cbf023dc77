"""Shared test fixtures."""

import gettext

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point config overrides at an empty temp dir and clear the cache."""
    import readout.config.settings as settings

    monkeypatch.setattr(settings, "GLOBAL_CONFIG", tmp_path / "global" / "config.yaml")
    monkeypatch.setattr(settings, "PROJECT_CONFIG", tmp_path / "project" / "config.yaml")
    settings._config = None
    settings._loaded_sources = []
    yield tmp_path
    settings._config = None
    settings._loaded_sources = []


@pytest.fixture
def reset_config_cache():
    import readout.config.settings as settings

    settings._config = None
    settings._loaded_sources = []
    yield
    settings._config = None
    settings._loaded_sources = []


@pytest.fixture
def reset_translations():
    from readout import i18n

    yield
    i18n.use_translations(gettext.NullTranslations())


@pytest.fixture
def shouting_translations(reset_translations):
    """Translations that upper-case every message, to prove lookups happen."""
    from readout import i18n

    class Shouting(gettext.NullTranslations):
        def gettext(self, message):
            return message.upper()

        def ngettext(self, msgid1, msgid2, n):
            return (msgid1 if n == 1 else msgid2).upper()

    i18n.use_translations(Shouting())
    return i18n
