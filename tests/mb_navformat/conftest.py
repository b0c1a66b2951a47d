"""Shared fixtures: deterministic locale and translation state."""

from collections.abc import Iterator

import pytest

from mb_navformat.date_parse import DateTimeCatalogue, init_date_time_formats
from mb_navformat.i18n import reset_translations
from mb_navformat.locale_service import set_display_locale


@pytest.fixture(autouse=True)
def _english_display() -> Iterator[None]:
    """Render in en_US without translations, independent of the machine's environment."""
    set_display_locale("en_US")
    reset_translations()
    yield
    set_display_locale(None)
    reset_translations()


@pytest.fixture
def en_catalogue() -> DateTimeCatalogue:
    """Date-time catalogue built with en_US as system locale."""
    return init_date_time_formats("en_US")


@pytest.fixture
def de_catalogue() -> DateTimeCatalogue:
    """Date-time catalogue built with de_DE as system locale."""
    return init_date_time_formats("de_DE")
