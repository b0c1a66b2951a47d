"""Translation layer for user-visible literals."""

import logging
from pathlib import Path

from babel.support import NullTranslations, Translations

logger = logging.getLogger(__name__)

DOMAIN = "mb_navformat"

_translations: NullTranslations = NullTranslations()


def install_translations(dirname: Path, locale: str) -> None:
    """Load the message catalog for locale from dirname and make it active.

    Falls back to untranslated messages when no catalog exists.
    """
    global _translations  # noqa: PLW0603
    _translations = Translations.load(str(dirname), locales=[locale], domain=DOMAIN)
    if isinstance(_translations, Translations):
        logger.debug("Loaded translations for %s from %s", locale, dirname)
    else:
        logger.debug("No translations for %s in %s", locale, dirname)


def reset_translations() -> None:
    """Return to untranslated messages."""
    global _translations  # noqa: PLW0603
    _translations = NullTranslations()


def gettext(message: str) -> str:
    """Translate message."""
    return _translations.gettext(message)


def ngettext(singular: str, plural: str, n: int) -> str:
    """Translate singular or plural form depending on n."""
    return _translations.ngettext(singular, plural, n)


_ = gettext
