"""Text lookup for unit words and fallback strings.

Messages go through a gettext translations object. The default is
NullTranslations, which returns the English message ids unchanged.
"""

import gettext
from pathlib import Path
from typing import Optional, Sequence

DOMAIN = "readout"

_translations: gettext.NullTranslations = gettext.NullTranslations()


def t(message: str) -> str:
    return _translations.gettext(message)


def tn(singular: str, plural: str, count: int) -> str:
    """Pick the singular or plural form for count."""
    return _translations.ngettext(singular, plural, count)


def use_translations(translations: gettext.NullTranslations) -> None:
    """Install a translations object for subsequent lookups."""
    global _translations
    _translations = translations


def activate(
    languages: Sequence[str], localedir: Optional[Path] = None
) -> gettext.NullTranslations:
    """Load the catalog for languages, falling back to English message ids."""
    translations = gettext.translation(
        DOMAIN,
        localedir=str(localedir) if localedir else None,
        languages=list(languages),
        fallback=True,
    )
    use_translations(translations)
    return translations


def deactivate() -> None:
    """Restore the identity lookup."""
    use_translations(gettext.NullTranslations())
