"""In-memory cache of resolved translations.

Maps component slug -> locale -> Translation. Every (slug, locale) pair is
in exactly one of three states:

- UNKNOWN: nothing is recorded for the component: its list was never
  fetched and no translation was created for it.
- ABSENT: the component is recorded (listed, or created into) and the
  locale is not stored.
- PRESENT: a Translation is stored.

Fetching a component's list is recorded even when the list is empty, so an
ABSENT locale never triggers a second listing. A create call records the
component too. There is no eviction; clear() is the only way back to UNKNOWN.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, Optional, Tuple

from modules.translations.models import Translation


class CacheState(Enum):
    """Resolution state of a (slug, locale) pair."""

    UNKNOWN = "unknown"
    ABSENT = "absent"
    PRESENT = "present"


@dataclass
class _ComponentEntry:
    translations: Dict[str, Translation] = field(default_factory=dict)


class TranslationCache:
    """Three-state translation store keyed by component slug and locale.

    Not synchronized; TranslationResolver serializes access.
    """

    def __init__(self) -> None:
        self._components: Dict[str, _ComponentEntry] = {}

    def lookup(
        self, slug: str, locale: str
    ) -> Tuple[CacheState, Optional[Translation]]:
        """Return the state of (slug, locale) and the stored record, if any."""
        entry = self._components.get(slug)
        if entry is None:
            return CacheState.UNKNOWN, None

        translation = entry.translations.get(locale)
        if translation is not None:
            return CacheState.PRESENT, translation

        return CacheState.ABSENT, None

    def state(self, slug: str, locale: str) -> CacheState:
        return self.lookup(slug, locale)[0]

    def is_queried(self, slug: str) -> bool:
        """True once the component was listed or had a translation created."""
        return slug in self._components

    def populate(self, slug: str, translations: Iterable[Translation]) -> int:
        """Record a fetched translation list for ``slug``.

        Each translation is stored under its ``language_code``. Records
        already stored by a create call are kept, so their ``created`` flag
        survives a later listing.

        Returns:
            Number of translations newly stored.
        """
        entry = self._components.setdefault(slug, _ComponentEntry())
        stored = 0
        for translation in translations:
            if translation.language_code not in entry.translations:
                entry.translations[translation.language_code] = translation
                stored += 1
        return stored

    def store(self, slug: str, locale: str, translation: Translation) -> None:
        """Store ``translation`` under (slug, locale), replacing any prior state."""
        entry = self._components.setdefault(slug, _ComponentEntry())
        entry.translations[locale] = translation

    def locales(self, slug: str) -> Tuple[str, ...]:
        entry = self._components.get(slug)
        if entry is None:
            return ()
        return tuple(entry.translations)

    def clear(self) -> None:
        self._components.clear()

    def __len__(self) -> int:
        return sum(len(entry.translations) for entry in self._components.values())
