"""Resolution of per-locale translations for Weblate components.

The resolver answers "does this component have a translation for locale X",
fetching the component's translation list at most once, and provisions
missing translations on demand.

Weblate endpoints used:
    GET  /api/components/(project)/(component)/translations/
    POST /api/components/(project)/(component)/translations/

Usage:
    resolver = TranslationResolver(client)
    translation = resolver.get_translation(component, "de")
"""

import threading
from typing import Any, Dict, List, Optional, Set

from structlog.stdlib import BoundLogger

from infrastructure.logging import get_module_logger
from integrations.weblate import DecodeError, WeblateClient
from modules.translations.cache import CacheState, TranslationCache
from modules.translations.models import (
    Component,
    Translation,
    translation_from_dict,
)

logger = get_module_logger()


class TranslationResolver:
    """Cache-backed lookup and creation of component translations.

    Owns its cache; two resolvers never share state. All read-check-write
    sequences run under a re-entrant lock, so concurrent callers cannot
    list the same component twice or create the same locale twice.

    Attributes:
        client: Weblate HTTP client
        cache: Translation cache owned by this resolver
    """

    def __init__(
        self,
        client: WeblateClient,
        cache: Optional[TranslationCache] = None,
        log: Optional[BoundLogger] = None,
    ) -> None:
        self.client = client
        self.cache = cache if cache is not None else TranslationCache()
        self._logger = log or logger
        self._lock = threading.RLock()

    def has_translation(self, component: Component, locale: str) -> bool:
        """Check whether ``component`` has a translation for ``locale``.

        Only the first call for a component reaches the server; after that
        the answer comes from the cache, including negative answers.

        Raises:
            UnexpectedStatusError: listing did not return 200
            DecodeError: listing body is not a translation list
            TransportError: the request failed
        """
        with self._lock:
            state = self.cache.state(component.slug, locale)
            if state is CacheState.PRESENT:
                return True
            if self.cache.is_queried(component.slug):
                return False

            self._load_translations(component)
            return self.cache.state(component.slug, locale) is CacheState.PRESENT

    def get_translation(self, component: Component, locale: str) -> Translation:
        """Return the translation for ``locale``, creating it if missing upstream."""
        with self._lock:
            if self.has_translation(component, locale):
                _, translation = self.cache.lookup(component.slug, locale)
                return translation

            return self.add_translation(component, locale)

    def add_translation(self, component: Component, locale: str) -> Translation:
        """Create a translation for ``locale`` and store it in the cache.

        The server is asked to create the translation even if one is cached;
        the cache always reflects the latest successful create.

        Raises:
            UnexpectedStatusError: creation did not return 201
            DecodeError: response body has no translation payload
            TransportError: the request failed
        """
        log = self._logger.bind(slug=component.slug, locale=locale)

        with self._lock:
            response = self.client.post(
                component.translations_url, data={"language_code": locale}
            )
            if response.status_code != 201:
                log.debug(
                    "translation_add_failed",
                    url=response.url,
                    status_code=response.status_code,
                    content=response.content,
                )
            response.raise_for_status(
                201,
                f"Unable to add weblate component translation for "
                f"{component.slug} {locale}.",
            )

            payload = self._decode(response)
            data = payload.get("data") if isinstance(payload, dict) else None
            if not isinstance(data, dict):
                log.error(
                    "translation_add_invalid_payload",
                    url=response.url,
                    content=response.content,
                )
                raise DecodeError(
                    "Creation response has no translation data.",
                    content=response.content,
                    url=response.url,
                )

            translation = translation_from_dict(data)
            translation.created = True
            self.cache.store(component.slug, locale, translation)

        log.debug("translation_added", file_url=translation.file_url)
        return translation

    def reset(self) -> None:
        """Forget every cached translation and listing."""
        with self._lock:
            self.cache.clear()
        self._logger.debug("translation_cache_reset")

    def _load_translations(self, component: Component) -> None:
        log = self._logger.bind(slug=component.slug)
        translations: List[Translation] = []
        seen: Set[str] = set()

        url: Optional[str] = component.translations_url
        while url:
            if url in seen:
                log.error("translations_list_pagination_loop", url=url)
                raise DecodeError("Listing pagination revisits a page.", url=url)
            seen.add(url)

            response = self.client.get(url)
            if response.status_code != 200:
                log.debug(
                    "translations_list_failed",
                    url=url,
                    status_code=response.status_code,
                    content=response.content,
                )
            response.raise_for_status(
                200,
                f"Unable to get weblate component translations for "
                f"{component.slug}.",
            )

            payload = self._decode(response)
            results = payload.get("results") if isinstance(payload, dict) else None
            if not isinstance(results, list):
                log.error(
                    "translations_list_invalid_payload",
                    url=url,
                    content=response.content,
                )
                raise DecodeError(
                    "Listing response has no results list.",
                    content=response.content,
                    url=url,
                )

            translations.extend(
                translation_from_dict(result)
                for result in results
                if isinstance(result, dict)
            )
            # Weblate paginates listings; "next" is null on the last page.
            url = payload.get("next")

        # Only record the listing once every page has been fetched.
        self.cache.populate(component.slug, translations)
        for translation in translations:
            log.debug("translation_loaded", locale=translation.language_code)
        log.debug("translations_loaded", count=len(translations))

    def _decode(self, response: Any) -> Dict[str, Any]:
        try:
            return response.json()
        except DecodeError as exc:
            self._logger.error(
                "weblate_response_decode_failed",
                url=response.url,
                error=str(exc),
                content=response.content,
            )
            raise
