"""Translation service facade.

Wraps the resolver and transfer layers and returns OperationResult objects
instead of raising, so callers branch on a typed outcome:

    result = service.pull_translation(component, "de")
    if result.is_success:
        xliff = result.data
    elif result.is_retryable:
        ...

Programming errors are not caught; only Weblate provider failures
(transport, unexpected status, decode) are turned into results.
"""

from typing import Optional

from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult, classify_weblate_error
from integrations.weblate import WeblateClient, WeblateError
from modules.translations.models import Component
from modules.translations.resolver import TranslationResolver
from modules.translations.transfer import DEFAULT_FORMAT, TranslationTransfer

logger = get_module_logger()


class TranslationService:
    """Resolve, push and pull component translations with typed results."""

    def __init__(
        self,
        client: WeblateClient,
        resolver: Optional[TranslationResolver] = None,
        transfer: Optional[TranslationTransfer] = None,
    ) -> None:
        self.client = client
        self.resolver = resolver or TranslationResolver(client)
        self.transfer = transfer or TranslationTransfer(client)

    def has_translation(self, component: Component, locale: str) -> OperationResult:
        """Result data is True when the locale exists upstream."""
        try:
            exists = self.resolver.has_translation(component, locale)
        except WeblateError as exc:
            return self._failed("has_translation", component, locale, exc)
        return OperationResult.success(data=exists)

    def resolve_translation(
        self, component: Component, locale: str
    ) -> OperationResult:
        """Result data is the Translation, created upstream if it was missing."""
        try:
            translation = self.resolver.get_translation(component, locale)
        except WeblateError as exc:
            return self._failed("resolve_translation", component, locale, exc)
        message = "created" if translation.created else "resolved"
        return OperationResult.success(data=translation, message=message)

    def push_translation(
        self, component: Component, locale: str, content: str
    ) -> OperationResult:
        """Upload ``content`` as the file of the locale's translation."""
        try:
            translation = self.resolver.get_translation(component, locale)
            self.transfer.upload_translation(translation, content)
        except WeblateError as exc:
            return self._failed("push_translation", component, locale, exc)
        return OperationResult.success(data=translation, message="uploaded")

    def pull_translation(
        self, component: Component, locale: str, format: str = DEFAULT_FORMAT
    ) -> OperationResult:
        """Result data is the downloaded file content (XLIFF for ``json``)."""
        try:
            translation = self.resolver.get_translation(component, locale)
            content = self.transfer.download_translation(translation, format)
        except WeblateError as exc:
            return self._failed("pull_translation", component, locale, exc)
        return OperationResult.success(data=content, message="downloaded")

    def reset(self) -> None:
        self.resolver.reset()

    def _failed(
        self, operation: str, component: Component, locale: str, exc: WeblateError
    ) -> OperationResult:
        result = classify_weblate_error(exc)
        logger.error(
            "translation_operation_failed",
            operation=operation,
            slug=component.slug,
            locale=locale,
            url=exc.url,
            status=result.status.value,
            error_code=result.error_code,
            error=str(exc),
        )
        return result
