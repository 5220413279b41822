"""
Beautification Manager - Wires the registry, dispatcher and editor together.

One manager per process, created at the top level and passed to whatever
handles the "beautify code" command:

    manager = BeautificationManager()
    manager.register_beautification_provider(prettier, ["javascript", "html"])
    manager.register_beautification_provider(fallback, ["all"], priority=-10)

    changed = await manager.beautify(active_editor)
"""

from collections.abc import Iterable
from typing import Any

import structlog

from .config import BeautificationConfig
from .contracts import BeautificationError, EditorProtocol, EditResult, LanguageResolver
from .dispatch import Dispatcher
from .editor import apply_edit_result
from .registry import ProviderRegistry

__all__ = ["BeautificationManager"]

logger = structlog.get_logger(__name__)


class BeautificationManager:
    """Registration API plus the beautify command."""

    def __init__(
        self,
        config: BeautificationConfig | None = None,
        registry: ProviderRegistry | None = None,
        resolve_language: LanguageResolver | None = None,
    ) -> None:
        if config is None:
            config = BeautificationConfig()

        self.config = config
        self.registry = registry if registry is not None else ProviderRegistry()
        self.dispatcher = Dispatcher(
            self.registry,
            resolve_language=resolve_language,
            provider_timeout=config.effective_provider_timeout,
        )

    def register_beautification_provider(
        self,
        provider: Any,
        languages: str | Iterable[str],
        priority: int = 0,
    ) -> None:
        """Register a provider; see ProviderRegistry.register_provider."""
        self.registry.register_provider(provider, languages, priority)

    def remove_beautification_provider(
        self,
        provider: Any,
        languages: str | Iterable[str],
    ) -> int:
        """Remove a provider; see ProviderRegistry.remove_provider."""
        return self.registry.remove_provider(provider, languages)

    async def get_beautified_code_details(self, editor: EditorProtocol) -> EditResult | None:
        """Ask providers for an edit without applying it."""
        return await self.dispatcher.dispatch(editor)

    async def beautify(self, editor: EditorProtocol | None) -> bool:
        """Beautify the editor's content in place.

        Returns:
            True if a provider produced an edit and it was applied,
            False if there is no editor or every provider declined

        Raises:
            BeautificationError: If the editor's language cannot be resolved
        """
        if editor is None:
            logger.debug("beautify_skipped", reason="no active editor")
            return False

        try:
            result = await self.dispatcher.dispatch(editor)
        except BeautificationError as e:
            logger.error("beautify_failed", editor=repr(editor), error=str(e))
            raise

        if result is None:
            logger.info("no_beautify_provider_responded", editor=repr(editor))
            return False

        apply_edit_result(editor, result)
        logger.debug(
            "beautify_applied",
            editor=repr(editor),
            ranged=not result.is_full_replacement,
        )
        return True
