"""
Dispatcher - Ordered fallback over registered providers.

For one context:
1. Resolve its language id
2. Snapshot the providers for that language (best first)
3. Ask each provider in turn, one at a time
4. First Handled result wins; later providers are never asked

Declining is ordinary control flow. A provider declines by returning
Declined, None or an empty value, or by raising. None of that reaches the
caller: when every provider declines, dispatch returns None. Only a missing
context or a failing language resolver raises.
"""

import asyncio
import inspect
from collections.abc import Mapping
from typing import Any

import structlog
from pydantic import ValidationError

from ..contracts import (
    Declined,
    EditResult,
    FormatOutcome,
    Handled,
    LanguageResolutionError,
    LanguageResolver,
    NoActiveContextError,
)
from ..registry import ProviderBinding, ProviderRegistry, describe_provider

__all__ = ["Dispatcher", "coerce_outcome", "default_language_resolver"]

logger = structlog.get_logger(__name__)


class _ProviderTimeout(Exception):
    """Provider missed the dispatcher deadline."""


def default_language_resolver(context: Any) -> str:
    """Ask the context itself for its language id."""
    return context.get_language_id()


def coerce_outcome(value: Any) -> FormatOutcome:
    """Normalize whatever a provider returned into Handled or Declined.

    Raises:
        ValidationError: If a mapping does not describe an EditResult
    """
    if isinstance(value, Declined):
        return value
    if isinstance(value, Handled):
        if isinstance(value.result, EditResult):
            return value
        # Handled(None), Handled({...}): judge the payload like a bare return
        value = value.result
        if isinstance(value, (Handled, Declined)):
            return Declined("nested outcome")
    if isinstance(value, EditResult):
        return Handled(value)
    if not value:
        return Declined()
    if isinstance(value, str):
        return Handled(EditResult(changed_text=value))
    if isinstance(value, Mapping):
        return Handled(EditResult.model_validate(value))
    return Declined(f"unsupported result type {type(value).__name__}")


class Dispatcher:
    """Runs a context through the providers registered for its language.

    Example:
        dispatcher = Dispatcher(registry)
        result = await dispatcher.dispatch(editor)
        if result is not None:
            apply_edit_result(editor, result)
    """

    def __init__(
        self,
        registry: ProviderRegistry,
        resolve_language: LanguageResolver | None = None,
        provider_timeout: float | None = None,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            registry: Registry to read providers from
            resolve_language: Context -> language id (sync or async);
                defaults to context.get_language_id()
            provider_timeout: Seconds a single provider may take before it
                counts as declined; None waits forever
        """
        self._registry = registry
        self._resolve_language = resolve_language or default_language_resolver
        self._provider_timeout = provider_timeout

    @property
    def registry(self) -> ProviderRegistry:
        return self._registry

    async def resolve_language(self, context: Any) -> str:
        """Resolve the language id for a context.

        Raises:
            NoActiveContextError: If context is None
            LanguageResolutionError: If the resolver fails or returns nothing
        """
        if context is None:
            raise NoActiveContextError()

        try:
            language_id = self._resolve_language(context)
            if inspect.isawaitable(language_id):
                language_id = await language_id
        except Exception as e:
            raise LanguageResolutionError(context, e) from e

        if not language_id or not isinstance(language_id, str):
            raise LanguageResolutionError(context)
        return language_id

    async def dispatch(self, context: Any) -> EditResult | None:
        """Return the first provider result for context, or None.

        Raises:
            NoActiveContextError: If context is None
            LanguageResolutionError: If the language cannot be resolved
        """
        language_id = await self.resolve_language(context)
        bindings = self._registry.get_bindings_for_language_id(language_id)
        log = logger.bind(language=language_id)

        for index, binding in enumerate(bindings):
            outcome = await self._ask(binding, context, log.bind(index=index))
            if isinstance(outcome, Handled):
                log.debug(
                    "provider_handled",
                    provider=describe_provider(binding.provider),
                    priority=binding.priority,
                    index=index,
                )
                return outcome.result

        log.info("no_provider_handled", attempted=len(bindings))
        return None

    async def _await_with_deadline(self, awaitable: Any) -> Any:
        """Await a provider result, raising _ProviderTimeout past the deadline.

        The deadline is told apart from a TimeoutError the provider raises
        on its own, which is an ordinary declination.
        """
        task = asyncio.ensure_future(awaitable)
        try:
            done, _ = await asyncio.wait({task}, timeout=self._provider_timeout)
        except asyncio.CancelledError:
            task.cancel()
            raise

        if not done:
            task.cancel()
            await asyncio.wait({task})
            raise _ProviderTimeout()
        return task.result()

    async def _ask(
        self,
        binding: ProviderBinding,
        context: Any,
        log: Any,
    ) -> FormatOutcome:
        """Ask one provider; every failure mode comes back as Declined."""
        provider = binding.provider
        name = describe_provider(provider)
        format_fn = getattr(provider, "format", None)

        if not callable(format_fn):
            log.error(
                "provider_missing_capability",
                provider=name,
                language=binding.language,
                hint="Beautify providers must implement format(context)",
            )
            return Declined("missing format capability")

        try:
            result = format_fn(context)
            if inspect.isawaitable(result):
                if self._provider_timeout is None:
                    result = await result
                else:
                    result = await self._await_with_deadline(result)
        except _ProviderTimeout:
            log.warning("provider_timed_out", provider=name, timeout=self._provider_timeout)
            return Declined("timed out")
        except Exception as e:
            # Raising is a provider's way of saying "nothing to do"
            log.debug("provider_declined", provider=name, error=str(e))
            return Declined(str(e))

        try:
            outcome = coerce_outcome(result)
        except ValidationError as e:
            log.warning("provider_result_invalid", provider=name, error=str(e))
            return Declined("invalid result")

        if isinstance(outcome, Declined):
            log.debug("provider_declined", provider=name, reason=outcome.reason)
        return outcome
