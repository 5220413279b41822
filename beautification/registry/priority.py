"""
Provider Registry - Priority-ordered providers per language.

Providers register against language ids with a priority. The registry
supports both:
- Language-specific bindings ("javascript", "html", ...)
- Bindings for every language (the "all" sentinel)

Lookup for a language merges both sets:
1. Higher priority first
2. Equal priority: registration order

Each binding is keyed by (provider, language), so a provider registered for
["javascript", "html"] can be removed from one language and stay on the other.

Lookups return fresh snapshots. Per-language lists are immutable tuples that
are replaced on write, so a dispatch iterating an earlier snapshot is never
affected by concurrent registration or removal.
"""

import itertools
import threading
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

import structlog

from ..config import ALL_LANGUAGES

__all__ = ["ProviderBinding", "ProviderRegistry", "describe_provider", "normalize_languages"]

logger = structlog.get_logger(__name__)


@dataclass(slots=True, frozen=True)
class ProviderBinding:
    """One provider bound to one language id.

    Attributes:
        provider: Object implementing the format capability
        language: Language id, or "all"
        priority: Higher sorts first
        sequence: Registration counter, breaks priority ties
    """
    provider: Any
    language: str
    priority: int
    sequence: int

    @property
    def sort_key(self) -> tuple[int, int]:
        return (-self.priority, self.sequence)


def normalize_languages(
    languages: str | Iterable[str],
    collapse_all: bool = True,
) -> list[str]:
    """Turn a language argument into a de-duplicated list of ids.

    A bare string is one language id. With collapse_all, a list containing
    "all" becomes just ["all"]; specific ids next to it would only duplicate
    the binding. Removal passes collapse_all=False so each named pair goes.

    Raises:
        ValueError: If no language id is given
    """
    if isinstance(languages, str):
        languages = [languages]

    result: list[str] = []
    for language in languages:
        if not isinstance(language, str) or not language:
            raise ValueError(f"Invalid language id: {language!r}")
        if language not in result:
            result.append(language)

    if not result:
        raise ValueError("At least one language id (or 'all') is required")

    if collapse_all and ALL_LANGUAGES in result:
        return [ALL_LANGUAGES]
    return result


class ProviderRegistry:
    """Registry for beautification providers.

    Example:
        registry = ProviderRegistry()

        # Provider for two languages
        registry.register_provider(prettier, ["javascript", "html"], priority=10)

        # Fallback provider for everything
        registry.register_provider(trim_whitespace, ["all"])

        # Ordered providers for one language
        for provider in registry.get_providers_for_language_id("javascript"):
            ...

        # Drop html only, javascript stays
        registry.remove_provider(prettier, ["html"])
    """

    def __init__(self) -> None:
        # language id -> bindings sorted by (priority desc, sequence)
        self._bindings: dict[str, tuple[ProviderBinding, ...]] = {}
        self._sequence = itertools.count()
        self._lock = threading.Lock()

    def register_provider(
        self,
        provider: Any,
        languages: str | Iterable[str],
        priority: int = 0,
    ) -> None:
        """Register a provider for one or more languages.

        The provider is not checked for the format capability here; the
        dispatcher skips providers without it.

        Args:
            provider: Object implementing BeautifyProvider
            languages: Language ids, or ["all"] for every language
            priority: Higher numbers are asked first (default 0)

        Raises:
            ValueError: If languages is empty
            TypeError: If priority is not an integer
        """
        if isinstance(priority, bool) or not isinstance(priority, int):
            raise TypeError(f"Priority must be an int, got {type(priority).__name__}")

        language_ids = normalize_languages(languages)

        with self._lock:
            for language in language_ids:
                current = self._bindings.get(language, ())
                if any(
                    b.provider is provider and b.priority == priority for b in current
                ):
                    logger.debug(
                        "provider_already_registered",
                        provider=describe_provider(provider),
                        language=language,
                        priority=priority,
                    )
                    continue

                binding = ProviderBinding(provider, language, priority, next(self._sequence))
                self._bindings[language] = _insert_sorted(current, binding)

        logger.debug(
            "provider_registered",
            provider=describe_provider(provider),
            languages=language_ids,
            priority=priority,
        )

    def remove_provider(self, provider: Any, languages: str | Iterable[str]) -> int:
        """Remove a provider's bindings for the given languages.

        Languages the provider was never registered for are ignored.
        "all" and specific ids are removed independently of each other.

        Returns:
            Number of bindings removed
        """
        language_ids = normalize_languages(languages, collapse_all=False)
        removed = 0

        with self._lock:
            for language in language_ids:
                current = self._bindings.get(language)
                if not current:
                    continue
                kept = tuple(b for b in current if b.provider is not provider)
                removed += len(current) - len(kept)
                if kept:
                    self._bindings[language] = kept
                else:
                    del self._bindings[language]

        if removed:
            logger.debug(
                "provider_removed",
                provider=describe_provider(provider),
                languages=language_ids,
                bindings=removed,
            )
        return removed

    def get_bindings_for_language_id(self, language_id: str) -> list[ProviderBinding]:
        """Get bindings for a language merged with "all" bindings.

        Returns:
            New list sorted by priority (desc), then registration order
        """
        with self._lock:
            specific = self._bindings.get(language_id, ())
            universal = self._bindings.get(ALL_LANGUAGES, ()) if language_id != ALL_LANGUAGES else ()

        return sorted(specific + universal, key=lambda b: b.sort_key)

    def get_providers_for_language_id(self, language_id: str) -> list[Any]:
        """Get providers for a language, best first."""
        return [b.provider for b in self.get_bindings_for_language_id(language_id)]

    def languages(self) -> list[str]:
        """List language ids with at least one binding."""
        with self._lock:
            return list(self._bindings.keys())

    def clear(self) -> None:
        """Remove all bindings."""
        with self._lock:
            self._bindings.clear()

    def __len__(self) -> int:
        with self._lock:
            return sum(len(bindings) for bindings in self._bindings.values())


def _insert_sorted(
    bindings: tuple[ProviderBinding, ...],
    binding: ProviderBinding,
) -> tuple[ProviderBinding, ...]:
    """Return a new tuple with binding placed after every binding that sorts before it."""
    index = len(bindings)
    for i, existing in enumerate(bindings):
        if binding.sort_key < existing.sort_key:
            index = i
            break
    return bindings[:index] + (binding,) + bindings[index:]


def describe_provider(provider: Any) -> str:
    """Short provider label for log lines."""
    name = getattr(provider, "name", None)
    if isinstance(name, str):
        return name
    return type(provider).__name__
