"""
Provider Loader - Load providers from entry-point strings.

An entry point names an importable object as "package.module:attribute".
Classes are instantiated without arguments; anything else is used as is.
Providers may declare where they belong:

    class PrettierProvider:
        languages = ["javascript", "html"]   # default: ["all"]
        priority = 10                         # default: 0

        async def format(self, context): ...
"""

import importlib
from collections.abc import Iterable
from typing import Any

import structlog

from .config import ALL_LANGUAGES
from .contracts import ProviderLoadError
from .registry import ProviderRegistry, describe_provider

__all__ = [
    "load_provider",
    "provider_languages",
    "provider_priority",
    "register_entry_points",
]

logger = structlog.get_logger(__name__)


def load_provider(entry_point: str) -> Any:
    """Import and instantiate the provider named by an entry point.

    Args:
        entry_point: "package.module:attribute" (attribute may be dotted)

    Raises:
        ProviderLoadError: If the entry point is malformed or cannot be loaded
    """
    module_name, sep, attr_path = entry_point.strip().partition(":")
    if not sep or not module_name or not attr_path:
        raise ProviderLoadError(
            f"Invalid provider entry point '{entry_point}', expected 'module:attribute'"
        )

    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise ProviderLoadError(f"Cannot import '{module_name}': {e}") from e

    for attr in attr_path.split("."):
        try:
            target = getattr(target, attr)
        except AttributeError as e:
            raise ProviderLoadError(f"'{module_name}' has no attribute '{attr_path}'") from e

    if isinstance(target, type):
        try:
            target = target()
        except Exception as e:
            raise ProviderLoadError(f"Cannot instantiate '{entry_point}': {e}") from e

    logger.debug("provider_loaded", entry_point=entry_point, provider=describe_provider(target))
    return target


def provider_languages(provider: Any) -> list[str]:
    """Languages a provider declares, ["all"] if it declares none."""
    languages = getattr(provider, "languages", None)
    if not languages:
        return [ALL_LANGUAGES]
    if isinstance(languages, str):
        return [languages]
    return list(languages)


def provider_priority(provider: Any) -> int:
    """Priority a provider declares, 0 if it declares none."""
    priority = getattr(provider, "priority", 0)
    if isinstance(priority, bool) or not isinstance(priority, int):
        return 0
    return priority


def register_entry_points(
    registry: ProviderRegistry,
    entry_points: Iterable[str],
    languages: Iterable[str] | None = None,
    priority: int | None = None,
) -> list[Any]:
    """Load providers and register them with their declared languages and priority.

    Args:
        registry: Registry to register with
        entry_points: Provider entry-point strings
        languages: Override the declared languages for every provider
        priority: Override the declared priority for every provider

    Returns:
        Loaded providers, in registration order
    """
    override = list(languages) if languages is not None else []
    providers = []
    for entry_point in entry_points:
        provider = load_provider(entry_point)
        registry.register_provider(
            provider,
            override or provider_languages(provider),
            provider_priority(provider) if priority is None else priority,
        )
        providers.append(provider)
    return providers
