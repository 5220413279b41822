"""
Registry - Providers indexed by language id and priority.

Example:
    from beautification.registry import ProviderRegistry

    registry = ProviderRegistry()
    registry.register_provider(provider, ["javascript", "html"], priority=5)
    providers = registry.get_providers_for_language_id("javascript")
"""

from .priority import ProviderBinding, ProviderRegistry, describe_provider, normalize_languages

__all__ = [
    "ProviderBinding",
    "ProviderRegistry",
    "describe_provider",
    "normalize_languages",
]
