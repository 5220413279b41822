"""
Dispatch - Ordered fallback over registered providers.

Example:
    from beautification.dispatch import Dispatcher

    dispatcher = Dispatcher(registry, resolve_language=lambda ed: ed.language)
    result = await dispatcher.dispatch(editor)  # EditResult or None
"""

from .dispatcher import Dispatcher, coerce_outcome, default_language_resolver

__all__ = [
    "Dispatcher",
    "coerce_outcome",
    "default_language_resolver",
]
