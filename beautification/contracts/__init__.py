"""
Contracts (Protocols) for the beautification manager.

These protocols define the interfaces that providers and editors must satisfy.
Using Protocol enables structural subtyping - no inheritance required.
"""

from .edit import Declined, EditRanges, EditResult, FormatOutcome, Handled, Position
from .errors import (
    BeautificationError,
    LanguageResolutionError,
    NoActiveContextError,
    ProviderLoadError,
)
from .provider import BeautifyProvider, EditorProtocol, LanguageResolver, ProviderReturn

__all__ = [
    "BeautificationError",
    "BeautifyProvider",
    "Declined",
    "EditRanges",
    "EditResult",
    "EditorProtocol",
    "FormatOutcome",
    "Handled",
    "LanguageResolutionError",
    "LanguageResolver",
    "NoActiveContextError",
    "Position",
    "ProviderLoadError",
    "ProviderReturn",
]
