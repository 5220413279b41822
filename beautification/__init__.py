"""
Beautification Manager - Route "beautify code" to the best registered provider.

Providers register against language ids with a priority; a beautify request
tries them in order and stops at the first one that produces an edit.
"""

__version__ = "1.0.0"

from .config import ALL_LANGUAGES, BeautificationConfig, config
from .contracts import (
    BeautificationError,
    BeautifyProvider,
    Declined,
    EditRanges,
    EditResult,
    Handled,
    LanguageResolutionError,
    NoActiveContextError,
    Position,
    ProviderLoadError,
)
from .dispatch import Dispatcher
from .editor import TextEditor, apply_edit_result
from .manager import BeautificationManager
from .registry import ProviderRegistry

__all__ = [
    "__version__",
    "ALL_LANGUAGES",
    "BeautificationConfig",
    "BeautificationError",
    "BeautificationManager",
    "BeautifyProvider",
    "Declined",
    "Dispatcher",
    "EditRanges",
    "EditResult",
    "Handled",
    "LanguageResolutionError",
    "NoActiveContextError",
    "Position",
    "ProviderLoadError",
    "ProviderRegistry",
    "TextEditor",
    "apply_edit_result",
    "config",
]
