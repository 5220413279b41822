"""
Errors raised across the beautification boundary.

Provider declinations and missing capabilities never surface here; they are
handled inside the dispatch loop. Only faults upstream of the providers
(no context, language resolution failing) and provider loading errors do.
"""

__all__ = [
    "BeautificationError",
    "LanguageResolutionError",
    "NoActiveContextError",
    "ProviderLoadError",
]


class BeautificationError(Exception):
    """Base class for beautification errors."""


class NoActiveContextError(BeautificationError):
    """Raised when dispatch is asked to format without a context."""

    def __init__(self, message: str = "No active editing context") -> None:
        super().__init__(message)


class LanguageResolutionError(BeautificationError):
    """Raised when the language of a context cannot be determined."""

    def __init__(self, context: object, cause: BaseException | None = None) -> None:
        self.context = context
        detail = f": {cause}" if cause else ""
        super().__init__(f"Cannot resolve language for {context!r}{detail}")


class ProviderLoadError(BeautificationError):
    """Raised when a provider entry point cannot be loaded."""

    pass
