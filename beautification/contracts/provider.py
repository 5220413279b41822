"""
Provider Protocol - Contract for beautification providers.

A provider formats the content behind a context (usually an editor) and
reports the outcome. Returning is the normal way to answer:
- Handled(EditResult(...)): the provider formatted the content
- Declined(): nothing to do here, let the next provider try

For compatibility with simpler providers, the dispatcher also accepts a bare
EditResult, a camelCase mapping, a non-empty string (full replacement),
None, or a raised exception (declined).

Language resolvers and editors are collaborators of the core: resolvers turn
a context into a language id, editors receive the EditResult.
"""

from typing import Any, Awaitable, Callable, Protocol, Union, runtime_checkable

from .edit import EditResult, FormatOutcome, Position

__all__ = [
    "BeautifyProvider",
    "EditorProtocol",
    "LanguageResolver",
    "ProviderReturn",
]


@runtime_checkable
class BeautifyProvider(Protocol):
    """Contract for beautification providers.

    Example:
        class PrettierProvider:
            languages = ["javascript", "html"]
            priority = 10

            async def format(self, context: Any) -> FormatOutcome:
                text = context.text
                formatted = await run_prettier(text)
                if formatted == text:
                    return Declined("already formatted")
                return Handled(EditResult(changed_text=formatted))

    ``languages`` and ``priority`` are optional; they are only read when the
    provider is loaded from an entry point.
    """

    async def format(self, context: Any) -> FormatOutcome:
        """Format the content behind context.

        Args:
            context: Opaque handle, typically the active editor

        Returns:
            Handled with the edit, or Declined
        """
        ...


@runtime_checkable
class EditorProtocol(Protocol):
    """What the manager needs from an editing context.

    The reference implementation is beautification.editor.TextEditor.
    """

    @property
    def text(self) -> str:
        """Full document content."""
        ...

    def get_language_id(self) -> str:
        """Language id of the content being edited."""
        ...

    def replace_range(self, text: str, start: Position, end: Position) -> None:
        """Replace the span start..end with text."""
        ...

    def set_text(self, text: str) -> None:
        """Replace the whole content."""
        ...

    def set_selection(self, start: Position, end: Position) -> None:
        """Select the span start..end."""
        ...

    def ending_cursor_pos(self) -> Position:
        """Position just past the last character."""
        ...


# Sync or async callable turning a context into a language id
LanguageResolver = Callable[[Any], Union[str, Awaitable[str]]]

# Anything a provider may hand back; see module docstring
ProviderReturn = Union[FormatOutcome, EditResult, dict, str, None]
