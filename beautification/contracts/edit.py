"""
Edit Results - What a provider hands back after formatting.

An EditResult either replaces the whole content (no ranges) or a span of it
(ranges given), and says what to select afterwards:

    EditResult(changed_text="int x = 1;\\n")

    EditResult(
        changed_text="x = 1",
        ranges=EditRanges(
            replace_start=Position(line=2, ch=0),
            replace_end=Position(line=2, ch=7),
            select_start=Position(line=2, ch=0),
            select_end=Position(line=2, ch=5),
        ),
    )

Providers written against the camelCase wire shape can return a plain
mapping instead; it is validated with the same model:

    {"changedText": "...", "ranges": {"replaceStart": {"line": 0, "ch": 0}, ...}}

Providers report the outcome with the tagged Handled / Declined pair.
"""

from dataclasses import dataclass
from typing import Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

__all__ = [
    "Declined",
    "EditRanges",
    "EditResult",
    "FormatOutcome",
    "Handled",
    "Position",
]


class _WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,  # Accept snake_case as well
        frozen=True,
    )


class Position(_WireModel):
    """Zero-based line / character position in a document."""

    line: int = Field(..., ge=0, description="Zero-based line number")
    ch: int = Field(..., ge=0, description="Zero-based character offset in the line")

    def __lt__(self, other: "Position") -> bool:
        return (self.line, self.ch) < (other.line, other.ch)


class EditRanges(_WireModel):
    """Span to replace and span to select after replacement."""

    replace_start: Position
    replace_end: Position
    select_start: Position
    select_end: Position


class EditResult(_WireModel):
    """Formatted text plus optional ranges.

    Without ranges, changed_text is the entire new content and the whole
    content is selected afterwards.
    """

    changed_text: str
    ranges: EditRanges | None = None

    @property
    def is_full_replacement(self) -> bool:
        return self.ranges is None


@dataclass(slots=True, frozen=True)
class Handled:
    """Provider formatted the content."""

    result: EditResult


@dataclass(slots=True, frozen=True)
class Declined:
    """Provider had nothing to do for this context."""

    reason: str | None = None


FormatOutcome = Union[Handled, Declined]
