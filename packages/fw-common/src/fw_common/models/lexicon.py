"""
Filler lexicon models for FillerWatch.

Defines the Pydantic model for a single lexicon entry (a filler term
scoped to one or more BCP-47 locale tags) and the set of well-known
filler categories.
"""

from __future__ import annotations

import enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class FillerCategory(str, enum.Enum):
    """Well-known filler categories.

    Lexicon data may introduce other category strings; those are carried
    through as plain ``str`` values rather than rejected.
    """

    FILLED_PAUSE = "FILLED_PAUSE"
    DISCOURSE_MARKER = "DISCOURSE_MARKER"
    PLACATING_TAG = "PLACATING_TAG"


class LexiconEntry(BaseModel):
    """One filler term from the lexicon.

    Attributes:
        category: Category identifier (see :class:`FillerCategory`).
        term: Literal surface form, matched case-insensitively.
        language: Base language code (informational only).
        locale_tags: Locale tags the term is native to.
        notes: Free-text annotation.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    category: str = Field(default="", description="Category identifier.")
    term: str = Field(default="", description="Literal surface form.")
    language: str = Field(default="", description="Base language code.")
    locale_tags: tuple[str, ...] = Field(
        default=(),
        validation_alias=AliasChoices("locale_tags", "localeTags", "bcp47Tags"),
        description="Locale tags the term is native to.",
    )
    notes: str = Field(default="", description="Free-text annotation.")

    @property
    def is_matchable(self) -> bool:
        """Whether the entry has both a term and at least one locale tag."""
        return bool(self.term) and any(self.locale_tags)
