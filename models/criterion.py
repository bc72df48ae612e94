from __future__ import annotations

import re
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from models.enums import PatternKind, RuleType


class Criterion(BaseModel):
    """A weighted preference rule as stored in the criteria file."""

    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    key: str = Field(min_length=1)
    weight: float = Field(gt=0)
    must: bool = False
    pattern: str = ""
    synonyms: list[str] = Field(default_factory=list)


# --- Pattern variants (parsed, not yet compiled) ---


class LiteralPattern(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal[PatternKind.LITERAL] = PatternKind.LITERAL
    text: str


class AlternationPattern(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal[PatternKind.ALTERNATION] = PatternKind.ALTERNATION
    parts: list[str]


class RawExpressionPattern(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal[PatternKind.RAW_EXPRESSION] = PatternKind.RAW_EXPRESSION
    text: str
    flags: str = ""


PatternSpec = Union[LiteralPattern, AlternationPattern, RawExpressionPattern]


class PatternError(BaseModel):
    """A pattern string that could not be compiled."""

    model_config = ConfigDict(frozen=True)

    pattern: str
    message: str
    criterion_key: Optional[str] = None
    criterion_id: Optional[str] = None


class MatchRule(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    regex: re.Pattern
    rule_type: RuleType
    original_pattern: str

    def found_in(self, text: str) -> bool:
        return self.regex.search(text) is not None


class PreparedCriterion(BaseModel):
    """A criterion with its patterns compiled, ready for scoring.

    `primary_pattern` is the raw primary string, kept even when it failed to
    compile so the matcher can still use it as a fuzzy target.
    """

    model_config = ConfigDict(frozen=True)

    key: str
    must: bool = False
    weight: float
    rules: list[MatchRule] = Field(default_factory=list)
    primary_pattern: str = ""
