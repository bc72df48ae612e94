"""Pattern compilation for criteria.

A criterion pattern is one of:
    "/expr/flags"   a full regular expression (flags from REGEX_FLAG_LETTERS)
    "a|b|c"         any of the literal phrases
    "phrase"        a single literal phrase

Literal phrases are always matched case-insensitively.
"""

import logging
import re
from typing import Optional, Union

from config.scoring_weights import REGEX_FLAG_LETTERS
from models.criterion import (
    AlternationPattern,
    LiteralPattern,
    PatternError,
    PatternSpec,
    RawExpressionPattern,
)

logger = logging.getLogger(__name__)

_RAW_EXPRESSION = re.compile(r"^/(.+)/([" + REGEX_FLAG_LETTERS + r"]*)$", re.DOTALL)

# Flag letters with a Python equivalent; the rest don't change a search
_FLAG_MAP = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "u": re.UNICODE,
}


def parse_pattern(raw: str) -> PatternSpec:
    """Classify a raw pattern string into its variant."""
    match = _RAW_EXPRESSION.match(raw)
    if match:
        return RawExpressionPattern(text=match.group(1), flags=match.group(2))
    if "|" in raw:
        return AlternationPattern(parts=[part.strip() for part in raw.split("|")])
    return LiteralPattern(text=raw)


def _python_flags(flags: str) -> int:
    result = 0
    for letter in flags:
        result |= _FLAG_MAP.get(letter, 0)
    return result


def build_regex(spec: PatternSpec) -> re.Pattern:
    """Compile a parsed pattern. Raises re.error for a bad raw expression."""
    if isinstance(spec, RawExpressionPattern):
        return re.compile(spec.text, _python_flags(spec.flags))
    if isinstance(spec, AlternationPattern):
        escaped = "|".join(re.escape(part) for part in spec.parts)
        return re.compile(f"({escaped})", re.IGNORECASE)
    return re.compile(re.escape(spec.text), re.IGNORECASE)


def compile_pattern(
    raw: str,
    criterion_key: Optional[str] = None,
    criterion_id: Optional[str] = None,
) -> Union[re.Pattern, PatternError]:
    """Compile a pattern string, returning a PatternError instead of raising."""
    try:
        return build_regex(parse_pattern(raw))
    except Exception as e:
        owner = f" (criterion: {criterion_key}, ID: {criterion_id})" if criterion_key else ""
        logger.error(f"Failed to compile pattern '{raw}'{owner}: {e}")
        return PatternError(
            pattern=raw,
            message=str(e),
            criterion_key=criterion_key,
            criterion_id=criterion_id,
        )
