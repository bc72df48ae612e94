from enum import Enum


class RuleType(str, Enum):
    PRIMARY = "primary"
    SYNONYM = "synonym"


class MatchType(str, Enum):
    PRIMARY = "primary"
    SYNONYM = "synonym"
    FUZZY = "fuzzy"


class PatternKind(str, Enum):
    LITERAL = "literal"
    ALTERNATION = "alternation"
    RAW_EXPRESSION = "raw_expression"
