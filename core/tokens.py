"""
Nekonomicon token definitions.

Tokens are the flat, grammar-agnostic view of a spell line. They carry
only a kind and the captured text, never a source position.
"""
from enum import Enum

from pydantic import BaseModel, ConfigDict


class TokenKind(str, Enum):
    """Classifies a lexical unit."""
    MODIFIER = "Modifier"            # as, is, with, without
    VARIABLE = "Variable"            # @name
    INTERPOLATION = "Interpolation"  # hint inside @name{...}
    LITERAL = "Literal"              # 'quoted content'
    LOGICAL = "Logical"              # and, or, not, <, >, <=, >=
    INSTRUCTION = "Instruction"      # module specific words
    FUNCTION = "Function"            # #name, reserved


class Token(BaseModel):
    """A classified lexical unit."""
    model_config = ConfigDict(frozen=True)

    kind: TokenKind
    value: str

    def __str__(self):
        return f"{self.kind.value} {self.value}"


# Reserved words, checked in this order
MODIFIER_KEYWORDS = frozenset({"as", "is", "with", "without"})
LOGICAL_KEYWORDS = frozenset({"and", "or", "not", "<", ">", "<=", ">="})


def classify_word(word):
    """Return the TokenKind for a bare word."""
    if word in MODIFIER_KEYWORDS:
        return TokenKind.MODIFIER
    if word in LOGICAL_KEYWORDS:
        return TokenKind.LOGICAL
    return TokenKind.INSTRUCTION
