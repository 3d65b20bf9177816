"""
Nekonomicon Lexer - Splits raw spell text into classified tokens.

The lexer has no grammar context, so it never raises: anything it cannot
make sense of degrades to a more permissive token kind.
"""

from core.tokens import Token, TokenKind, classify_word

WHITESPACE = " \t\r\n"
COMMENT_START = "~"
QUOTE = "'"
VARIABLE_START = "@"
HINT_OPEN = "{"
HINT_CLOSE = "}"
OPERATOR_CHARACTERS = "<>=!"


def is_word_character(char):
    return char.isalnum() or char in "_-"


def tokenize(source):
    """
    Convert spell source into an ordered list of tokens.

    Args:
        source: Raw spell text (one line or several)

    Returns:
        List of Token in source order
    """
    tokens = []
    position = 0
    end = len(source)

    while position < end:
        char = source[position]

        if char in WHITESPACE:
            position += 1
        elif char == COMMENT_START:
            position = _skip_comment(source, position)
        elif char == QUOTE:
            literal, position = _read_literal(source, position)
            tokens.append(Token(kind=TokenKind.LITERAL, value=literal))
        elif char == VARIABLE_START:
            variable_tokens, position = _read_variable(source, position)
            tokens.extend(variable_tokens)
        else:
            word, position = _read_word(source, position)
            tokens.append(Token(kind=classify_word(word), value=word))

    return tokens


def _skip_comment(source, position):
    """Skip from '~' up to and including the next newline."""
    newline = source.find("\n", position)
    if newline == -1:
        return len(source)
    return newline + 1


def _read_literal(source, position):
    """Capture everything between quotes verbatim. Unterminated runs to end of input."""
    closing = source.find(QUOTE, position + 1)
    if closing == -1:
        return source[position + 1:], len(source)
    return source[position + 1:closing], closing + 1


def _read_variable(source, position):
    """Read '@name' and an optional '{hint}' directly after it."""
    position += 1  # skip '@'
    start = position
    while position < len(source) and is_word_character(source[position]):
        position += 1

    tokens = [Token(kind=TokenKind.VARIABLE, value=source[start:position])]

    if position < len(source) and source[position] == HINT_OPEN:
        closing = source.find(HINT_CLOSE, position + 1)
        if closing == -1:
            hint, position = source[position + 1:], len(source)
        else:
            hint, position = source[position + 1:closing], closing + 1
        tokens.append(Token(kind=TokenKind.INTERPOLATION, value=hint))

    return tokens, position


def _read_word(source, position):
    """
    Read a bare word.

    Word characters accumulate as usual. A word can't start on punctuation,
    so a run of comparison characters (e.g. '<=') or a single stray
    character is taken instead; this always makes progress.
    """
    start = position
    if is_word_character(source[position]):
        while position < len(source) and is_word_character(source[position]):
            position += 1
    elif source[position] in OPERATOR_CHARACTERS:
        while position < len(source) and source[position] in OPERATOR_CHARACTERS:
            position += 1
    else:
        position += 1
    return source[start:position], position
