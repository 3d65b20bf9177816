"""
Nekonomicon Parser - Runs the grammar over spell source and builds AST nodes.

The grammar is the only judge of structure: a mismatch raises ParseError,
every other irregularity (bad timeout amount, unknown argument shape) has
already been degraded to a safe node by the transformer.
"""
from functools import lru_cache

from lark import Lark
from lark.exceptions import UnexpectedCharacters, UnexpectedEOF, UnexpectedInput, UnexpectedToken

from core.errors import ParseError, detect_common_error_patterns, get_line_context
from core.grammar import nekonomicon_grammar
from core.transformer import SpellTransformer

TERMINAL_DESCRIPTIONS = {
    "_TERMINATOR": "'.'",
    "_TRACE": "'trace'",
    "_ELAPSED": "'elapsed'",
    "_SILENT": "'silent'",
    "_TIMEOUT": "'timeout'",
    "_ON": "'on'",
    "LPAR": "'('",
    "RPAR": "')'",
    "COMMA": "','",
    "TEXT": "text",
    "HINTED_VARIABLE": "hinted variable",
    "RECORD": "record",
    "CONTAINER": "container",
    "NUMBER": "number",
    "TIMEOUT_VALUE": "timeout amount",
    "UNIT": "time unit",
    "NAME": "name",
}


@lru_cache(maxsize=None)
def build_parser():
    """Compile the grammar once; the Lark parser keeps no per-parse state."""
    return Lark(nekonomicon_grammar, parser='earley', start=['spell', 'script'])


def parse(source):
    """
    Parse the first command of a spell.

    Args:
        source: Spell text, e.g. "say 'hi' trace."

    Returns:
        List of AST nodes: the module (if any) followed by its signatures

    Raises:
        ParseError: If the source does not match the command grammar
    """
    tree = _parse_tree(source, 'spell')
    return SpellTransformer().transform(tree)


def parse_script(source):
    """Parse every command of a multi-line spell, one node list per command."""
    tree = _parse_tree(source, 'script')
    return SpellTransformer().transform(tree)


def describe_terminal(name):
    if name in TERMINAL_DESCRIPTIONS:
        return TERMINAL_DESCRIPTIONS[name]
    return name.strip("_").lower()


def _parse_tree(source, start):
    try:
        return build_parser().parse(source, start=start)
    except UnexpectedInput as e:
        raise to_parse_error(source, e) from e


def to_parse_error(source, error):
    """Turn a Lark mismatch into a ParseError carrying expected vs. found."""
    if isinstance(error, UnexpectedCharacters):
        expected = error.allowed
        found = repr(error.char)
    elif isinstance(error, UnexpectedToken):
        expected = error.expected
        found = repr(str(error.token))
    elif isinstance(error, UnexpectedEOF):
        expected = error.expected
        found = "end of input"
    else:
        expected = []
        found = None

    line_number = getattr(error, "line", -1)
    column = getattr(error, "column", -1)
    if line_number is None or line_number < 1:
        # End of input: point past the last character
        line_number = source.count("\n") + 1
        column = len(source.split("\n")[-1]) + 1

    context = get_line_context(source, line_number)
    suggestion_text, _ = detect_common_error_patterns(context or source)
    if not suggestion_text:
        suggestion_text = "Check the spell around this line"

    return ParseError(
        message="Spell does not match the command grammar",
        line_number=line_number,
        column=column,
        context=context,
        suggestion=suggestion_text,
        expected={describe_terminal(str(name)) for name in expected or []},
        found=found,
    )
