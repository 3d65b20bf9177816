import sys

from core.errors import ParseError
from core.lexer import tokenize
from core.nodes import Command
from core.parser import parse_script

# Global verbose flag
_VERBOSE = False

def set_verbose(value):
    """Set the global verbose flag."""
    global _VERBOSE
    _VERBOSE = value

def debug_log(message):
    """Log a debug message to stderr if verbose mode is enabled."""
    if _VERBOSE:
        print(f"\033[94mDEBUG:\033[0m {message}", file=sys.stderr)


def load_source(file_path):
    with open(file_path, 'r', encoding='utf-8') as f:
        return f.read()


def read_spell(file_path, source_code=None):
    """
    Parse a whole spell file into commands.

    Args:
        file_path: Path to the .spell file (used for messages when source_code is given)
        source_code: Optional source to parse instead of reading file_path

    Returns:
        List of Command, one per '.'-terminated command

    Raises:
        ParseError: If any command does not match the grammar
    """
    if source_code is None:
        source_code = load_source(file_path)

    debug_log(f"Parsing spell: {file_path}")

    try:
        node_lists = parse_script(source_code)
    except ParseError as e:
        debug_log(f"Grammar mismatch at line {e.line_number}, column {e.column}")
        raise ParseError(
            message=f"{file_path}: {e.message}",
            line_number=e.line_number,
            column=e.column,
            context=e.context,
            suggestion=e.suggestion,
            expected=e.expected,
            found=e.found,
        ) from e

    commands = [Command.from_nodes(nodes) for nodes in node_lists]
    debug_log(f"Parsed {len(commands)} command(s) from {file_path}")
    return commands


def tokenize_spell(file_path, source_code=None):
    """Tokenize a spell line by line; yields (line_number, tokens) for non-empty results."""
    if source_code is None:
        source_code = load_source(file_path)

    for line_number, line in enumerate(source_code.split('\n'), 1):
        tokens = tokenize(line)
        if tokens:
            debug_log(f"Line {line_number}: {len(tokens)} token(s)")
            yield line_number, tokens
