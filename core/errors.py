"""
Error handling utilities for the Nekonomicon parser.
"""
import re

# A unit is any letter run that is not itself a signature keyword
TIMEOUT_WITH_UNIT = r"\btimeout\s+[\w-]+(\.\d+)?\s+(?!(?:trace|elapsed|silent|timeout|on)(?![\w-]))[A-Za-z]+"


class ParseError(Exception):
    """A spell that does not match the command grammar, with position and hints."""
    def __init__(self, message, line_number=None, column=None, context=None, suggestion=None,
                 expected=None, found=None):
        self.message = message
        self.line_number = line_number
        self.column = column
        self.context = context  # The offending line
        self.suggestion = suggestion  # How to fix it
        self.expected = sorted(expected) if expected else []
        self.found = found
        super().__init__(self._format_error())

    def _format_error(self):
        """Format the error message with context and suggestion."""
        lines = ["\n❌ Spell Error"]
        if self.line_number:
            lines.append(f" at line {self.line_number}")
            if self.column:
                lines.append(f", column {self.column}")
        lines.append(":\n")

        lines.append(f"   {self.message}\n")

        if self.expected or self.found:
            expected = ", ".join(self.expected) or "nothing"
            lines.append(f"   expected {expected}; found {self.found}\n")

        if self.context:
            lines.append(f"   > {self.context}\n")

        if self.suggestion:
            lines.append(f"   💡 {self.suggestion}\n")

        return "".join(lines)


def get_line_context(source_code, line_number):
    """Extract the line of code from source by line number (1-based)."""
    if not source_code or line_number is None:
        return None
    source_lines = source_code.split('\n')
    if 0 < line_number <= len(source_lines):
        return source_lines[line_number - 1].strip()
    return None


def unescape_text(raw):
    """Strip the quotes of a TEXT terminal and decode \\' and \\\\."""
    return re.sub(r"\\(['\\])", r"\1", raw[1:-1])


def detect_common_error_patterns(source_code):
    """Detect common mistakes and return helpful suggestions."""
    code = re.sub(r"~[^\n]*", "", source_code)
    stripped = re.sub(r"'(?:[^'\\]|\\.)*'", "''", code)

    # Unterminated text
    if "'" in stripped.replace("''", ""):
        return "Text is never closed: add the missing \"'\"", "unterminated_text"

    # Unclosed variable hint
    if re.search(r"@[\w-]+\{[^}]*$", stripped):
        return "Variable hint is never closed: use '@name{hint}'", "unclosed_hint"

    # Unmatched parentheses
    open_parens = stripped.count('(')
    close_parens = stripped.count(')')
    if open_parens != close_parens:
        return f"Unmatched parentheses: found {open_parens} '(' but {close_parens} ')'", "unmatched_parens"

    # Timeout without a unit
    if re.search(r"(?<![\w-])timeout(?![\w-])", stripped) and not re.search(TIMEOUT_WITH_UNIT, stripped):
        return "Timeouts need a unit: use 'timeout 5 sec'", "timeout_missing_unit"

    # 'on' without a platform
    if re.search(r"(^|\s)on\s*(\.|$)", stripped):
        return "Name at least one platform after 'on', e.g. 'on linux'", "on_missing_platform"

    # Missing terminator
    if stripped.strip() and not stripped.rstrip().endswith('.'):
        return "Spells end with '.'", "missing_terminator"

    return None, None
