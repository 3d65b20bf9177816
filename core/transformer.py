"""
Nekonomicon AST Transformer - Converts Lark parse trees to AST nodes.

Each command collapses into a flat list: the module node (when present)
followed by its signature nodes in the order the grammar visited them.
"""

import re

from lark import Transformer

from core.errors import unescape_text
from core.nodes import (
    ContainerData,
    ElapsedSignature,
    LiteralNode,
    ModuleNode,
    OnSignature,
    RecordData,
    SilentSignature,
    TextData,
    TimeoutSignature,
    TraceSignature,
    VariableNode,
)

NUMBER_PATTERN = re.compile(r"\d+(\.\d+)?")


def parse_timeout_value(raw):
    """Parse a timeout amount, falling back to 0.0 instead of failing."""
    if not NUMBER_PATTERN.fullmatch(raw):
        return 0.0
    return float(raw)


class SpellTransformer(Transformer):
    """
    Transforms Nekonomicon parse trees into AbstractTreeNode lists.

    `spell` yields the nodes of the first command; `script` yields one
    node list per command.
    """

    def spell(self, items):
        """Keep only the first command; trailing input was never parsed."""
        return items[0]

    def script(self, items):
        return list(items)

    def command(self, items):
        """Flatten module and signatures into one ordered list."""
        nodes = []
        for item in items:
            if isinstance(item, list):
                nodes.extend(item)
            else:
                nodes.append(item)
        return nodes

    # --- Modules ---

    def module(self, items):
        name = items[0]
        args = items[1] if len(items) > 1 else []
        return ModuleNode(name=name, args=args)

    def module_args(self, items):
        return list(items)

    # --- Data ---

    def data(self, items):
        """Unwrap to whichever data rule matched."""
        return items[0]

    def text(self, items):
        return TextData(text=items[0])

    def record(self, items):
        return RecordData(identifier=items[0][1:])

    def container(self, items):
        return ContainerData(identifier=items[0][2:])

    def hinted_variable(self, items):
        name, hint = items[0][1:-1].split("{", 1)
        return VariableNode(name=name, hint=hint)

    def literal(self, items):
        return LiteralNode(value=items[0])

    # --- Signatures ---

    def signature(self, items):
        # on_sig expands to one node per platform, the rest to a single node
        return items[0]

    def trace_sig(self, items):
        return TraceSignature()

    def elapsed_sig(self, items):
        return ElapsedSignature()

    def silent_sig(self, items):
        return SilentSignature()

    def timeout_sig(self, items):
        value, unit = items
        return TimeoutSignature(value=parse_timeout_value(value), unit=unit)

    def on_sig(self, items):
        return [OnSignature(platform=platform) for platform in items]

    # --- Terminals ---

    def TEXT(self, t): return unescape_text(str(t))
    def NAME(self, t): return str(t)
    def NUMBER(self, t): return str(t)
    def RECORD(self, t): return str(t)
    def CONTAINER(self, t): return str(t)
    def HINTED_VARIABLE(self, t): return str(t)
    def TIMEOUT_VALUE(self, t): return str(t)
    def UNIT(self, t): return str(t)
