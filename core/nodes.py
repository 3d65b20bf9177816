"""
Nekonomicon AST node definitions.

A parsed command is emitted as a flat list: the module node first, then
its signatures in source order. Command regroups that list by node kind.
"""
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, SerializeAsAny


class AbstractTreeNode(BaseModel):
    """Base class for every node the parser emits."""
    model_config = ConfigDict(frozen=True)


# ==========================================
# DATA: module argument payloads
# ==========================================

class DataNode(AbstractTreeNode):
    """One of the three spelled shapes of a module argument."""


class TextData(DataNode):
    """Quoted text: 'hello'."""
    kind: Literal["text"] = "text"
    text: str


class RecordData(DataNode):
    """Named record reference: @name."""
    kind: Literal["record"] = "record"
    identifier: str


class ContainerData(DataNode):
    """Named container reference: ::name or ::name:key."""
    kind: Literal["container"] = "container"
    identifier: str


class LiteralNode(AbstractTreeNode):
    """Bare argument that matched no data rule (numbers, words)."""
    kind: Literal["literal"] = "literal"
    value: str


class VariableNode(AbstractTreeNode):
    """Hinted variable: @name{hint}."""
    kind: Literal["variable"] = "variable"
    name: str
    hint: Optional[str] = None


ArgumentNode = Union[TextData, RecordData, ContainerData, VariableNode, LiteralNode]


# ==========================================
# SIGNATURES: trailing execution directives
# ==========================================

class SignatureNode(AbstractTreeNode):
    """Base class for the trailing signature clauses."""


class OnSignature(SignatureNode):
    kind: Literal["on"] = "on"
    platform: str


class TraceSignature(SignatureNode):
    kind: Literal["trace"] = "trace"


class ElapsedSignature(SignatureNode):
    kind: Literal["elapsed"] = "elapsed"


class SilentSignature(SignatureNode):
    kind: Literal["silent"] = "silent"


class TimeoutSignature(SignatureNode):
    kind: Literal["timeout"] = "timeout"
    value: float
    unit: str


# ==========================================
# MODULE & COMMAND
# ==========================================

class ModuleNode(AbstractTreeNode):
    """The verb of a command and its arguments."""
    kind: Literal["module"] = "module"
    name: str
    args: List[ArgumentNode] = []


class Command(BaseModel):
    """A module invocation grouped with its signatures."""
    module: Optional[ModuleNode] = None
    signatures: List[SerializeAsAny[SignatureNode]] = []

    @classmethod
    def from_nodes(cls, nodes):
        """Rebuild the grouping from a flat node sequence, keeping source order."""
        module = None
        signatures = []
        for node in nodes:
            if isinstance(node, ModuleNode):
                module = node
            elif isinstance(node, SignatureNode):
                signatures.append(node)
        return cls(module=module, signatures=signatures)

    def to_nodes(self):
        nodes = [self.module] if self.module else []
        return nodes + list(self.signatures)

    def has(self, signature_type):
        """Check whether a signature of the given class is attached."""
        return any(isinstance(s, signature_type) for s in self.signatures)
