"""
S-Expression AST Nodes.

This module defines the tree produced by the parser. `ListNode` is the only
composite the parser builds; `IntegerNode`, `SymbolNode` and `VoidNode` are
its leaves. `BoolNode` and `LambdaNode` are reserved for an evaluator stage
and are never constructed by parsing.

Each node owns its children exclusively, so trees compare by value and can be
rendered back to source with `to_text()`.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, List


@dataclass
class LispNode(ABC):
  """Abstract base class for all AST nodes."""

  @abstractmethod
  def to_text(self) -> str:
    pass

  @abstractmethod
  def to_data(self) -> Any:
    """Returns a JSON-compatible representation of the node."""
    pass

  def depth(self) -> int:
    """Number of nested lists from this node down to its deepest leaf."""
    return 0


@dataclass
class VoidNode(LispNode):
  """Marker for the contents of an explicitly empty list `()`."""

  def to_text(self) -> str:
    return ""

  def to_data(self) -> Any:
    return None


@dataclass
class IntegerNode(LispNode):
  """A signed integer literal."""

  value: int

  def to_text(self) -> str:
    return str(self.value)

  def to_data(self) -> Any:
    return self.value


@dataclass
class SymbolNode(LispNode):
  """An identifier atom (e.g. `first`, `+`)."""

  name: str

  def to_text(self) -> str:
    return self.name

  def to_data(self) -> Any:
    return self.name


@dataclass
class BoolNode(LispNode):
  """Reserved. No boolean literal syntax exists, so the parser never builds one."""

  value: bool

  def to_text(self) -> str:
    return "#t" if self.value else "#f"

  def to_data(self) -> Any:
    return self.value


@dataclass
class LambdaNode(LispNode):
  """
  Reserved. A function value with named parameters and a body.

  Never constructed by the parser; kept so an evaluator can share the node model.
  """

  params: List[str] = field(default_factory=list)
  body: List[LispNode] = field(default_factory=list)

  def to_text(self) -> str:
    params = " ".join(self.params)
    body = "".join(f" {node.to_text()}" for node in self.body)
    return f"(lambda ({params}){body})"

  def to_data(self) -> Any:
    return {"lambda": {"params": list(self.params), "body": [node.to_data() for node in self.body]}}

  def depth(self) -> int:
    return 1 + max((node.depth() for node in self.body), default=0)


@dataclass
class ListNode(LispNode):
  """
  A parenthesized sequence of child nodes.

  An explicitly empty list is encoded as `ListNode([VoidNode()])`, not as
  `ListNode([])`.
  """

  items: List[LispNode] = field(default_factory=list)

  def to_text(self) -> str:
    return "(" + " ".join(node.to_text() for node in self.items) + ")"

  def to_data(self) -> Any:
    return [node.to_data() for node in self.items]

  def depth(self) -> int:
    return 1 + max((node.depth() for node in self.items), default=0)

  def is_empty(self) -> bool:
    """True for the `()` encoding."""
    return len(self.items) == 1 and isinstance(self.items[0], VoidNode)

  def __len__(self) -> int:
    return len(self.items)

  def __getitem__(self, index: int) -> LispNode:
    return self.items[index]


# Alias matching the conceptual name of the parser's output type.
AST = LispNode
