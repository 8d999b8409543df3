"""
AST Visualization Utility.

Converts a parsed AST into a `rich.tree.Tree` so nested lists can be
inspected in the terminal. Each node kind gets a themed style matching the
console theme in `utils/console.py`.
"""

from typing import Optional

from rich.text import Text
from rich.tree import Tree

from lisp_parser.core.nodes import (
  BoolNode,
  IntegerNode,
  LambdaNode,
  LispNode,
  ListNode,
  SymbolNode,
  VoidNode,
)


def node_label(node: LispNode) -> Text:
  """
  Builds the styled one-line label for a node.

  Args:
      node (LispNode): Any AST node.

  Returns:
      Text: The label, e.g. ``Symbol +`` or ``List (3)``.
  """
  if isinstance(node, ListNode):
    return Text(f"List ({len(node.items)})", style="bold")
  if isinstance(node, SymbolNode):
    return Text.assemble(("Symbol ", ""), (node.name, "symbol"))
  if isinstance(node, IntegerNode):
    return Text.assemble(("Integer ", ""), (str(node.value), "integer"))
  if isinstance(node, VoidNode):
    return Text("Void", style="void")
  if isinstance(node, BoolNode):
    return Text(f"Bool {node.to_text()}")
  if isinstance(node, LambdaNode):
    return Text(f"Lambda ({' '.join(node.params)})", style="bold")
  return Text(type(node).__name__)


def build_tree(node: LispNode, parent: Optional[Tree] = None) -> Tree:
  """
  Renders an AST into a Rich Tree.

  Args:
      node (LispNode): The root node to visualize.
      parent (Optional[Tree]): Branch to attach to. A new root is created when omitted.

  Returns:
      Tree: The branch created for `node`.
  """
  label = node_label(node)
  branch = parent.add(label) if parent is not None else Tree(label)

  if isinstance(node, ListNode):
    children = node.items
  elif isinstance(node, LambdaNode):
    children = node.body
  else:
    children = []

  for child in children:
    build_tree(child, branch)

  return branch
