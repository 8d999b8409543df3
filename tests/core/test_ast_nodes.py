"""
Tests for AST Node Structures.

Verifies:
1. Value equality.
2. Text rendering (including the `()` encoding).
3. JSON-compatible data export.
4. Depth computation.
5. Reserved variants (Bool, Lambda) render without parser support.
"""

from lisp_parser.core.nodes import (
  AST,
  BoolNode,
  IntegerNode,
  LambdaNode,
  LispNode,
  ListNode,
  SymbolNode,
  VoidNode,
)


def sample_tree() -> ListNode:
  return ListNode(
    [
      SymbolNode("first"),
      ListNode(
        [
          SymbolNode("list"),
          IntegerNode(1),
          ListNode([SymbolNode("+"), IntegerNode(2), IntegerNode(3)]),
          IntegerNode(9),
        ]
      ),
    ]
  )


def test_value_equality():
  assert sample_tree() == sample_tree()
  assert VoidNode() == VoidNode()
  assert ListNode([VoidNode()]) != ListNode([])
  assert IntegerNode(1) != SymbolNode("1")


def test_to_text():
  assert sample_tree().to_text() == "(first (list 1 (+ 2 3) 9))"


def test_empty_list_renders_as_parens():
  assert ListNode([VoidNode()]).to_text() == "()"
  assert ListNode([SymbolNode("a"), ListNode([VoidNode()])]).to_text() == "(a ())"


def test_to_data():
  assert sample_tree().to_data() == ["first", ["list", 1, ["+", 2, 3], 9]]
  assert ListNode([VoidNode()]).to_data() == [None]


def test_depth():
  assert IntegerNode(5).depth() == 0
  assert ListNode([VoidNode()]).depth() == 1
  assert sample_tree().depth() == 3


def test_list_helpers():
  tree = sample_tree()
  assert len(tree) == 2
  assert tree[0] == SymbolNode("first")
  assert ListNode([VoidNode()]).is_empty()
  assert not tree.is_empty()


def test_bool_node():
  assert BoolNode(True).to_text() == "#t"
  assert BoolNode(False).to_data() is False


def test_lambda_node():
  node = LambdaNode(["x", "y"], [ListNode([SymbolNode("+"), SymbolNode("x"), SymbolNode("y")])])
  assert node.to_text() == "(lambda (x y) (+ x y))"
  assert node.to_data() == {"lambda": {"params": ["x", "y"], "body": [["+", "x", "y"]]}}
  assert node.depth() == 2


def test_ast_alias():
  assert AST is LispNode
  assert isinstance(sample_tree(), AST)
