"""
Single-pass walk over a tree-sitter JavaScript syntax tree.

Each node first goes through ``dispatch``, which fully handles calls and
assignments (``Step.HANDLED``) or lets the generic rule apply
(``Step.DESCEND``): open a scope if the node is a decision or loop
construct, tally the node, visit its named children, close the scope.
"""

import logging
from enum import Enum, auto
from typing import Dict, Iterator, Optional, Tuple

from tree_sitter import Node

from src.main.config import INPUT_SENTINEL, OUTPUT_SENTINEL, PRINT_FUNCTION, PROMPT_FUNCTION
from src.main.engine.errors import TypeArgumentsNotSupported, UnsupportedAssignmentTarget
from src.main.engine.scope import Assignment, Block, ControlCondition
from src.main.engine.state import AnalysisState

logger = logging.getLogger(__name__)

# node type -> (operator token, statement operator weight)
_FIXED_OPERATORS: Dict[str, Tuple[str, int]] = {
    "arrow_function": ("=>", 0),
    "statement_block": ("{}", 0),
    "if_statement": ("if ...", 1),
    "for_statement": ("for ...", 2),
    "while_statement": ("while ...", 1),
    "do_statement": ("do ... while ...", 1),
    "variable_declarator": ("=", 1),
    "assignment_expression": ("=", 1),
    "member_expression": (".", 0),
    "parenthesized_expression": ("( )", 0),
    "new_expression": ("new ...", 0),
    "return_statement": ("return ...", 1),
    "throw_statement": ("return ...", 1),
    "subscript_expression": ("[ ... ]", 0),
}
_GLYPH_OPERATORS: Dict[str, int] = {
    "augmented_assignment_expression": 1,
    "binary_expression": 0,
    "unary_expression": 0,
    "update_expression": 0,
}
_OPERAND_TYPES = {
    "identifier", "property_identifier", "private_property_identifier",
    "shorthand_property_identifier", "number", "string", "regex",
    "true", "false", "null", "undefined",
}
_IDENTIFIER_TYPES = {"identifier", "shorthand_property_identifier"}
_ASSIGNMENT_TYPES = {
    "variable_declarator", "assignment_expression", "augmented_assignment_expression",
}
_CONDITION_OWNERS = {"if_statement", "while_statement", "do_statement", "switch_statement"}
_LOOP_TYPES = {"while_statement", "for_statement", "for_in_statement", "do_statement", "program"}


class Step(Enum):
    HANDLED = auto()
    DESCEND = auto()


def _text(node: Node) -> str:
    return node.text.decode("utf8").strip() if node.text is not None else ""


def _is_condition(node: Node) -> bool:
    parent = node.parent
    return parent is not None and parent.type in _CONDITION_OWNERS


def tally_node(node: Node, state: AnalysisState) -> None:
    """Record the operator/operand tokens a single node contributes."""
    tally, counters = state.tally, state.counters
    kind = node.type

    if kind in _FIXED_OPERATORS:
        if kind == "parenthesized_expression" and _is_condition(node):
            return
        token, weight = _FIXED_OPERATORS[kind]
        tally.record_operator(token)
        counters.statement_operator_count += weight
    elif kind in _GLYPH_OPERATORS:
        tally.record_operator(_text(node.child_by_field_name("operator")))
        counters.statement_operator_count += _GLYPH_OPERATORS[kind]
    elif kind in _OPERAND_TYPES:
        tally.record_operand(_text(node))
        if kind in _IDENTIFIER_TYPES:
            state.identifiers.observe(_text(node), state.scopes.current())


def _switch_branches(node: Node) -> int:
    body = node.child_by_field_name("body")
    if body is None:
        return 0
    cases = sum(1 for c in body.named_children if c.type == "switch_case")
    return max(cases - 1, 0)


def _open_scope(node: Node, state: AnalysisState) -> Optional[int]:
    """Push the frame a construct opens; return the if-depth it added."""
    if node.type == "if_statement":
        depth = 1
        state.scopes.enter(ControlCondition())
    elif node.type == "switch_statement":
        depth = _switch_branches(node)
        state.scopes.enter(ControlCondition())
    elif node.type in _LOOP_TYPES:
        depth = 0
        state.scopes.enter(Block())
    else:
        return None
    state.counters.enter_decision(depth)
    return depth


def _walk_call(node: Node, state: AnalysisState) -> Iterator[Node]:
    # tree-sitter-javascript has no such field; grammars that extend it
    # (TypeScript) attach explicit type arguments to the same node type.
    if node.child_by_field_name("type_arguments") is not None:
        raise TypeArgumentsNotSupported(_text(node))

    scope = state.scopes.current()
    if isinstance(scope, Block):
        state.counters.statement_operator_count += 1

    callee = node.child_by_field_name("function")
    parts = callee.named_children
    if parts:
        name_node = parts[-1]
        tally_node(callee, state)
        yield from parts[:-1]
    else:
        name_node = callee
    name = _text(name_node)

    opened_output = False
    if name == PRINT_FUNCTION:
        state.scopes.enter(Assignment(OUTPUT_SENTINEL))
        opened_output = True
    elif name == PROMPT_FUNCTION and isinstance(scope, Assignment):
        state.identifiers.observe(INPUT_SENTINEL, scope)

    state.tally.record_operator(f"{name}()")

    arguments = node.child_by_field_name("arguments")
    if arguments is not None:
        yield from arguments.named_children

    if opened_output:
        state.scopes.exit()


def _walk_assignment(node: Node, state: AnalysisState) -> Iterator[Node]:
    if node.type == "variable_declarator":
        left = node.child_by_field_name("name")
        right = node.child_by_field_name("value")
    else:
        left = node.child_by_field_name("left")
        right = node.child_by_field_name("right")

    if left.type != "identifier":
        raise UnsupportedAssignmentTarget(_text(left), left.type)
    target = _text(left)

    # declaration without initializer
    if right is None:
        state.tally.record_operand(target)
        state.identifiers.observe(target, state.scopes.current())
        return

    tally_node(node, state)
    state.tally.record_operand(target)
    state.identifiers.observe(target, state.scopes.current())

    state.scopes.enter(Assignment(target))
    yield right
    state.scopes.exit()


def _descend(node: Node, state: AnalysisState) -> Iterator[Node]:
    depth = _open_scope(node, state)
    state.counters.update_max_depth()

    tally_node(node, state)
    yield from node.named_children

    if depth is not None:
        state.counters.leave_decision(depth)
        state.scopes.exit()


def dispatch(node: Node, state: AnalysisState) -> Tuple[Step, Iterator[Node]]:
    """
    Pick the visitor of ``node``.

    The visitor is a generator: it updates ``state`` and yields, in order,
    the children the walk must visit before it resumes. Code after the last
    yield runs once the whole subtree has been visited.
    """
    if node.type == "call_expression":
        return Step.HANDLED, _walk_call(node, state)
    if node.type in _ASSIGNMENT_TYPES:
        return Step.HANDLED, _walk_assignment(node, state)
    return Step.DESCEND, _descend(node, state)


def _visitor(node: Node, state: AnalysisState) -> Iterator[Node]:
    logger.debug("%s%s", "  " * len(state.scopes), node.type)
    _, visitor = dispatch(node, state)
    return visitor


def walk(node: Node, state: AnalysisState) -> None:
    """
    Visit ``node`` and its subtree once, mutating ``state`` in place.

    Pending visitors live on an explicit stack, so the nesting depth of the
    tree is not limited by the interpreter's recursion limit.

    Args:
        node (Node): Syntax node, normally the ``program`` root.
        state (AnalysisState): Private state of the current run.
    """
    stack = [_visitor(node, state)]
    while stack:
        child = next(stack[-1], None)
        if child is None:
            stack.pop()
        else:
            stack.append(_visitor(child, state))
