from functools import lru_cache

import tree_sitter_javascript
from tree_sitter import Language, Node, Parser

from src.main.engine.errors import SourceSyntaxError


@lru_cache
def _get_parser() -> Parser:
    return Parser(Language(tree_sitter_javascript.language()))


def parse(code: str) -> Node:
    root = _get_parser().parse(code.encode("utf8")).root_node
    if root.has_error:
        raise SourceSyntaxError("JavaScript source does not parse cleanly")
    return root


def count_nodes(node: Node) -> int:
    total = 0
    stack = [node]
    while stack:
        current = stack.pop()
        total += 1
        stack.extend(current.children)
    return total
