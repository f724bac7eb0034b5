"""
Tree-sitter infrastructure for Python sources.
Provides grammar loading and a thin document wrapper around the parsed tree.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Iterator, List, Optional

from tree_sitter import Language, Node, Parser, Tree

from .errors import ParseError

# Python 2 statements the grammar still accepts; Python 3 rejects them.
_LEGACY_STATEMENTS = frozenset({"print_statement", "exec_statement"})


@lru_cache(maxsize=1)
def python_language() -> Language:
    import tree_sitter_python as tspython
    return Language(tspython.language())


class PythonDocument:
    """
    Wrapper for Tree-sitter parsed Python document.

    One document per file; the parser itself is not shared between threads.
    """

    def __init__(self, text: str, path: Optional[Path] = None):
        self.text = text
        self.path = path
        self._text_bytes = text.encode("utf-8")
        self.tree: Tree = Parser(python_language()).parse(self._text_bytes)

    @property
    def root_node(self) -> Node:
        """Get the root node of the parsed tree."""
        return self.tree.root_node

    def get_node_text(self, node: Node) -> str:
        """Get text content for a node."""
        return self._text_bytes[node.start_byte:node.end_byte].decode("utf-8")

    def walk_tree(self, start_node: Optional[Node] = None) -> Iterator[Node]:
        """
        Walk the tree using TreeCursor, depth-first, in document order.
        No Python recursion, so nesting depth is unbounded.
        """
        if start_node is None:
            start_node = self.root_node

        cursor = start_node.walk()
        visited_children = False

        while True:
            if not visited_children:
                yield cursor.node

                if not cursor.goto_first_child():
                    visited_children = True
            elif cursor.goto_next_sibling():
                visited_children = False
            elif not cursor.goto_parent():
                break
            else:
                visited_children = True

    def find_nodes_by_type(self, *node_types: str) -> List[Node]:
        """All nodes of the given types, in document order."""
        return [n for n in self.walk_tree() if n.type in node_types]

    def has_error(self) -> bool:
        """Check if the tree has any syntax errors."""
        return self.root_node.has_error

    def get_errors(self) -> List[Node]:
        """Get all ERROR and missing nodes in the tree."""
        return [n for n in self.walk_tree() if n.type == "ERROR" or n.is_missing]

    def get_legacy_statements(self) -> List[Node]:
        """Python 2 only statements (`print "x"`, `exec code`)."""
        return self.find_nodes_by_type(*_LEGACY_STATEMENTS)


def _position(node: Node) -> str:
    row, col = node.start_point
    return f"line {row + 1}, column {col + 1}"


def parse_source(text: str, path: Optional[Path] = None) -> PythonDocument:
    """
    Parse Python 3 source text.

    Raises:
        ParseError: if Tree-sitter could not build an error-free tree,
            or the source uses Python 2 only statements
    """
    doc = PythonDocument(text, path)
    if doc.has_error():
        errors = doc.get_errors()
        if errors:
            raise ParseError(path, f"invalid syntax at {_position(errors[0])}")
        raise ParseError(path, "invalid syntax")
    legacy = doc.get_legacy_statements()
    if legacy:
        raise ParseError(path, f"Python 2 {legacy[0].type.replace('_', ' ')} at {_position(legacy[0])}")
    return doc


__all__ = ["PythonDocument", "parse_source", "python_language"]
