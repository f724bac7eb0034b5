"""
Python import extraction using Tree-sitter AST.

Walks statement sequences with an explicit stack: every compound statement that owns a
nested block (def/class bodies, if/elif/else, loops with their else branch,
try/except/else/finally, with, match/case) is visited at any depth.
Expressions are never inspected, so imports hidden in lambdas or
comprehensions are not reported.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Set

from tree_sitter import Node

from .parsing import PythonDocument
from .types import DirectImport, FromImport, ImportRef, ModuleBase, module_base

# Statements and clauses that own nested statement blocks.
_COMPOUND = frozenset({
    "function_definition",  # def / async def
    "class_definition",
    "decorated_definition",
    "if_statement",
    "elif_clause",
    "else_clause",
    "for_statement",  # for / async for
    "while_statement",
    "try_statement",
    "except_clause",
    "except_group_clause",
    "finally_clause",
    "with_statement",  # with / async with
    "match_statement",
    "case_clause",
})


def extract_imports(doc: PythonDocument) -> List[ImportRef]:
    """All import references of the document, in source order."""
    refs: List[ImportRef] = []
    # explicit stack: indentation depth accepted by tree-sitter is unbounded
    stack: List[Node] = [doc.root_node]
    while stack:
        node = stack.pop()
        kind = node.type
        if kind == "import_statement":
            refs.extend(_direct_imports(doc, node))
        elif kind == "import_from_statement":
            refs.append(_from_import(doc, node))
        elif kind == "future_import_statement":
            refs.append(FromImport("__future__", 0, _imported_names(doc, node)))
        elif kind in ("module", "block"):
            stack.extend(reversed(node.named_children))
        elif kind in _COMPOUND:
            # only nested blocks and clauses; conditions, targets, decorators are skipped
            stack.extend(reversed([
                c for c in node.named_children
                if c.type == "block" or c.type in _COMPOUND
            ]))
    return refs


def _dotted(doc: PythonDocument, node: Node) -> str:
    # "a . b" is legal Python; rebuild the name from identifiers
    parts = [doc.get_node_text(c) for c in node.named_children if c.type == "identifier"]
    return ".".join(parts) if parts else doc.get_node_text(node).strip()


def _direct_imports(doc: PythonDocument, node: Node) -> List[DirectImport]:
    result: List[DirectImport] = []
    for name in node.children_by_field_name("name"):
        if name.type == "aliased_import":
            target = name.child_by_field_name("name")
            alias = name.child_by_field_name("alias")
            if target is None:
                continue
            result.append(DirectImport(
                _dotted(doc, target),
                doc.get_node_text(alias) if alias is not None else None,
            ))
        elif name.type == "dotted_name":
            result.append(DirectImport(_dotted(doc, name)))
    return result


def _from_import(doc: PythonDocument, node: Node) -> FromImport:
    module: Optional[str] = None
    level = 0
    source = node.child_by_field_name("module_name")
    if source is not None:
        if source.type == "relative_import":
            for child in source.named_children:
                if child.type == "import_prefix":
                    level = doc.get_node_text(child).count(".")
                elif child.type == "dotted_name":
                    module = _dotted(doc, child)
        else:
            module = _dotted(doc, source)
    return FromImport(module, level, _imported_names(doc, node))


def _imported_names(doc: PythonDocument, node: Node) -> tuple[str, ...]:
    if any(c.type == "wildcard_import" for c in node.named_children):
        return ("*",)
    names: List[str] = []
    for name in node.children_by_field_name("name"):
        if name.type == "aliased_import":
            target = name.child_by_field_name("name")
            if target is not None:
                names.append(_dotted(doc, target))
        else:
            names.append(_dotted(doc, name))
    return tuple(names)


def absolute_bases(refs: Iterable[ImportRef]) -> Set[ModuleBase]:
    """
    Module bases that are candidates for classification.

    Every direct import counts; from-imports only when absolute (level 0)
    and naming a module. Relative imports are local by construction.
    """
    bases: Set[ModuleBase] = set()
    for ref in refs:
        if isinstance(ref, DirectImport):
            if ref.module:
                bases.add(module_base(ref.module))
        elif ref.is_absolute:
            bases.add(module_base(ref.module))  # type: ignore[arg-type]
    return bases


__all__ = ["extract_imports", "absolute_bases"]
