"""Resolve an Okra AST into plain Python values."""

from __future__ import annotations

from typing import TypeAlias

from okrapy.ast import AstBoolean, AstDocument, AstList, AstNumber, AstString, AstValue

Value: TypeAlias = "str | float | bool | list[Value] | dict[str, Value]"


def resolve(node: AstDocument | AstValue) -> Value:
    """Convert a document (or any AST value) into str/float/bool/list/dict.

    Erroneous documents resolve too; whatever partial tree the parser kept is
    used as-is. Duplicate keys overwrite earlier ones.
    """
    match node:
        case AstDocument(root=root):
            return resolve_list(root)
        case AstList():
            return resolve_list(node)
        case AstString(value=value) | AstNumber(value=value) | AstBoolean(value=value):
            return value
        case _:
            raise TypeError(f"Cannot resolve {type(node).__name__}")


def resolve_list(node: AstList) -> list[Value] | dict[str, Value]:
    if node.associative:
        mapping: dict[str, Value] = {}
        for entry in node.entries:
            if entry.key is None:
                continue
            mapping[entry.key.value] = resolve(entry.value)
        return mapping

    return [resolve(entry.value) for entry in node.entries]
