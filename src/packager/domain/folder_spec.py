from __future__ import annotations

"""
Folder Specification Data Models.

Describes the directory layout generated inside a new package as an
immutable tagged tree: a Leaf names a single directory, a Branch names a
directory together with its ordered children. Also provides the parser
for the JSON form accepted from configuration files and the CLI.
"""

import json
from dataclasses import dataclass
from typing import Any, Tuple, Union

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Leaf:
    """
    A directory without declared children.

    Attributes:
        name: Single path segment of the directory.
    """
    name: str


@dataclass(frozen=True)
class Branch:
    """
    A directory with an ordered list of child nodes.

    Attributes:
        name: Single path segment of the directory.
        children: Child nodes, visited in this order.
    """
    name: str
    children: Tuple["Node", ...] = ()


Node = Union[Leaf, Branch]
FolderSpec = Tuple[Node, ...]

DEFAULT_FOLDERS: FolderSpec = (
    Leaf("Controllers"),
    Leaf("Facades"),
    Leaf("Models"),
    Leaf("Repositories"),
    Leaf("config"),
    Branch("database", (Leaf("migrations"),)),
    Branch("resources", (
        Branch("assets", (Leaf("js"), Leaf("sass"))),
        Branch("views", (Leaf("elements"),)),
    )),
)

# -----------------------------------------------------------------------------
# PARSING & SERIALIZATION
# -----------------------------------------------------------------------------

def parse_folder_spec(raw: Any) -> FolderSpec:
    """
    Build a FolderSpec from its JSON form.

    Strings are leaves; single-or-multi key objects map branch names to
    child lists. Object keys keep their insertion order. A JSON string is
    decoded first.

    Example:
        ["Controllers", {"database": ["migrations"]}]

    Raises:
        ValueError: Malformed structure or an invalid directory name.
    """
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ValueError(f"Folder specification is not valid JSON: {e}") from e

    if not isinstance(raw, list):
        raise ValueError(
            f"Folder specification must be a list, received {type(raw).__name__}."
        )
    return tuple(_parse_nodes(raw, path="$"))


def folder_spec_to_data(spec: FolderSpec) -> list:
    """Convert a FolderSpec back to its JSON-compatible form."""
    out: list = []
    for node in spec:
        if isinstance(node, Leaf):
            out.append(node.name)
        else:
            out.append({node.name: folder_spec_to_data(node.children)})
    return out


def _parse_nodes(items: list, path: str) -> list:
    nodes: list = []
    for i, item in enumerate(items):
        where = f"{path}[{i}]"
        if isinstance(item, str):
            nodes.append(Leaf(_check_name(item, where)))
        elif isinstance(item, dict):
            for key, children in item.items():
                name = _check_name(key, where)
                if not isinstance(children, list):
                    raise ValueError(f"Children of '{name}' at {where} must be a list.")
                nodes.append(Branch(name, tuple(_parse_nodes(children, f"{where}.{name}"))))
        else:
            raise ValueError(
                f"Invalid folder entry at {where}: expected str or object, "
                f"received {type(item).__name__}."
            )
    return nodes


def _check_name(name: Any, where: str) -> str:
    if not isinstance(name, str):
        raise ValueError(f"Folder name at {where} must be a string.")
    n = name.strip()
    if not n or n in (".", ".."):
        raise ValueError(f"Invalid folder name '{name}' at {where}.")
    if "/" in n or "\\" in n:
        raise ValueError(f"Folder name '{name}' at {where} must be a single path segment.")
    return n
