"""Module descriptors and the rules that sort them into listing categories.

Descriptors are produced by an external source parser and handed to the
generator as :class:`ModuleNode` values. This module also loads them from a
YAML or JSON file and partitions them into the three navigation categories
(modules, exceptions, protocols). Protocol implementations belong to none of
the categories but still travel with the full node list so pages and autolinks
can reach them.

Examples
--------
>>> nodes = [
...     ModuleNode(id="Enum"),
...     ModuleNode(id="ArgumentError", type=NodeType.EXCEPTION),
...     ModuleNode(id="Enumerable", type=NodeType.PROTOCOL),
...     ModuleNode(id="Enumerable.List", type=NodeType.IMPL),
... ]
>>> categories = categorize_modules(nodes)
>>> [node.id for node in categories.modules]
['Enum']
>>> [entry["id"] for entry in categories.sidebar_entries()]
['modules', 'exceptions', 'protocols']
"""

from __future__ import annotations

import dataclasses as dc
import enum
import itertools
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

if typ.TYPE_CHECKING:
    import collections.abc as cabc


class NodeDescriptorError(ValueError):
    """Raised when a module descriptor file cannot be turned into nodes."""


class NodeType(enum.StrEnum):
    """Kind of documented entity."""

    MODULE = "module"
    EXCEPTION = "exception"
    PROTOCOL = "protocol"
    IMPL = "impl"


class Category(enum.StrEnum):
    """Listing group used by the sidebar and overview."""

    MODULES = "modules"
    EXCEPTIONS = "exceptions"
    PROTOCOLS = "protocols"


@dc.dataclass(slots=True, frozen=True)
class FunctionNode:
    """A documented member of a module (function, macro, callback or type)."""

    id: str
    name: str
    arity: int
    kind: str = "def"
    signature: str | None = None
    doc: str | None = None


@dc.dataclass(slots=True, frozen=True)
class ModuleNode:
    """One documented unit, rendered into ``<id>.html``."""

    id: str
    type: NodeType = NodeType.MODULE
    moduledoc: str | None = None
    docs: tuple[FunctionNode, ...] = ()
    source: str | None = None

    def member_ids(self) -> frozenset[str]:
        """Return the ``name/arity`` ids of every documented member."""
        return frozenset(doc.id for doc in self.docs)


def _is_module(node: ModuleNode) -> bool:
    return node.type not in (NodeType.EXCEPTION, NodeType.PROTOCOL, NodeType.IMPL)


def _is_exception(node: ModuleNode) -> bool:
    return node.type is NodeType.EXCEPTION


def _is_protocol(node: ModuleNode) -> bool:
    return node.type is NodeType.PROTOCOL


_PREDICATES: dict[Category, cabc.Callable[[ModuleNode], bool]] = {
    Category.MODULES: _is_module,
    Category.EXCEPTIONS: _is_exception,
    Category.PROTOCOLS: _is_protocol,
}


@dc.dataclass(slots=True, frozen=True)
class Categories:
    """Disjoint, order-preserving partition of the classified nodes."""

    modules: tuple[ModuleNode, ...] = ()
    exceptions: tuple[ModuleNode, ...] = ()
    protocols: tuple[ModuleNode, ...] = ()

    def items(self) -> list[tuple[Category, tuple[ModuleNode, ...]]]:
        """Return ``(category, nodes)`` pairs in sidebar order."""
        return [
            (Category.MODULES, self.modules),
            (Category.EXCEPTIONS, self.exceptions),
            (Category.PROTOCOLS, self.protocols),
        ]

    def classified(self) -> list[ModuleNode]:
        """Return every categorized node, modules first."""
        return list(itertools.chain(self.modules, self.exceptions, self.protocols))

    def sidebar_entries(self) -> list[dict[str, typ.Any]]:
        """Return ``{id, items}`` entries for the non-empty categories."""
        return [
            {"id": str(category), "items": list(nodes)}
            for category, nodes in self.items()
            if nodes
        ]


def filter_list(
    category: Category | str, nodes: cabc.Iterable[ModuleNode]
) -> list[ModuleNode]:
    """Return the nodes of ``nodes`` that belong to ``category``, in order."""
    predicate = _PREDICATES[Category(category)]
    return [node for node in nodes if predicate(node)]


def categorize_modules(nodes: cabc.Iterable[ModuleNode]) -> Categories:
    """Split ``nodes`` into modules, exceptions and protocols."""
    snapshot = list(nodes)
    return Categories(
        modules=tuple(filter_list(Category.MODULES, snapshot)),
        exceptions=tuple(filter_list(Category.EXCEPTIONS, snapshot)),
        protocols=tuple(filter_list(Category.PROTOCOLS, snapshot)),
    )


def load_module_nodes(path: Path) -> list[ModuleNode]:
    """Load module descriptors from a YAML or JSON list.

    Each entry is a mapping with an ``id`` and optional ``type`` (defaults to
    ``"module"``), ``moduledoc``, ``source`` and ``docs``. Member entries need
    ``name`` and ``arity``; their ``id`` defaults to ``name/arity``.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    NodeDescriptorError
        If the document is not a list or an entry is malformed.
    """
    if not path.exists():
        msg = f"Module descriptor file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or []
    if isinstance(loaded, dict):
        loaded = loaded.get("modules") or []
    if not isinstance(loaded, list):
        msg = "Module descriptors must be a list of mappings."
        raise NodeDescriptorError(msg)
    return [_build_module_node(index, payload) for index, payload in enumerate(loaded)]


def _build_module_node(index: int, payload: object) -> ModuleNode:
    """Build a ModuleNode from a single descriptor mapping."""
    if not isinstance(payload, dict):
        msg = f"Descriptor #{index} must be a mapping."
        raise NodeDescriptorError(msg)
    node_id = str(payload.get("id") or "").strip()
    if not node_id:
        msg = f"Descriptor #{index} is missing 'id'."
        raise NodeDescriptorError(msg)
    raw_type = str(payload.get("type") or NodeType.MODULE)
    try:
        node_type = NodeType(raw_type)
    except ValueError as exc:
        allowed = ", ".join(member.value for member in NodeType)
        msg = f"Descriptor '{node_id}' has unknown type '{raw_type}' (allowed: {allowed})."
        raise NodeDescriptorError(msg) from exc
    docs = tuple(
        _build_function_node(node_id, entry) for entry in payload.get("docs") or []
    )
    return ModuleNode(
        id=node_id,
        type=node_type,
        moduledoc=payload.get("moduledoc"),
        docs=docs,
        source=payload.get("source"),
    )


def _build_function_node(module_id: str, payload: object) -> FunctionNode:
    """Build a FunctionNode from a member mapping of ``module_id``."""
    match payload:
        case {"name": str() as name, "arity": int() as arity}:
            return FunctionNode(
                id=str(payload.get("id") or f"{name}/{arity}"),
                name=name,
                arity=arity,
                kind=str(payload.get("kind") or "def"),
                signature=payload.get("signature"),
                doc=payload.get("doc"),
            )
        case _:
            msg = f"Member of '{module_id}' needs a string 'name' and integer 'arity'."
            raise NodeDescriptorError(msg)


__all__ = [
    "Categories",
    "Category",
    "FunctionNode",
    "ModuleNode",
    "NodeDescriptorError",
    "NodeType",
    "categorize_modules",
    "filter_list",
    "load_module_nodes",
]
