"""Unit tests for node classification and descriptor loading."""

from __future__ import annotations

import itertools
import typing as typ

import pytest

from refdoc_pages.nodes import (
    Category,
    ModuleNode,
    NodeDescriptorError,
    NodeType,
    categorize_modules,
    filter_list,
    load_module_nodes,
)

if typ.TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def mixed_nodes() -> list[ModuleNode]:
    """Return every node type interleaved to exercise the stable partition."""
    return [
        ModuleNode(id="Enumerable", type=NodeType.PROTOCOL),
        ModuleNode(id="Enum"),
        ModuleNode(id="ArgumentError", type=NodeType.EXCEPTION),
        ModuleNode(id="Enumerable.List", type=NodeType.IMPL),
        ModuleNode(id="List"),
        ModuleNode(id="KeyError", type=NodeType.EXCEPTION),
        ModuleNode(id="Inspect", type=NodeType.PROTOCOL),
    ]


def test_categories_preserve_input_order(mixed_nodes: list[ModuleNode]) -> None:
    categories = categorize_modules(mixed_nodes)
    assert [node.id for node in categories.modules] == ["Enum", "List"]
    assert [node.id for node in categories.exceptions] == ["ArgumentError", "KeyError"]
    assert [node.id for node in categories.protocols] == ["Enumerable", "Inspect"]


def test_categories_are_disjoint_and_exclude_impls(
    mixed_nodes: list[ModuleNode],
) -> None:
    """Every node lands in at most one category; implementations in none."""
    categories = categorize_modules(mixed_nodes)
    groups = [categories.modules, categories.exceptions, categories.protocols]
    for left, right in itertools.combinations(groups, 2):
        assert not {node.id for node in left} & {node.id for node in right}

    impls = [node for node in mixed_nodes if node.type is NodeType.IMPL]
    classified = categories.classified()
    assert {node.id for node in classified} | {node.id for node in impls} == {
        node.id for node in mixed_nodes
    }
    assert len(classified) + len(impls) == len(mixed_nodes)


def test_filter_list_accepts_category_names(mixed_nodes: list[ModuleNode]) -> None:
    assert filter_list("exceptions", mixed_nodes) == filter_list(
        Category.EXCEPTIONS, mixed_nodes
    )
    with pytest.raises(ValueError, match="impls"):
        filter_list("impls", mixed_nodes)


def test_sidebar_entries_skip_empty_categories() -> None:
    categories = categorize_modules(
        [ModuleNode(id="Demo"), ModuleNode(id="Demo.Error", type=NodeType.EXCEPTION)]
    )
    entries = categories.sidebar_entries()
    assert [entry["id"] for entry in entries] == ["modules", "exceptions"]
    assert [node.id for node in entries[1]["items"]] == ["Demo.Error"]


def test_empty_node_list_has_no_sidebar_entries() -> None:
    assert categorize_modules([]).sidebar_entries() == []


def test_load_module_nodes_reads_yaml(tmp_path: Path) -> None:
    path = tmp_path / "modules.yaml"
    path.write_text(
        "- id: Demo\n"
        "  moduledoc: Entry point.\n"
        "  source: https://example.invalid/demo.ex\n"
        "  docs:\n"
        "    - name: run\n"
        "      arity: 1\n"
        "      signature: run(opts)\n"
        "    - name: fetch\n"
        "      arity: 2\n"
        "      kind: macro\n"
        "- id: Demo.Error\n"
        "  type: exception\n",
        encoding="utf-8",
    )

    nodes = load_module_nodes(path)

    assert [node.id for node in nodes] == ["Demo", "Demo.Error"]
    assert nodes[0].type is NodeType.MODULE
    assert nodes[1].type is NodeType.EXCEPTION
    assert [doc.id for doc in nodes[0].docs] == ["run/1", "fetch/2"]
    assert nodes[0].docs[1].kind == "macro"
    assert nodes[0].source == "https://example.invalid/demo.ex"


def test_load_module_nodes_reads_json(tmp_path: Path) -> None:
    path = tmp_path / "modules.json"
    path.write_text(
        '{"modules": [{"id": "Inspect", "type": "protocol"},'
        ' {"id": "Inspect.List", "type": "impl"}]}',
        encoding="utf-8",
    )

    nodes = load_module_nodes(path)

    assert [node.type for node in nodes] == [NodeType.PROTOCOL, NodeType.IMPL]


@pytest.mark.parametrize(
    ("body", "message"),
    [
        ("- id: Demo\n  type: behaviour\n", "unknown type 'behaviour'"),
        ("- moduledoc: nameless\n", "missing 'id'"),
        ("- id: Demo\n  docs:\n    - name: run\n", "integer 'arity'"),
        ("just text\n", "list of mappings"),
    ],
)
def test_load_module_nodes_rejects_malformed_descriptors(
    tmp_path: Path, body: str, message: str
) -> None:
    path = tmp_path / "modules.yaml"
    path.write_text(body, encoding="utf-8")
    with pytest.raises(NodeDescriptorError, match=message):
        load_module_nodes(path)
