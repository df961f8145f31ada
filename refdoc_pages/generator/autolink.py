"""Rewrite backtick references to documented entities into markdown links.

Autolinking runs on markdown source, before conversion to HTML. A reference is
only linked when its target is part of the node list being rendered, so links
never point at pages that are not generated. Fenced code blocks and references
that are already wrapped in a markdown link are left untouched.

Examples
--------
>>> from refdoc_pages.nodes import FunctionNode, ModuleNode
>>> nodes = [ModuleNode(id="Enum", docs=(FunctionNode("map/2", "map", 2),))]
>>> project_doc("See `Enum` and `Enum.map/2`.", nodes)
'See [`Enum`](Enum.html) and [`Enum.map/2`](Enum.html#map/2).'
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from refdoc_pages.nodes import ModuleNode

_MODULE = r"[A-Z][A-Za-z0-9_]*(?:\.[A-Z][A-Za-z0-9_]*)*"
_FUNCTION = r"[a-z_][A-Za-z0-9_]*[!?]?/\d+"

FENCED_BLOCK_PATTERN = re.compile(r"^([`~]{3,})[^\n]*\n.*?^\1[ \t]*$", re.DOTALL | re.MULTILINE)
# Link spans are consumed whole; code spans inside them are never rewritten.
INLINE_SPAN_PATTERN = re.compile(
    r"(?P<link>\[[^\]]*\]\([^)]*\))|`(?P<code>[^`\n]+)`"
)
REMOTE_FUNCTION_PATTERN = re.compile(rf"(?P<module>{_MODULE})\.(?P<function>{_FUNCTION})")
MODULE_PATTERN = re.compile(rf"(?P<module>{_MODULE})")
LOCAL_FUNCTION_PATTERN = re.compile(rf"(?P<function>{_FUNCTION})")


def _index(nodes: cabc.Iterable[ModuleNode]) -> dict[str, frozenset[str]]:
    """Map each node id to the ids of its documented members."""
    return {node.id: node.member_ids() for node in nodes}


def _outside_fences(text: str, rewrite: cabc.Callable[[str], str]) -> str:
    """Apply ``rewrite`` to every part of ``text`` outside fenced code blocks."""
    parts: list[str] = []
    cursor = 0
    for match in FENCED_BLOCK_PATTERN.finditer(text):
        parts.append(rewrite(text[cursor : match.start()]))
        parts.append(match.group(0))
        cursor = match.end()
    parts.append(rewrite(text[cursor:]))
    return "".join(parts)


def _link_target(
    reference: str, known: dict[str, frozenset[str]], local: frozenset[str] | None
) -> str | None:
    """Return the href for ``reference`` or ``None`` when it names nothing known."""
    if match := REMOTE_FUNCTION_PATTERN.fullmatch(reference):
        module, function = match.group("module", "function")
        if function in known.get(module, ()):
            return f"{module}.html#{function}"
        return None
    if MODULE_PATTERN.fullmatch(reference):
        return f"{reference}.html" if reference in known else None
    if LOCAL_FUNCTION_PATTERN.fullmatch(reference):
        return f"#{reference}" if local is not None and reference in local else None
    return None


def _link_text(
    text: str, known: dict[str, frozenset[str]], local: frozenset[str] | None
) -> str:
    def _rewrite(match: re.Match[str]) -> str:
        reference = match.group("code")
        if reference is None:
            return match.group(0)
        href = _link_target(reference, known, local)
        if href is None:
            return match.group(0)
        return f"[`{reference}`]({href})"

    return INLINE_SPAN_PATTERN.sub(_rewrite, text)


def project_doc(text: str, nodes: cabc.Iterable[ModuleNode]) -> str:
    """Link references to known modules and their members in ``text``."""
    known = _index(nodes)
    return _outside_fences(text, lambda chunk: _link_text(chunk, known, None))


def link_all(nodes: cabc.Iterable[ModuleNode]) -> list[ModuleNode]:
    """Return copies of ``nodes`` with every docstring autolinked.

    Besides the references handled by :func:`project_doc`, bare ``name/arity``
    references inside a node's docs link to the matching anchor on the node's
    own page.
    """
    snapshot = list(nodes)
    known = _index(snapshot)
    linked: list[ModuleNode] = []
    for node in snapshot:
        local = known[node.id]

        def _rewrite(text: str | None, local: frozenset[str] = local) -> str | None:
            if not text:
                return text
            return _outside_fences(text, lambda chunk: _link_text(chunk, known, local))

        docs = tuple(dc.replace(doc, doc=_rewrite(doc.doc)) for doc in node.docs)
        linked.append(dc.replace(node, moduledoc=_rewrite(node.moduledoc), docs=docs))
    return linked


__all__ = ["link_all", "project_doc"]
