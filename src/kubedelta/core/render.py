#!/usr/bin/env python3
"""
KUBEDELTA RENDERER
------------------
Turns Nodes back into short human-readable text for the before/after
fields of a DiffEntry. Scalars are printed inline, containers are dumped as
block YAML with the standard Kubernetes indentation.
"""

import io
from typing import Any, Optional

from ruamel.yaml import YAML

from kubedelta.core.models import Absent, Leaf, Mapping, Node, Sequence


class NodeRenderer:
    """Renders leaves inline and subtrees as YAML blocks."""

    def __init__(self, indent: int = 2):
        self.yaml = YAML(typ='rt')
        # Standard K8s: 2 spaces, sequences indented 4 (offset 2)
        self.yaml.indent(mapping=indent, sequence=indent + 2, offset=indent)
        self.yaml.default_flow_style = False
        self.yaml.width = 4096

    def render_scalar(self, value: Any) -> str:
        if value is None:
            return "null"
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    def render(self, node: Node) -> Optional[str]:
        """Returns the text for a node, or None when nothing is there."""
        if isinstance(node, Absent):
            return None
        if isinstance(node, Leaf):
            return self.render_scalar(node.value)

        stream = io.StringIO()
        self.yaml.dump(to_python(node), stream)
        return stream.getvalue().rstrip("\n")


def to_python(node: Node) -> Any:
    """Converts a Node tree back to plain dicts, lists and scalars."""
    if isinstance(node, Mapping):
        return {key: to_python(value) for key, value in node.entries.items()}
    if isinstance(node, Sequence):
        return [to_python(item) for item in node.items]
    if isinstance(node, Leaf):
        return node.value
    raise TypeError(f"Unsupported node type: {type(node).__name__}")


_default_renderer = NodeRenderer()


def render_node(node: Node) -> Optional[str]:
    """Module-level shortcut using the default 2-space renderer."""
    return _default_renderer.render(node)
