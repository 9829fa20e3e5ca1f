#!/usr/bin/env python3
"""
KUBEDELTA DIFF ENGINE - Recursive Tree Comparison
-------------------------------------------------
Walks two Node trees in lockstep and yields a DiffEntry only at the points
where values actually diverge, instead of re-printing whole subtrees.

Rules:
1. Mapping vs Mapping: keys of the LEFT side drive the walk. A key missing on
   the right is REMOVED (with its whole subtree rendered); an unequal pair of
   leaves is MODIFIED; anything else recurses. Keys that exist only on the
   right are reported only when `symmetric=True`.
2. Sequence vs Sequence: indexes 0..max(len) are compared, the shorter side
   reads as ABSENT past its end.
3. Container vs Leaf: the container's content is enumerated entry by entry as
   REMOVED (left container) or ADDED (right container).
4. Mapping vs Sequence: one MODIFIED entry with both subtrees rendered.
"""

import math
from typing import Iterator, Optional

from kubedelta.core.models import (
    Absent, ChangeKind, DiffEntry, Leaf, Mapping, Node, Sequence,
)
from kubedelta.core.render import NodeRenderer


def is_leaf(node: Node) -> bool:
    """Leaf (including Absent) is atomic; Sequence and Mapping are containers."""
    return isinstance(node, Leaf)


def equal(left: Node, right: Node) -> bool:
    """
    Structural equality: same variant, then
    - Leaf: same scalar type and equal value (so `true` != `1`, `1` != `1.0`)
    - Sequence: same length and pairwise equal items
    - Mapping: same key set and equal values per key
    """
    if left is right:
        return True
    if type(left) is not type(right):
        return False

    if isinstance(left, Mapping):
        if left.entries.keys() != right.entries.keys():
            return False
        return all(equal(value, right.entries[key]) for key, value in left.entries.items())

    if isinstance(left, Sequence):
        if len(left) != len(right):
            return False
        return all(equal(a, b) for a, b in zip(left.items, right.items))

    if isinstance(left, Absent):
        return True

    return _scalar_equal(left.value, right.value)


def _scalar_equal(a, b) -> bool:
    if type(a) is not type(b):
        return False
    if isinstance(a, float) and math.isnan(a) and math.isnan(b):
        return True
    return a == b


class DiffEngine:
    """
    Stateless recursive differ. One instance may be reused for any number of
    document pairs.
    """

    def __init__(self, renderer: Optional[NodeRenderer] = None, symmetric: bool = False):
        self.renderer = renderer or NodeRenderer()
        self.symmetric = symmetric

    def diff(self, left: Node, right: Node, path: str = "") -> Iterator[DiffEntry]:
        """Lazily yields the differences between left and right below `path`."""
        return self._diff(left, right, path, "")

    def _diff(self, left: Node, right: Node, path: str, key: str) -> Iterator[DiffEntry]:
        if isinstance(left, Mapping) and isinstance(right, Mapping):
            yield from self._diff_mappings(left, right, path)
        elif isinstance(left, Sequence) and isinstance(right, Sequence):
            yield from self._diff_sequences(left, right, path)
        elif is_leaf(left) and is_leaf(right):
            if not equal(left, right):
                yield self._entry(path, key, left, right)
        elif is_leaf(left):
            yield from self._enumerate(right, left, path, key, ChangeKind.ADDED)
        elif is_leaf(right):
            yield from self._enumerate(left, right, path, key, ChangeKind.REMOVED)
        else:
            # Mapping on one side, Sequence on the other
            yield self._entry(path, key, left, right)

    def _diff_mappings(self, left: Mapping, right: Mapping, path: str) -> Iterator[DiffEntry]:
        for key, left_value in left.entries.items():
            current_path = f"{path}.{key}"
            right_value = right.get(key)

            if isinstance(right_value, Absent):
                yield self._entry(current_path, key, left_value, right_value)
            elif not equal(left_value, right_value):
                if is_leaf(left_value) and is_leaf(right_value):
                    yield self._entry(current_path, key, left_value, right_value)
                else:
                    yield from self._diff(left_value, right_value, current_path, key)

        if self.symmetric:
            for key, right_value in right.entries.items():
                if key not in left.entries:
                    yield self._entry(f"{path}.{key}", key, left.get(key), right_value)

    def _diff_sequences(self, left: Sequence, right: Sequence, path: str) -> Iterator[DiffEntry]:
        for i in range(max(len(left), len(right))):
            item1, item2 = left.get(i), right.get(i)
            if equal(item1, item2):
                continue

            index = f"[{i}]"
            if is_leaf(item1) and is_leaf(item2):
                yield self._entry(path + index, index, item1, item2)
            else:
                yield from self._diff(item1, item2, path + index, index)

    def _enumerate(self, container: Node, other: Leaf, path: str, key: str,
                   kind: ChangeKind) -> Iterator[DiffEntry]:
        """
        Reports every key/index of `container` against a leaf counterpart that
        can supply no matching value.
        """
        if isinstance(container, Mapping):
            children = [(f"{path}.{k}", k, value) for k, value in container.entries.items()]
        else:
            children = [(f"{path}[{i}]", f"[{i}]", item) for i, item in enumerate(container.items)]

        if not children:
            # nothing to enumerate, report the empty container itself
            if kind is ChangeKind.ADDED:
                yield self._entry(path, key, other, container)
            else:
                yield self._entry(path, key, container, other)
            return

        for child_path, child_key, child in children:
            if isinstance(container, Sequence) and not is_leaf(child):
                yield from self._enumerate(child, other, child_path, child_key, kind)
            elif kind is ChangeKind.ADDED:
                yield DiffEntry(child_path, kind, after=self.renderer.render(child), key=child_key)
            else:
                yield DiffEntry(child_path, kind, before=self.renderer.render(child), key=child_key)

    def _entry(self, path: str, key: str, left: Node, right: Node) -> DiffEntry:
        if isinstance(right, Absent):
            kind = ChangeKind.REMOVED
        elif isinstance(left, Absent):
            kind = ChangeKind.ADDED
        else:
            kind = ChangeKind.MODIFIED
        return DiffEntry(
            path=path,
            kind=kind,
            before=self.renderer.render(left),
            after=self.renderer.render(right),
            key=key,
        )


def diff(left: Node, right: Node, path: str = "", symmetric: bool = False) -> Iterator[DiffEntry]:
    """Shortcut for DiffEngine(symmetric=symmetric).diff(left, right, path)."""
    return DiffEngine(symmetric=symmetric).diff(left, right, path)
