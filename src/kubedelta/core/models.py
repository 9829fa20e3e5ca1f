#!/usr/bin/env python3
"""
KUBEDELTA CORE MODELS
---------------------
Defines the fundamental data structures used across the KubeDelta engine.
A decoded manifest is held as a tree of tagged Nodes so the diff engine
never has to guess at runtime types.

Node Hierarchy:
Node (base)
├── Leaf        (scalar or null)
│   └── Absent  (no value at this position)
├── Sequence    (ordered, index addressed)
└── Mapping     (string keys, order irrelevant)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class Node:
    """Base class for every position in a decoded document tree."""


@dataclass(frozen=True)
class Leaf(Node):
    """
    An atomic scalar (string, number, boolean, timestamp) or an explicit null.
    """
    value: Any = None


@dataclass(frozen=True)
class Absent(Leaf):
    """
    Marks a position with no value at all: an index past the end of a
    sequence or a key missing from a mapping. Never equal to Leaf(None).
    """


ABSENT = Absent()


@dataclass(frozen=True)
class Sequence(Node):
    items: Tuple[Node, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def get(self, index: int) -> Node:
        """Returns the item at index, or ABSENT when out of range."""
        if 0 <= index < len(self.items):
            return self.items[index]
        return ABSENT


@dataclass(frozen=True)
class Mapping(Node):
    entries: Dict[str, Node] = field(default_factory=dict)

    def __hash__(self) -> int:
        return hash(frozenset(self.entries))

    def get(self, key: str) -> Node:
        """Returns the value stored under key, or ABSENT."""
        return self.entries.get(key, ABSENT)


@dataclass(frozen=True)
class DocumentKey:
    """
    The identity used to match documents across the two inputs.
    Rendered as 'kind/name' (e.g. 'Deployment/app').
    """
    kind: str
    name: str

    def __str__(self) -> str:
        return f"{self.kind}/{self.name}"


class ChangeKind(Enum):
    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"


@dataclass(frozen=True)
class DiffEntry:
    """
    A single reported change inside one document.
    """
    path: str                       # e.g. '.spec.containers[0].image'
    kind: ChangeKind
    before: Optional[str] = None    # Rendered left value, None when added
    after: Optional[str] = None     # Rendered right value, None when removed
    key: str = field(default="", compare=False)  # Last path segment: mapping key or "[i]"


class ReportStatus(Enum):
    COMPARED = "compared"
    MISSING_IN_RIGHT = "missing_in_right"
    MISSING_IN_LEFT = "missing_in_left"


@dataclass(frozen=True)
class DocumentReport:
    """
    Outcome for one DocumentKey: either the diff entries of a matched pair,
    or a marker that the document exists on one side only.
    """
    key: DocumentKey
    status: ReportStatus
    entries: Tuple[DiffEntry, ...] = ()

    @property
    def has_changes(self) -> bool:
        return self.status is not ReportStatus.COMPARED or bool(self.entries)


# A DocumentSet maps each identity to the root node of its document.
DocumentSet = Dict[DocumentKey, Node]


def to_node(obj: Any) -> Node:
    """
    Converts a generic decoded value (dict, list, scalar) into a Node tree.
    Non-string mapping keys (e.g. integers) are stringified.
    """
    if isinstance(obj, Node):
        return obj
    if isinstance(obj, dict):
        return Mapping({str(key): to_node(value) for key, value in obj.items()})
    if isinstance(obj, (list, tuple)):
        return Sequence(tuple(to_node(item) for item in obj))
    return Leaf(obj)
