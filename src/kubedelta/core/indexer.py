#!/usr/bin/env python3
"""
KUBEDELTA INDEXER - Document Identity Map
-----------------------------------------
Groups the documents of one input by their (kind, metadata.name) identity so
the comparator can match objects across files regardless of their order.
"""

import logging
from typing import Any, Iterable, Optional

from kubedelta.core.errors import KeyCollisionError, MalformedDocumentError
from kubedelta.core.models import DocumentKey, DocumentSet, Leaf, Mapping, Node, to_node

logger = logging.getLogger("kubedelta.indexer")


class DocumentIndexer:
    """
    Builds a DocumentSet from a sequence of decoded documents.

    Lenient (default): documents without a usable identity are skipped and
    duplicate keys are overwritten by the later document, each with a warning.
    Strict: the same situations raise MalformedDocumentError / KeyCollisionError.
    """

    def __init__(self, strict: bool = False):
        self.strict = strict

    def index(self, documents: Iterable[Any]) -> DocumentSet:
        result: DocumentSet = {}
        for position, doc in enumerate(documents):
            node = to_node(doc)
            if isinstance(node, Leaf) and node.value is None:
                # empty document between two '---' markers
                logger.debug(f"Ignoring empty document #{position}")
                continue

            key = self._extract_key(node, position)
            if key is None:
                continue

            if key in result:
                if self.strict:
                    raise KeyCollisionError(key)
                logger.warning(f"Duplicate object {key} at document #{position}; keeping the later one")
            result[key] = node
        return result

    def _extract_key(self, doc: Node, position: int) -> Optional[DocumentKey]:
        if not isinstance(doc, Mapping):
            return self._reject("root is not a mapping", position)

        kind = doc.get("kind")
        if not isinstance(kind, Leaf) or kind.value is None or kind.value == "":
            return self._reject("missing 'kind'", position)

        metadata = doc.get("metadata")
        if not isinstance(metadata, Mapping):
            return self._reject("missing 'metadata' mapping", position)

        name = metadata.get("name")
        if not isinstance(name, Leaf) or not isinstance(name.value, str):
            return self._reject("'metadata.name' is missing or not a string", position)
        if not name.value:
            return self._reject("'metadata.name' is empty", position)

        return DocumentKey(kind=self._scalar_text(kind.value), name=name.value)

    def _scalar_text(self, value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    def _reject(self, reason: str, position: int) -> None:
        if self.strict:
            raise MalformedDocumentError(reason, position)
        logger.warning(f"Skipping document #{position}: {reason}")
        return None


def index_documents(documents: Iterable[Any], strict: bool = False) -> DocumentSet:
    """Functional shortcut for DocumentIndexer(strict).index(documents)."""
    return DocumentIndexer(strict=strict).index(documents)
