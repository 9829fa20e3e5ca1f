#!/usr/bin/env python3
"""
KUBEDELTA DECODER - YAML Stream to Node Trees
---------------------------------------------
Reads a multi-document manifest file and converts every document into the
tagged Node model, so everything downstream matches on Node variants.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from ruamel.yaml import YAML, YAMLError

from kubedelta.core.errors import DecodeError
from kubedelta.core.models import Node, to_node

logger = logging.getLogger("kubedelta.decoder")


class ManifestDecoder:
    """
    Decodes YAML streams with ruamel.yaml's safe loader.

    In lenient mode a syntax error part-way through the stream keeps the
    documents decoded so far and logs a warning. Strict mode raises DecodeError.
    """

    def __init__(self, strict: bool = False):
        self.strict = strict
        self.yaml = YAML(typ='safe')

    def read(self, file_path: Union[str, Path]) -> str:
        """Reads a manifest file (BOM-aware). Undecodable bytes raise DecodeError."""
        try:
            return Path(file_path).read_text(encoding='utf-8-sig')
        except UnicodeDecodeError as e:
            raise DecodeError(f"not valid UTF-8: {e}", str(file_path))

    def decode(self, text: str, source: Optional[str] = None) -> List[Node]:
        documents: List[Node] = []
        stream = self.yaml.load_all(text)
        try:
            for doc in stream:
                documents.append(to_node(doc))
        except YAMLError as e:
            label = source or "<input>"
            if self.strict:
                raise DecodeError(f"invalid YAML after document #{len(documents)}: {e}", source)
            logger.warning(f"Stopped decoding {label} after {len(documents)} document(s): {e}")
        return documents

    def load_file(self, file_path: Union[str, Path]) -> List[Node]:
        return self.decode(self.read(file_path), source=str(file_path))
