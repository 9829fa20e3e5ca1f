#!/usr/bin/env python3
"""
KUBEDELTA ENGINE - The Orchestrator
-----------------------------------
Runs a comparison end to end: read both inputs, decode the YAML streams,
index the documents by identity, compare the two sets and summarise the
outcome for the CLI.
"""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from kubedelta.config import DiffConfig
from kubedelta.core.comparator import SetComparator
from kubedelta.core.differ import DiffEngine
from kubedelta.core.indexer import DocumentIndexer
from kubedelta.core.models import ChangeKind, DocumentReport, ReportStatus
from kubedelta.core.render import NodeRenderer
from kubedelta.loading.decoder import ManifestDecoder

logger = logging.getLogger("kubedelta.engine")


@dataclass
class ComparisonResult:
    """Everything the Reporter needs to render one run."""
    left_source: str
    right_source: str
    reports: List[DocumentReport] = field(default_factory=list)

    @property
    def has_differences(self) -> bool:
        return any(r.has_changes for r in self.reports)


class ComparisonEngine:
    """
    Principal orchestrator for comparing two manifest collections.
    Holds no state between runs other than its configured collaborators.
    """

    def __init__(self, config: Optional[DiffConfig] = None):
        self.config = config or DiffConfig()
        self.decoder = ManifestDecoder(strict=self.config.strict)
        self.indexer = DocumentIndexer(strict=self.config.strict)
        self.comparator = SetComparator(DiffEngine(
            renderer=NodeRenderer(indent=self.config.indent),
            symmetric=self.config.symmetric,
        ))

    def compare_texts(self, left_text: str, right_text: str,
                      left_source: str = "file 1", right_source: str = "file 2") -> ComparisonResult:
        left_set = self.indexer.index(self.decoder.decode(left_text, source=left_source))
        right_set = self.indexer.index(self.decoder.decode(right_text, source=right_source))
        logger.info(f"Indexed {len(left_set)} object(s) from {left_source}, {len(right_set)} from {right_source}")

        reports = self.comparator.compare_sets(left_set, right_set)
        return ComparisonResult(left_source, right_source, reports)

    def compare_files(self, left_path: Union[str, Path], right_path: Union[str, Path]) -> ComparisonResult:
        """
        Compares two manifest files. OSError (missing/unreadable file), DecodeError
        (not UTF-8) and strict-mode KubeDeltaError propagate to the caller.
        """
        try:
            left_text = self.decoder.read(left_path)
            right_text = self.decoder.read(right_path)
        except OSError as e:
            logger.error(f"Unable to read input: {e}")
            raise

        return self.compare_texts(left_text, right_text, str(left_path), str(right_path))

    def generate_summary(self, result: ComparisonResult) -> Dict[str, Any]:
        """Counts per document status and per change kind."""
        compared = [r for r in result.reports if r.status is ReportStatus.COMPARED]
        entries = [e for r in compared for e in r.entries]

        return {
            "total_objects": len(result.reports),
            "compared": len(compared),
            "changed": sum(1 for r in compared if r.entries),
            "missing_in_left": sum(1 for r in result.reports if r.status is ReportStatus.MISSING_IN_LEFT),
            "missing_in_right": sum(1 for r in result.reports if r.status is ReportStatus.MISSING_IN_RIGHT),
            "added": sum(1 for e in entries if e.kind is ChangeKind.ADDED),
            "removed": sum(1 for e in entries if e.kind is ChangeKind.REMOVED),
            "modified": sum(1 for e in entries if e.kind is ChangeKind.MODIFIED),
            "has_differences": result.has_differences,
            "summary_timestamp": time.strftime("%Y-%m-%d %H:%M:%S"),
        }
