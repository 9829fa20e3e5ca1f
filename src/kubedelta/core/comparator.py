#!/usr/bin/env python3
"""
KUBEDELTA SET COMPARATOR
------------------------
Matches the documents of two inputs by identity and drives the DiffEngine
for every pair. Two passes: left keys first (compared or missing on the
right), then right-only keys. Every key of the union is visited once.
"""

from typing import List, Optional

from kubedelta.core.differ import DiffEngine
from kubedelta.core.models import DocumentReport, DocumentSet, ReportStatus


class SetComparator:

    def __init__(self, engine: Optional[DiffEngine] = None):
        self.engine = engine or DiffEngine()

    def compare_sets(self, left: DocumentSet, right: DocumentSet) -> List[DocumentReport]:
        reports = []
        for key, left_doc in left.items():
            if key in right:
                entries = tuple(self.engine.diff(left_doc, right[key], ""))
                reports.append(DocumentReport(key, ReportStatus.COMPARED, entries))
            else:
                reports.append(DocumentReport(key, ReportStatus.MISSING_IN_RIGHT))

        for key in right:
            if key not in left:
                reports.append(DocumentReport(key, ReportStatus.MISSING_IN_LEFT))

        return reports


def compare_sets(left: DocumentSet, right: DocumentSet, symmetric: bool = False) -> List[DocumentReport]:
    return SetComparator(DiffEngine(symmetric=symmetric)).compare_sets(left, right)
