from __future__ import annotations

from typing import Optional

from ..roster.service import RosterService
from .matrix import MatrixAggregator
from .model import Matrix, Reconciliation
from .reconciler import RosterReconciler


class ReportService:
    """Read-only reports against the stored roster. Never mutates anything."""

    def __init__(self, roster: RosterService, reconciler: RosterReconciler, aggregator: MatrixAggregator):
        self._roster = roster
        self._reconciler = reconciler
        self._aggregator = aggregator

    def roster_status(self, code: Optional[str]) -> Reconciliation:
        return self._reconciler.reconcile(code, self._roster.get_roster())

    def course_matrix(self, course: Optional[str]) -> Matrix:
        return self._aggregator.matrix(course, self._roster.get_roster())
