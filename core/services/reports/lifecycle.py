"""
Report Lifecycle Manager

Drives report aggregates through their lifecycle:

    Draft (client side) -> Created -> Signed -> [Deleted]

Deleted is reachable from Created or Signed. Signing is one way; there is
no unsign. Every committed change is announced through ``report_changed``.
"""

import logging
from datetime import date
from typing import Optional

from django.utils import timezone

from core.models import ReportKind
from .signals import report_changed
from .store import ReportStore
from .validation import validate_payload, validate_supervisor_signature

logger = logging.getLogger(__name__)


class ReportLifecycleManager:
    """
    Service for creating, listing, signing and deleting reports.

    Errors are raised, not returned; see ReportActions for the boundary that
    converts them into result values.

    Example:
        >>> manager = ReportLifecycleManager()
        >>> report = manager.create(ReportKind.WEEKLY, payload)
        >>> manager.sign(ReportKind.WEEKLY, report.id)
        >>> manager.sign(ReportKind.END_OF_TERM, other.id, signature='Alice Example')
    """

    def __init__(self, store: Optional[ReportStore] = None):
        self.store = store or ReportStore()

    def _announce(self, kind: str, report_id, action: str) -> None:
        report_changed.send(sender=self.__class__, kind=kind, report_id=report_id, action=action)

    def create(self, kind: str, payload, today: Optional[date] = None):
        """
        Validate and persist a new report with its children.

        Args:
            kind: ReportKind value
            payload: Submitted report data
            today: Reference date for date validation (defaults to the local date)

        Returns:
            The stored aggregate

        Raises:
            ReportValidationError: If the payload is invalid (nothing is written)
            ReportPersistenceError: If the store fails (nothing is written)
        """
        cleaned = validate_payload(kind, payload, today=today)
        report = self.store.create(kind, cleaned)

        logger.info(f"Created {kind} report {report.id} for student {report.student_id}")
        self._announce(kind, report.id, 'created')
        return report

    def list(self, kind: str):
        """
        List all reports of a kind, newest first.

        Raises:
            ReportPersistenceError: If the store fails
        """
        return self.store.list(kind)

    def get(self, kind: str, report_id):
        """
        Get a single report with its children.

        Raises:
            ReportNotFound: If the id does not resolve
        """
        return self.store.read(kind, report_id)

    def sign(self, kind: str, report_id, signature: Optional[str] = None):
        """
        Sign a report.

        Weekly reports only carry a signed flag; signing again is a no-op in
        effect. End-of-term reports record the supervisor's signature and the
        time of this call.

        Args:
            kind: ReportKind value
            report_id: Report id
            signature: Signer identity (required for end-of-term reports)

        Returns:
            The updated aggregate

        Raises:
            ReportValidationError: If an end-of-term signature is missing
            ReportNotFound: If the id does not resolve
            ReportPersistenceError: If the store fails (state unchanged)
        """
        if kind == ReportKind.WEEKLY:
            report = self.store.update(kind, report_id, is_signed=True)
        elif kind == ReportKind.END_OF_TERM:
            signer = validate_supervisor_signature(signature)
            report = self.store.update(
                kind,
                report_id,
                supervisor_signature=signer,
                supervisor_signature_date=timezone.now(),
            )
        else:
            raise ValueError(f"Unknown report kind: {kind}")

        logger.info(f"Signed {kind} report {report.id}")
        self._announce(kind, report.id, 'signed')
        return report

    def delete(self, kind: str, report_id) -> None:
        """
        Delete a report and its children. There is no recovery.

        Raises:
            ReportNotFound: If the id does not resolve
            ReportPersistenceError: If the store fails (state unchanged)
        """
        self.store.delete(kind, report_id)

        logger.info(f"Deleted {kind} report {report_id}")
        self._announce(kind, report_id, 'deleted')
