"""
Report Store

ORM-backed persistence for report aggregates. Every write of a report and
its children runs in a single transaction; a missing id is reported as
ReportNotFound, database failures as ReportPersistenceError.
"""

import logging
from typing import Union
from uuid import UUID

from django.core.exceptions import ValidationError
from django.db import DatabaseError, transaction
from django.utils import timezone

from core.models import ReportKind, WeeklyReport, Task, EndOfTermReport, ScoreItem
from .errors import ReportNotFound, ReportPersistenceError

logger = logging.getLogger(__name__)

Report = Union[WeeklyReport, EndOfTermReport]

WEEKLY_FIELDS = (
    'student_name', 'student_id', 'organisation', 'industry_supervisor',
    'date_prepared', 'week_number', 'plans_for_next_week', 'total_hours',
)
TASK_FIELDS = ('day', 'date', 'description', 'hours_spent')

END_OF_TERM_FIELDS = (
    'student_name', 'student_id', 'organisation', 'industry_supervisor',
    'date_of_submit', 'student_comments', 'supervisor_comments',
    'student_signature', 'student_signature_date',
)
SCORE_ITEM_FIELDS = ('question', 'score')


class ReportStore:
    """
    Persistence for WeeklyReport and EndOfTermReport aggregates.

    Example:
        >>> store = ReportStore()
        >>> report = store.create(ReportKind.WEEKLY, cleaned_payload)
        >>> store.update(ReportKind.WEEKLY, report.id, is_signed=True)
        >>> store.delete(ReportKind.WEEKLY, report.id)
    """

    def _model_for(self, kind: str):
        if kind == ReportKind.WEEKLY:
            return WeeklyReport
        elif kind == ReportKind.END_OF_TERM:
            return EndOfTermReport
        raise ValueError(f"Unknown report kind: {kind}")

    def _children_for(self, kind: str) -> str:
        if kind == ReportKind.WEEKLY:
            return 'tasks'
        elif kind == ReportKind.END_OF_TERM:
            return 'score_items'
        raise ValueError(f"Unknown report kind: {kind}")

    def _queryset(self, kind: str):
        model = self._model_for(kind)
        return model.objects.prefetch_related(self._children_for(kind))

    def _get(self, kind: str, report_id, queryset=None) -> Report:
        queryset = queryset if queryset is not None else self._queryset(kind)
        try:
            return queryset.get(pk=report_id)
        except (queryset.model.DoesNotExist, ValidationError, ValueError):
            # Malformed ids cannot resolve to a report either
            raise ReportNotFound(f"{kind} report {report_id} not found")

    def create(self, kind: str, data: dict) -> Report:
        """
        Create a report together with its children.

        Args:
            kind: ReportKind value
            data: Cleaned payload (see validation module)

        Returns:
            The stored aggregate with children prefetched

        Raises:
            ReportPersistenceError: If the database write fails (nothing is written)
        """
        try:
            with transaction.atomic():
                if kind == ReportKind.WEEKLY:
                    report = self._create_weekly(data)
                elif kind == ReportKind.END_OF_TERM:
                    report = self._create_end_of_term(data)
                else:
                    raise ValueError(f"Unknown report kind: {kind}")
        except DatabaseError as e:
            logger.error(f"Failed to store {kind} report: {e}", exc_info=True)
            raise ReportPersistenceError(f"Failed to store {kind} report") from e

        return self.read(kind, report.pk)

    def _create_weekly(self, data: dict) -> WeeklyReport:
        report = WeeklyReport.objects.create(
            created_at=timezone.now(),
            **{field: data[field] for field in WEEKLY_FIELDS},
        )
        Task.objects.bulk_create([
            Task(report=report, position=position, **{field: task[field] for field in TASK_FIELDS})
            for position, task in enumerate(data['tasks'])
        ])
        return report

    def _create_end_of_term(self, data: dict) -> EndOfTermReport:
        report = EndOfTermReport.objects.create(
            created_at=timezone.now(),
            **{field: data[field] for field in END_OF_TERM_FIELDS},
        )
        ScoreItem.objects.bulk_create([
            ScoreItem(report=report, position=position, **{field: item[field] for field in SCORE_ITEM_FIELDS})
            for position, item in enumerate(data['score_items'])
        ])
        return report

    def read(self, kind: str, report_id: Union[UUID, str]) -> Report:
        """
        Read a report with its children.

        Raises:
            ReportNotFound: If the id does not resolve
            ReportPersistenceError: If the database read fails
        """
        try:
            return self._get(kind, report_id)
        except DatabaseError as e:
            logger.error(f"Failed to read {kind} report {report_id}: {e}", exc_info=True)
            raise ReportPersistenceError(f"Failed to read {kind} report") from e

    def list(self, kind: str) -> list:
        """
        List all reports of a kind, newest first, with children populated.

        Raises:
            ReportPersistenceError: If the database read fails
        """
        try:
            return list(self._queryset(kind).order_by('-created_at'))
        except DatabaseError as e:
            logger.error(f"Failed to list {kind} reports: {e}", exc_info=True)
            raise ReportPersistenceError(f"Failed to list {kind} reports") from e

    def update(self, kind: str, report_id: Union[UUID, str], **fields) -> Report:
        """
        Update scalar fields of a report.

        Args:
            kind: ReportKind value
            report_id: Report id
            **fields: Field values to set

        Returns:
            The updated aggregate

        Raises:
            ReportNotFound: If the id does not resolve
            ReportPersistenceError: If the database write fails (state unchanged)
        """
        try:
            with transaction.atomic():
                model = self._model_for(kind)
                report = self._get(kind, report_id, queryset=model.objects.select_for_update())
                for name, value in fields.items():
                    setattr(report, name, value)
                report.save(update_fields=list(fields))
        except DatabaseError as e:
            logger.error(f"Failed to update {kind} report {report_id}: {e}", exc_info=True)
            raise ReportPersistenceError(f"Failed to update {kind} report") from e

        return self.read(kind, report.pk)

    def delete(self, kind: str, report_id: Union[UUID, str]) -> None:
        """
        Delete a report and its children.

        Raises:
            ReportNotFound: If the id does not resolve
            ReportPersistenceError: If the database delete fails (state unchanged)
        """
        try:
            with transaction.atomic():
                model = self._model_for(kind)
                report = self._get(kind, report_id, queryset=model.objects.all())
                report.delete()
        except DatabaseError as e:
            logger.error(f"Failed to delete {kind} report {report_id}: {e}", exc_info=True)
            raise ReportPersistenceError(f"Failed to delete {kind} report") from e
