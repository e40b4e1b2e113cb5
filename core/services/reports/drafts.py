"""
Report drafts.

A draft is the not-yet-persisted state of a report form: the field values,
the child rows (tasks or score items) and an error map of the same shape.
Drafts are immutable; every change returns a new draft.

Example:
    >>> draft = ReportDraft.empty(ReportKind.WEEKLY, today=date(2024, 3, 4))
    >>> draft = draft.with_value('student_name', 'Jane Doe')
    >>> draft = draft.add_child().with_child_value(1, 'hours_spent', '2.5')
    >>> payload = draft.to_payload()
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from datetime import date
from types import MappingProxyType
from typing import Optional

from django.utils import timezone

from core.models import ReportKind
from core.rubric import END_OF_TERM_QUESTIONS

HEADER_FIELDS = ('student_name', 'student_id', 'organisation', 'industry_supervisor')

WEEKLY_DRAFT_FIELDS = HEADER_FIELDS + ('date_prepared', 'week_number', 'plans_for_next_week')
TASK_DRAFT_FIELDS = ('day', 'date', 'description', 'hours_spent')

END_OF_TERM_DRAFT_FIELDS = HEADER_FIELDS + (
    'date_of_submit', 'student_comments', 'supervisor_comments',
    'student_signature', 'student_signature_date',
)
SCORE_ITEM_DRAFT_FIELDS = ('question', 'score')

_CHILD_KEY = re.compile(r'^(?P<collection>\w+)\.(?P<index>\d+)\.(?P<name>\w+)$')


def _frozen(mapping) -> MappingProxyType:
    return MappingProxyType(dict(mapping))


def _freeze_errors(errors) -> MappingProxyType:
    return MappingProxyType({key: tuple(messages) for key, messages in errors.items()})


def draft_fields(kind: str) -> tuple:
    if kind == ReportKind.WEEKLY:
        return WEEKLY_DRAFT_FIELDS
    elif kind == ReportKind.END_OF_TERM:
        return END_OF_TERM_DRAFT_FIELDS
    raise ValueError(f"Unknown report kind: {kind}")


def child_collection(kind: str) -> str:
    if kind == ReportKind.WEEKLY:
        return 'tasks'
    elif kind == ReportKind.END_OF_TERM:
        return 'score_items'
    raise ValueError(f"Unknown report kind: {kind}")


def child_fields(kind: str) -> tuple:
    if kind == ReportKind.WEEKLY:
        return TASK_DRAFT_FIELDS
    elif kind == ReportKind.END_OF_TERM:
        return SCORE_ITEM_DRAFT_FIELDS
    raise ValueError(f"Unknown report kind: {kind}")


def blank_task(today: date) -> dict:
    return {'day': '1', 'date': today.isoformat(), 'description': '', 'hours_spent': ''}


def _parse_hours(value) -> Optional[float]:
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


@dataclass(frozen=True)
class ReportDraft:
    """
    Immutable form state of a report being written.

    Attributes:
        kind: ReportKind value
        values: Scalar field values keyed by field name
        children: Child rows (tasks or score items), in order
        errors: Field error map; child fields use dotted keys (``tasks.0.day``)
        today: Reference date for new rows
    """
    kind: str
    values: Mapping = field(default_factory=lambda: MappingProxyType({}))
    children: tuple = ()
    errors: Mapping = field(default_factory=lambda: MappingProxyType({}))
    today: Optional[date] = None

    @classmethod
    def empty(cls, kind: str, today: Optional[date] = None) -> 'ReportDraft':
        """
        Start a blank draft.

        Weekly drafts start with one task row; end-of-term drafts start with
        one unscored row per rubric question.
        """
        today = today or timezone.localdate()
        values = {name: '' for name in draft_fields(kind)}

        if kind == ReportKind.WEEKLY:
            children = (blank_task(today),)
        else:
            children = tuple({'question': question, 'score': ''} for question in END_OF_TERM_QUESTIONS)

        return cls(
            kind=kind,
            values=_frozen(values),
            children=tuple(_frozen(row) for row in children),
            today=today,
        )

    @classmethod
    def from_form_data(cls, kind: str, data: Mapping, today: Optional[date] = None) -> 'ReportDraft':
        """
        Build a draft from submitted form data.

        Child fields are named with dotted keys (``tasks.0.description``);
        rows are ordered by their index.
        """
        collection = child_collection(kind)
        values = {name: data.get(name, '') for name in draft_fields(kind)}

        rows = {}
        for key in data:
            match = _CHILD_KEY.match(key)
            if not match or match.group('collection') != collection:
                continue
            if match.group('name') not in child_fields(kind):
                continue
            rows.setdefault(int(match.group('index')), {})[match.group('name')] = data.get(key)

        children = tuple(
            _frozen({name: rows[index].get(name, '') for name in child_fields(kind)})
            for index in sorted(rows)
        )

        return cls(
            kind=kind,
            values=_frozen(values),
            children=children,
            today=today or timezone.localdate(),
        )

    @property
    def collection(self) -> str:
        return child_collection(self.kind)

    def with_value(self, name: str, value) -> 'ReportDraft':
        """Set a scalar field and clear its errors."""
        if name not in draft_fields(self.kind):
            raise KeyError(f"Unknown field for {self.kind} report: {name}")

        errors = {key: messages for key, messages in self.errors.items() if key != name}
        return replace(
            self,
            values=_frozen({**self.values, name: value}),
            errors=_freeze_errors(errors),
        )

    def with_child_value(self, index: int, name: str, value) -> 'ReportDraft':
        """Set a field of one child row and clear its errors."""
        if name not in child_fields(self.kind):
            raise KeyError(f"Unknown field for {self.collection}: {name}")
        if not 0 <= index < len(self.children):
            raise IndexError(f"No {self.collection} row at index {index}")

        children = list(self.children)
        children[index] = _frozen({**children[index], name: value})

        error_key = f"{self.collection}.{index}.{name}"
        errors = {key: messages for key, messages in self.errors.items() if key != error_key}
        return replace(self, children=tuple(children), errors=_freeze_errors(errors))

    def add_child(self) -> 'ReportDraft':
        """Append a blank task row. Only weekly drafts have a variable row count."""
        if self.kind != ReportKind.WEEKLY:
            raise ValueError(f"{self.collection} rows are fixed by the rubric")

        row = _frozen(blank_task(self.today or timezone.localdate()))
        errors = {key: messages for key, messages in self.errors.items() if key != self.collection}
        return replace(self, children=self.children + (row,), errors=_freeze_errors(errors))

    def remove_child(self, index: int) -> 'ReportDraft':
        """
        Remove a task row.

        The last remaining row cannot be removed. Errors of later rows move
        with their rows.
        """
        if self.kind != ReportKind.WEEKLY:
            raise ValueError(f"{self.collection} rows are fixed by the rubric")
        if not 0 <= index < len(self.children):
            raise IndexError(f"No {self.collection} row at index {index}")
        if len(self.children) <= 1:
            return self

        children = self.children[:index] + self.children[index + 1:]

        errors = {}
        for key, messages in self.errors.items():
            match = _CHILD_KEY.match(key)
            if not match or match.group('collection') != self.collection:
                errors[key] = messages
                continue
            row_index = int(match.group('index'))
            if row_index == index:
                continue
            if row_index > index:
                row_index -= 1
            errors[f"{self.collection}.{row_index}.{match.group('name')}"] = messages

        return replace(self, children=children, errors=_freeze_errors(errors))

    def with_errors(self, errors: Mapping) -> 'ReportDraft':
        """Replace the error map (e.g., with a ReportValidationError's errors)."""
        return replace(self, errors=_freeze_errors(errors or {}))

    def errors_for(self, name: str) -> tuple:
        return self.errors.get(name, ())

    def rows(self) -> list:
        """Child rows with their index and their own errors keyed by field name."""
        rows = []
        for index, row in enumerate(self.children):
            prefix = f"{self.collection}.{index}."
            rows.append({
                'index': index,
                'values': row,
                'errors': {
                    key[len(prefix):]: messages
                    for key, messages in self.errors.items()
                    if key.startswith(prefix)
                },
            })
        return rows

    def total_hours(self) -> float:
        """Sum of the task hours that parse as numbers."""
        if self.kind != ReportKind.WEEKLY:
            return 0.0
        hours = (_parse_hours(row.get('hours_spent')) for row in self.children)
        return sum(value for value in hours if value is not None)

    def to_payload(self) -> dict:
        """
        Build the payload submitted for creation.

        Weekly payloads carry total_hours computed from the task rows.
        """
        payload = dict(self.values)
        payload[self.collection] = [dict(row) for row in self.children]
        if self.kind == ReportKind.WEEKLY:
            payload['total_hours'] = self.total_hours()
        return payload
