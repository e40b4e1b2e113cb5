"""
Report payload validation.

Validates submitted payloads for both report kinds and reports every problem
as a field error map. Validation has no side effects: the verdict depends only
on the payload and the reference date.
"""

from collections.abc import Mapping
from typing import Optional
from datetime import date

from core.forms import (
    RULES,
    WeeklyReportForm,
    TaskForm,
    EndOfTermReportForm,
    ScoreItemForm,
    SupervisorSignatureForm,
)
from core.models import ReportKind
from .errors import ReportValidationError


def _form_errors(form, prefix=''):
    """Flatten a bound form's errors into ``{prefixed_field: [messages]}``."""
    return {
        f"{prefix}{field}": [str(message) for message in messages]
        for field, messages in form.errors.items()
    }


def _validate_children(rows, key, form_class, errors, form_kwargs=None):
    """
    Validate a child collection row by row.

    Args:
        rows: List of child payloads
        key: Collection name used in error keys (e.g., 'tasks')
        form_class: Form validating a single row
        errors: Error map updated in place
        form_kwargs: Extra keyword arguments for each row form

    Returns:
        List of cleaned rows (only complete when no errors were added)
    """
    cleaned_rows = []
    for index, row in enumerate(rows):
        if not isinstance(row, Mapping):
            errors[f"{key}.{index}"] = ['Invalid entry']
            continue

        form = form_class(data=row, **(form_kwargs or {}))
        if form.is_valid():
            cleaned_rows.append(form.cleaned_data)
        else:
            errors.update(_form_errors(form, prefix=f"{key}.{index}."))
    return cleaned_rows


def validate_weekly_payload(payload, today: Optional[date] = None) -> dict:
    """
    Validate a weekly report payload.

    Args:
        payload: Mapping with the report fields and a ``tasks`` list
        today: Reference date for date bounds (defaults to the local date)

    Returns:
        Cleaned payload with typed values and a cleaned ``tasks`` list

    Raises:
        ReportValidationError: With the field error map if anything is invalid
    """
    if not isinstance(payload, Mapping):
        raise ReportValidationError({'__all__': ['Report data must be an object']})

    form = WeeklyReportForm(data=payload, today=today)
    errors = {} if form.is_valid() else _form_errors(form)

    tasks = payload.get('tasks')
    cleaned_tasks = []
    if not isinstance(tasks, list) or len(tasks) < RULES['tasks']['min_count']:
        errors['tasks'] = ['At least one task is required']
    else:
        cleaned_tasks = _validate_children(
            tasks, 'tasks', TaskForm, errors, form_kwargs={'today': today}
        )

    if errors:
        raise ReportValidationError(errors)

    cleaned = dict(form.cleaned_data)
    cleaned['tasks'] = cleaned_tasks
    return cleaned


def validate_end_of_term_payload(payload, today: Optional[date] = None) -> dict:
    """
    Validate an end-of-term report payload.

    Requires exactly one score item per rubric question.

    Args:
        payload: Mapping with the report fields and a ``score_items`` list
        today: Reference date for date bounds (defaults to the local date)

    Returns:
        Cleaned payload with typed values and a cleaned ``score_items`` list

    Raises:
        ReportValidationError: With the field error map if anything is invalid
    """
    if not isinstance(payload, Mapping):
        raise ReportValidationError({'__all__': ['Report data must be an object']})

    form = EndOfTermReportForm(data=payload, today=today)
    errors = {} if form.is_valid() else _form_errors(form)

    expected_count = RULES['score_items']['count']
    score_items = payload.get('score_items')
    cleaned_items = []
    if not isinstance(score_items, list) or len(score_items) != expected_count:
        errors['score_items'] = [f'Exactly {expected_count} score items are required']
    else:
        cleaned_items = _validate_children(score_items, 'score_items', ScoreItemForm, errors)
        questions = {item['question'] for item in cleaned_items}
        if len(cleaned_items) == expected_count and len(questions) != expected_count:
            errors['score_items'] = ['Each rubric question must be scored exactly once']

    if errors:
        raise ReportValidationError(errors)

    cleaned = dict(form.cleaned_data)
    cleaned['score_items'] = cleaned_items
    return cleaned


def validate_payload(kind: str, payload, today: Optional[date] = None) -> dict:
    """
    Validate a payload for the given report kind.

    Raises:
        ReportValidationError: If the payload is invalid
        ValueError: If the kind is unknown
    """
    if kind == ReportKind.WEEKLY:
        return validate_weekly_payload(payload, today=today)
    elif kind == ReportKind.END_OF_TERM:
        return validate_end_of_term_payload(payload, today=today)
    raise ValueError(f"Unknown report kind: {kind}")


def validate_supervisor_signature(signature) -> str:
    """
    Validate the signer identity used to sign an end-of-term report.

    Returns:
        The stripped signature

    Raises:
        ReportValidationError: If the signature is missing or blank
    """
    form = SupervisorSignatureForm(data={'signature': signature})
    if not form.is_valid():
        raise ReportValidationError(_form_errors(form))
    return form.cleaned_data['signature']
