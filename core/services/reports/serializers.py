"""
Serialization of report aggregates to JSON-compatible dictionaries.
"""

from core.models import ReportKind


def _iso(value):
    return value.isoformat() if value else None


def serialize_task(task):
    return {
        'id': task.id,
        'day': task.day,
        'date': _iso(task.date),
        'description': task.description,
        'hours_spent': task.hours_spent,
    }


def serialize_score_item(item):
    return {
        'id': item.id,
        'question': item.question,
        'score': item.score,
    }


def serialize_weekly_report(report):
    """
    Serialize a WeeklyReport with its tasks.
    
    Args:
        report: WeeklyReport instance (tasks prefetched)
        
    Returns:
        Dictionary with report data
    """
    return {
        'id': str(report.id),
        'kind': ReportKind.WEEKLY.value,
        'student_name': report.student_name,
        'student_id': report.student_id,
        'organisation': report.organisation,
        'industry_supervisor': report.industry_supervisor,
        'date_prepared': _iso(report.date_prepared),
        'week_number': report.week_number,
        'plans_for_next_week': report.plans_for_next_week,
        'total_hours': report.total_hours,
        'is_signed': report.is_signed,
        'created_at': _iso(report.created_at),
        'tasks': [serialize_task(task) for task in report.tasks.all()],
    }


def serialize_end_of_term_report(report):
    """
    Serialize an EndOfTermReport with its score items.
    
    Args:
        report: EndOfTermReport instance (score items prefetched)
        
    Returns:
        Dictionary with report data
    """
    return {
        'id': str(report.id),
        'kind': ReportKind.END_OF_TERM.value,
        'student_name': report.student_name,
        'student_id': report.student_id,
        'organisation': report.organisation,
        'industry_supervisor': report.industry_supervisor,
        'date_of_submit': _iso(report.date_of_submit),
        'student_comments': report.student_comments,
        'supervisor_comments': report.supervisor_comments,
        'student_signature': report.student_signature,
        'student_signature_date': _iso(report.student_signature_date),
        'supervisor_signature': report.supervisor_signature,
        'supervisor_signature_date': _iso(report.supervisor_signature_date),
        'is_signed': report.is_signed,
        'created_at': _iso(report.created_at),
        'score_items': [serialize_score_item(item) for item in report.score_items.all()],
    }


def serialize_report(kind, report):
    """Serialize an aggregate of the given kind."""
    if kind == ReportKind.WEEKLY:
        return serialize_weekly_report(report)
    elif kind == ReportKind.END_OF_TERM:
        return serialize_end_of_term_report(report)
    raise ValueError(f"Unknown report kind: {kind}")
