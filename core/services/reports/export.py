"""
Report export.

Builds the PDF context of a stored report and renders it through the report
template registry. Export never writes to the store; the same aggregate always
renders to the same bytes.
"""

import logging
from datetime import date, datetime

from django.utils import timezone
from django.utils.text import slugify

from core.models import ReportKind
from core.services.config import get_unit_code, get_logo_path
from core.services.reporting import ReportService, PdfResult

logger = logging.getLogger(__name__)

WEEKLY_TEMPLATE_KEY = 'weekly.v1'
END_OF_TERM_TEMPLATE_KEY = 'end_of_term.v1'

WEEKLY_INSTRUCTION = (
    'To be submitted to Canvas together with a screenshot of the email '
    'sending this to your supervisor.'
)
END_OF_TERM_INSTRUCTION = 'To be submitted to Canvas by week 13.'


def format_date(value) -> str:
    """
    Format a date for print, e.g. 'March 4, 2024'.

    Aware datetimes are converted to the local date first.
    """
    if not value:
        return ''
    if isinstance(value, datetime):
        value = timezone.localtime(value).date() if timezone.is_aware(value) else value.date()
    if isinstance(value, date):
        return f"{value:%B} {value.day}, {value.year}"
    return str(value)


def format_hours(value) -> str:
    """Format hours without a trailing '.0' (2.0 -> '2', 2.5 -> '2.5')."""
    if value is None:
        return ''
    return f"{value:g}"


def _logo_context() -> str:
    logo = get_logo_path()
    return str(logo) if logo else ''


def build_weekly_context(report) -> dict:
    """Build the template context for a WeeklyReport."""
    return {
        'title': f"{get_unit_code()} Weekly Communication",
        'instruction': WEEKLY_INSTRUCTION,
        'student_name': report.student_name,
        'student_id': str(report.student_id),
        'organisation': report.organisation,
        'industry_supervisor': report.industry_supervisor,
        'date_prepared': format_date(report.date_prepared),
        'week_number': str(report.week_number),
        'tasks': [
            {
                'day': str(task.day),
                'date': format_date(task.date),
                'description': task.description,
                'hours_spent': format_hours(task.hours_spent),
            }
            for task in report.tasks.all()
        ],
        'total_hours': format_hours(report.total_hours),
        'plans_for_next_week': report.plans_for_next_week,
        'logo_path': _logo_context(),
    }


def build_end_of_term_context(report) -> dict:
    """
    Build the template context for an EndOfTermReport.

    Supervisor signature fields are empty while the report is pending.
    """
    return {
        'title': f"{get_unit_code()} Final Internship Project Review Form - Close",
        'instruction': END_OF_TERM_INSTRUCTION,
        'student_name': report.student_name,
        'student_id': str(report.student_id),
        'organisation': report.organisation,
        'industry_supervisor': report.industry_supervisor,
        'date_of_submit': format_date(report.date_of_submit),
        'score_items': [
            {'question': item.question, 'score': item.score}
            for item in report.score_items.all()
        ],
        'student_comments': report.student_comments,
        'supervisor_comments': report.supervisor_comments,
        'student_signature': report.student_signature,
        'student_signature_date': format_date(report.student_signature_date),
        'supervisor_signature': report.supervisor_signature or '',
        'supervisor_signature_date': format_date(report.supervisor_signature_date),
        'logo_path': _logo_context(),
    }


def report_filename(kind: str, report) -> str:
    """
    Download filename of an exported report.

    Examples: 'weekly-report-week-3.pdf', 'end-of-term-report-jane-doe.pdf'
    """
    if kind == ReportKind.WEEKLY:
        return f"weekly-report-week-{report.week_number}.pdf"
    elif kind == ReportKind.END_OF_TERM:
        slug = slugify(report.student_name) or str(report.id)
        return f"end-of-term-report-{slug}.pdf"
    raise ValueError(f"Unknown report kind: {kind}")


def render_report_pdf(kind: str, report, service: ReportService = None) -> PdfResult:
    """
    Render a stored report to PDF.

    Args:
        kind: ReportKind value
        report: WeeklyReport or EndOfTermReport with children
        service: ReportService to render with (defaults to a new one)

    Returns:
        PdfResult with the PDF bytes and download filename
    """
    service = service or ReportService()

    if kind == ReportKind.WEEKLY:
        report_key = WEEKLY_TEMPLATE_KEY
        context = build_weekly_context(report)
    elif kind == ReportKind.END_OF_TERM:
        report_key = END_OF_TERM_TEMPLATE_KEY
        context = build_end_of_term_context(report)
    else:
        raise ValueError(f"Unknown report kind: {kind}")

    pdf_bytes = service.render(report_key, context)
    logger.info(f"Exported {kind} report {report.id}")
    return PdfResult(pdf_bytes=pdf_bytes, filename=report_filename(kind, report))
