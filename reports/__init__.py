"""
Reports package

Contains report templates for PDF generation.
"""

from core.services.reporting.registry import register_template, is_registered
from core.services.reports.export import WEEKLY_TEMPLATE_KEY, END_OF_TERM_TEMPLATE_KEY
from .templates.weekly_v1 import WeeklyReportV1
from .templates.end_of_term_v1 import EndOfTermReportV1


def register_all_templates():
    """Register all available report templates"""
    if not is_registered(WEEKLY_TEMPLATE_KEY):
        register_template(WEEKLY_TEMPLATE_KEY, WeeklyReportV1)
    if not is_registered(END_OF_TERM_TEMPLATE_KEY):
        register_template(END_OF_TERM_TEMPLATE_KEY, EndOfTermReportV1)


# Auto-register templates when module is imported
register_all_templates()
