"""
Django tables for the report listings.

Rows are serialized reports (dicts) as returned by ReportActions.list,
already ordered newest first.
"""
import django_tables2 as tables
from django.utils.dateparse import parse_date, parse_datetime
from django.utils import timezone
from django.utils.html import format_html

from .services.reports.export import format_date, format_hours


WEEKLY_ACTIONS_TEMPLATE = """
<div class="d-flex gap-1">
  <a href="{% url 'report-pdf' kind='weekly' report_id=record.id %}" class="btn btn-sm btn-outline-secondary">PDF</a>
  {% if not record.is_signed %}
  <form method="post" action="{% url 'report-sign' kind='weekly' report_id=record.id %}">
    {% csrf_token %}
    <button type="submit" class="btn btn-sm btn-outline-success">Sign</button>
  </form>
  {% endif %}
  <form method="post" action="{% url 'report-delete' kind='weekly' report_id=record.id %}"
        onsubmit="return confirm('Delete this report? This cannot be undone.');">
    {% csrf_token %}
    <button type="submit" class="btn btn-sm btn-outline-danger">Delete</button>
  </form>
</div>
"""

END_OF_TERM_ACTIONS_TEMPLATE = """
<div class="d-flex gap-1 align-items-start">
  <a href="{% url 'report-pdf' kind='end_of_term' report_id=record.id %}" class="btn btn-sm btn-outline-secondary">PDF</a>
  {% if not record.is_signed %}
  <form method="post" action="{% url 'report-sign' kind='end_of_term' report_id=record.id %}" class="d-flex gap-1">
    {% csrf_token %}
    <input type="text" name="signature" class="form-control form-control-sm" placeholder="Supervisor signature" required>
    <button type="submit" class="btn btn-sm btn-outline-success">Sign</button>
  </form>
  {% endif %}
  <form method="post" action="{% url 'report-delete' kind='end_of_term' report_id=record.id %}"
        onsubmit="return confirm('Delete this report? This cannot be undone.');">
    {% csrf_token %}
    <button type="submit" class="btn btn-sm btn-outline-danger">Delete</button>
  </form>
</div>
"""


def _status_badge(signed):
    if signed:
        return format_html('<span class="badge bg-success">{}</span>', 'Signed')
    return format_html('<span class="badge bg-warning text-dark">{}</span>', 'Pending')


def _render_created(value):
    created = parse_datetime(value) if value else None
    if created is None:
        return value
    if timezone.is_aware(created):
        created = timezone.localtime(created)
    return created.strftime('%Y-%m-%d %H:%M')


class WeeklyReportTable(tables.Table):
    """
    Table for displaying weekly reports.
    """

    created_at = tables.Column(verbose_name='Submitted', attrs={'td': {'class': 'text-muted small'}})
    student_name = tables.Column(verbose_name='Student')
    student_id = tables.Column(verbose_name='ID')
    organisation = tables.Column(verbose_name='Organisation', attrs={'td': {'class': 'small'}})
    week_number = tables.Column(verbose_name='Week')
    date_prepared = tables.Column(verbose_name='Prepared')
    total_hours = tables.Column(verbose_name='Hours')
    is_signed = tables.Column(verbose_name='Status')
    actions = tables.TemplateColumn(
        template_code=WEEKLY_ACTIONS_TEMPLATE,
        verbose_name='',
        empty_values=(),
    )

    class Meta:
        template_name = 'django_tables2/bootstrap5.html'
        orderable = False
        attrs = {
            'class': 'table table-hover align-middle',
            'thead': {'class': 'table-light'}
        }
        empty_text = 'No weekly reports submitted yet.'

    def render_created_at(self, value):
        return _render_created(value)

    def render_date_prepared(self, value):
        return format_date(parse_date(value))

    def render_total_hours(self, value):
        return format_hours(value)

    def render_is_signed(self, value):
        return _status_badge(value)


class EndOfTermReportTable(tables.Table):
    """
    Table for displaying end-of-term reports.
    """

    created_at = tables.Column(verbose_name='Submitted', attrs={'td': {'class': 'text-muted small'}})
    student_name = tables.Column(verbose_name='Student')
    student_id = tables.Column(verbose_name='ID')
    organisation = tables.Column(verbose_name='Organisation', attrs={'td': {'class': 'small'}})
    industry_supervisor = tables.Column(verbose_name='Supervisor', attrs={'td': {'class': 'small'}})
    date_of_submit = tables.Column(verbose_name='Submitted on')
    is_signed = tables.Column(verbose_name='Status')
    actions = tables.TemplateColumn(
        template_code=END_OF_TERM_ACTIONS_TEMPLATE,
        verbose_name='',
        empty_values=(),
    )

    class Meta:
        template_name = 'django_tables2/bootstrap5.html'
        orderable = False
        attrs = {
            'class': 'table table-hover align-middle',
            'thead': {'class': 'table-light'}
        }
        empty_text = 'No end-of-term reports submitted yet.'

    def render_created_at(self, value):
        return _render_created(value)

    def render_date_of_submit(self, value):
        return format_date(parse_date(value))

    def render_is_signed(self, value, record):
        if value:
            return format_html(
                '{}<br><small class="text-muted">{}</small>',
                _status_badge(True),
                record.get('supervisor_signature') or '',
            )
        return _status_badge(False)
