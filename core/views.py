from django.shortcuts import render, redirect
from django.http import HttpResponse, Http404
from django.views.decorators.http import require_POST, require_http_methods
from django.contrib import messages
from django.contrib.auth import authenticate, login as auth_login, logout as auth_logout
from django.contrib.admin.views.decorators import staff_member_required
from django.utils import timezone
from django.utils.http import url_has_allowed_host_and_scheme
from django_tables2 import RequestConfig
import logging

from .forms import RULES
from .models import ReportKind
from .rubric import SCORE_DESCRIPTIONS, MAX_SCORE, MIN_SCORE
from .services.reports import (
    ReportActions,
    ReportDraft,
    ReportLifecycleManager,
    ReportNotFound,
    ReportPersistenceError,
    render_report_pdf,
)
from .services.reports.actions import ERROR_VALIDATION, ERROR_NOT_FOUND
from .tables import WeeklyReportTable, EndOfTermReportTable

# Configure logging
logger = logging.getLogger(__name__)

KIND_LABELS = {
    ReportKind.WEEKLY: 'Weekly report',
    ReportKind.END_OF_TERM: 'End-of-term report',
}


def _resolve_kind(kind):
    """Map a URL kind segment to a ReportKind, 404 for anything else."""
    if kind not in ReportKind.values:
        raise Http404("Unknown report kind")
    return ReportKind(kind)


def _error_text(error):
    """Flatten an action error (message or field error map) for a flash message."""
    if isinstance(error, dict):
        return '; '.join(message for messages_ in error.values() for message in messages_)
    return str(error)


def home(request):
    """Home page view."""
    return render(request, 'home.html')


def login_view(request):
    """Login page view for staff."""
    if request.user.is_authenticated and request.user.is_staff:
        return redirect('reports-manage')

    if request.method == 'POST':
        username = request.POST.get('username')
        password = request.POST.get('password')
        next_url = request.POST.get('next', '')

        user = authenticate(request, username=username, password=password)

        if user is not None and user.is_active and user.is_staff:
            auth_login(request, user)
            if next_url and url_has_allowed_host_and_scheme(next_url, allowed_hosts={request.get_host()}):
                return redirect(next_url)
            return redirect('reports-manage')

        logger.info(f"Failed login attempt for user '{username}'")
        return render(request, 'login.html', {
            'error': 'Invalid username or password.',
            'next': next_url,
        })

    return render(request, 'login.html', {'next': request.GET.get('next', '')})


def logout_view(request):
    """Log out and return to the home page."""
    auth_logout(request)
    return redirect('home')


def _report_form(request, kind, template_name, extra_context=None):
    """
    Shared create view for both report kinds.

    POST carries the whole draft. The ``action`` field selects between
    adding a task row, removing one (``remove_task:<index>``) and submitting.
    """
    today = timezone.localdate()

    if request.method == 'POST':
        draft = ReportDraft.from_form_data(kind, request.POST, today=today)
        action = request.POST.get('action', 'submit')

        if action == 'add_task' and kind == ReportKind.WEEKLY:
            draft = draft.add_child()
        elif action.startswith('remove_task:') and kind == ReportKind.WEEKLY:
            try:
                draft = draft.remove_child(int(action.split(':', 1)[1]))
            except (ValueError, IndexError):
                logger.warning(f"Ignoring invalid task row action: {action}")
        else:
            result = ReportActions().create(kind, draft.to_payload(), today=today)
            if result.success:
                messages.success(request, f"{KIND_LABELS[kind]} submitted successfully.")
                return redirect('home')

            if result.error_type == ERROR_VALIDATION:
                draft = draft.with_errors(result.error)
            else:
                messages.error(request, result.error)
    else:
        draft = ReportDraft.empty(kind, today=today)

    context = {
        'draft': draft,
        'non_field_errors': draft.errors_for('__all__'),
        'rules': RULES,
        'today': today,
    }
    context.update(extra_context or {})
    return render(request, template_name, context)


@require_http_methods(["GET", "POST"])
def weekly_report_create(request):
    """Student form for a weekly report."""
    return _report_form(request, ReportKind.WEEKLY, 'reports/weekly_form.html')


@require_http_methods(["GET", "POST"])
def end_of_term_report_create(request):
    """Student form for an end-of-term report."""
    score_choices = [
        (score, SCORE_DESCRIPTIONS[score])
        for score in range(MAX_SCORE, MIN_SCORE - 1, -1)
    ]
    return _report_form(
        request,
        ReportKind.END_OF_TERM,
        'reports/end_of_term_form.html',
        {'score_choices': score_choices},
    )


@staff_member_required(login_url='login')
def reports_manage(request):
    """Staff page listing both report kinds, newest first."""
    actions = ReportActions()

    weekly = actions.list(ReportKind.WEEKLY)
    end_of_term = actions.list(ReportKind.END_OF_TERM)
    for result in (weekly, end_of_term):
        if not result.success:
            messages.error(request, result.error)

    weekly_table = WeeklyReportTable(weekly.data or [], prefix='weekly-')
    end_of_term_table = EndOfTermReportTable(end_of_term.data or [], prefix='eot-')
    RequestConfig(request, paginate=False).configure(weekly_table)
    RequestConfig(request, paginate=False).configure(end_of_term_table)

    return render(request, 'reports/manage.html', {
        'weekly_table': weekly_table,
        'end_of_term_table': end_of_term_table,
        'weekly_count': len(weekly.data or []),
        'end_of_term_count': len(end_of_term.data or []),
    })


@staff_member_required(login_url='login')
@require_POST
def report_sign(request, kind, report_id):
    """Sign a report. End-of-term reports need the supervisor's signature."""
    kind = _resolve_kind(kind)
    signature = request.POST.get('signature') if kind == ReportKind.END_OF_TERM else None

    result = ReportActions().sign(kind, report_id, signature=signature)
    if result.success:
        messages.success(request, f"{KIND_LABELS[kind]} signed.")
    else:
        messages.error(request, _error_text(result.error))

    return redirect('reports-manage')


@staff_member_required(login_url='login')
@require_POST
def report_delete(request, kind, report_id):
    """Delete a report. A report that is already gone is only a notice."""
    kind = _resolve_kind(kind)

    result = ReportActions().delete(kind, report_id)
    if result.success:
        messages.success(request, f"{KIND_LABELS[kind]} deleted.")
    elif result.error_type == ERROR_NOT_FOUND:
        messages.info(request, f"{KIND_LABELS[kind]} was already deleted.")
    else:
        messages.error(request, result.error)

    return redirect('reports-manage')


@staff_member_required(login_url='login')
def report_pdf(request, kind, report_id):
    """Download a report as PDF."""
    kind = _resolve_kind(kind)

    try:
        report = ReportLifecycleManager().get(kind, report_id)
    except ReportNotFound:
        raise Http404("Report not found")
    except ReportPersistenceError:
        logger.error(f"Failed to load {kind} report {report_id} for export", exc_info=True)
        return HttpResponse("Failed to export report", status=500)

    pdf = render_report_pdf(kind, report)

    response = HttpResponse(pdf.pdf_bytes, content_type=pdf.content_type)
    response['Content-Disposition'] = f'attachment; filename="{pdf.filename}"'
    return response
