"""
Reports JSON API Views.

HTTP endpoints over ReportActions. Every response body has the uniform
``{success, data?, error?}`` shape; the status code follows the error
category. All endpoints require authentication via x-api-secret header.
"""
import logging
import json
from django.http import JsonResponse
from django.views.decorators.http import require_http_methods
from django.views.decorators.csrf import csrf_exempt

from core.models import ReportKind
from core.services.reports import ReportActions
from core.services.reports.actions import ERROR_VALIDATION, ERROR_NOT_FOUND, ERROR_PERSISTENCE

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ERROR_VALIDATION: 400,
    ERROR_NOT_FOUND: 404,
    ERROR_PERSISTENCE: 500,
}


def _result_response(result, success_status=200):
    """Convert an ActionResult into a JsonResponse."""
    status = success_status if result.success else ERROR_STATUS.get(result.error_type, 500)
    return JsonResponse(result.to_dict(), status=status)


def _unknown_kind():
    return JsonResponse({'success': False, 'error': 'Unknown report kind'}, status=404)


def _parse_body(request):
    """
    Parse a JSON request body.
    
    Returns:
        Parsed value ({} for an empty body)
        
    Raises:
        ValueError: If the body is not valid JSON
    """
    if not request.body:
        return {}
    return json.loads(request.body)


@csrf_exempt
@require_http_methods(["GET", "POST"])
def api_reports(request, kind):
    """
    GET /api/reports/{kind}
    
    List reports of a kind, newest first.
    
    POST /api/reports/{kind}
    
    Create a report.
    
    Request Body:
        JSON object with the report fields and its tasks or score_items
        
    Returns:
        200: List of reports
        201: Created report
        400: Invalid payload (error is a field error map)
        500: Store failure
    """
    if kind not in ReportKind.values:
        return _unknown_kind()
    
    actions = ReportActions()
    
    if request.method == 'GET':
        return _result_response(actions.list(kind))
    
    try:
        payload = _parse_body(request)
    except ValueError:
        return JsonResponse({'success': False, 'error': 'Invalid JSON payload'}, status=400)
    
    return _result_response(actions.create(kind, payload), success_status=201)


@csrf_exempt
@require_http_methods(["GET", "DELETE"])
def api_report_detail(request, kind, report_id):
    """
    GET /api/reports/{kind}/{report_id}
    
    Get a single report.
    
    DELETE /api/reports/{kind}/{report_id}
    
    Delete a report and its tasks or score items.
    
    Returns:
        200: Report (GET) or success flag (DELETE)
        404: Report not found
        500: Store failure
    """
    if kind not in ReportKind.values:
        return _unknown_kind()
    
    actions = ReportActions()
    if request.method == 'GET':
        return _result_response(actions.get(kind, report_id))
    return _result_response(actions.delete(kind, report_id))


@csrf_exempt
@require_http_methods(["POST"])
def api_report_sign(request, kind, report_id):
    """
    POST /api/reports/{kind}/{report_id}/sign
    
    Sign a report.
    
    Request Body:
        End-of-term reports: {"signature": "<supervisor name>"}
        
    Returns:
        200: Signed report
        400: Missing signature
        404: Report not found
        500: Store failure
    """
    if kind not in ReportKind.values:
        return _unknown_kind()
    
    try:
        body = _parse_body(request)
    except ValueError:
        return JsonResponse({'success': False, 'error': 'Invalid JSON payload'}, status=400)
    
    signature = body.get('signature') if isinstance(body, dict) else None
    return _result_response(ReportActions().sign(kind, report_id, signature=signature))
