"""
URL Configuration for the Reports API.

All endpoints are under /api/reports/ and require authentication via x-api-secret header.
"""
from django.urls import path
from . import views_api

urlpatterns = [
    path('<str:kind>', views_api.api_reports, name='api-reports'),
    path('<str:kind>/<str:report_id>', views_api.api_report_detail, name='api-report-detail'),
    path('<str:kind>/<str:report_id>/sign', views_api.api_report_sign, name='api-report-sign'),
]
