from django.urls import path
from . import views

urlpatterns = [
    path('', views.home, name='home'),
    path('login/', views.login_view, name='login'),
    path('logout/', views.logout_view, name='logout'),
    
    # Student submission forms
    path('reports/weekly/new/', views.weekly_report_create, name='weekly-report-create'),
    path('reports/end-of-term/new/', views.end_of_term_report_create, name='end-of-term-report-create'),
    
    # Staff management
    path('reports/manage/', views.reports_manage, name='reports-manage'),
    path('reports/<str:kind>/<str:report_id>/sign/', views.report_sign, name='report-sign'),
    path('reports/<str:kind>/<str:report_id>/delete/', views.report_delete, name='report-delete'),
    path('reports/<str:kind>/<str:report_id>/pdf/', views.report_pdf, name='report-pdf'),
]
