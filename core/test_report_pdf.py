"""
Tests for report PDF export
"""

from datetime import date, datetime, timezone as dt_timezone
from unittest import mock

from django.contrib.auth import get_user_model
from django.test import TestCase, Client, override_settings
from django.urls import reverse

from core.models import ReportKind
from core.services.reporting import ReportService
from core.services.reports.export import (
    build_weekly_context,
    build_end_of_term_context,
    format_date,
    format_hours,
    render_report_pdf,
    report_filename,
)
from core.services.reports.fixtures import weekly_payload, end_of_term_payload
from core.services.reports.lifecycle import ReportLifecycleManager

User = get_user_model()


class ExportFormattingTestCase(TestCase):
    """Test cases for print formatting helpers"""
    
    def test_format_date(self):
        self.assertEqual(format_date(date(2024, 3, 4)), 'March 4, 2024')
        self.assertEqual(format_date(None), '')
    
    def test_format_aware_datetime(self):
        value = datetime(2024, 10, 30, 9, 15, tzinfo=dt_timezone.utc)
        self.assertEqual(format_date(value), 'October 30, 2024')
    
    def test_format_hours(self):
        self.assertEqual(format_hours(2.0), '2')
        self.assertEqual(format_hours(12.5), '12.5')
        self.assertEqual(format_hours(None), '')


@override_settings(INTERNTRACK_UNIT_CODE='ICT80004')
class ReportPdfExportTestCase(TestCase):
    """Test cases for exporting stored reports"""
    
    def setUp(self):
        manager = ReportLifecycleManager()
        self.weekly = manager.create(ReportKind.WEEKLY, weekly_payload())
        self.end_of_term = manager.create(ReportKind.END_OF_TERM, end_of_term_payload())
    
    def test_weekly_context(self):
        context = build_weekly_context(self.weekly)
        
        self.assertEqual(context['title'], 'ICT80004 Weekly Communication')
        self.assertEqual(context['date_prepared'], 'June 28, 2024')
        self.assertEqual(context['week_number'], '3')
        self.assertEqual(context['total_hours'], '12.5')
        self.assertEqual([task['hours_spent'] for task in context['tasks']], ['4', '8.5'])
        self.assertEqual(context['tasks'][0]['date'], 'June 24, 2024')
        self.assertEqual(context['logo_path'], '')
    
    def test_end_of_term_context_pending_signature(self):
        """Test that supervisor fields stay empty until the report is signed"""
        context = build_end_of_term_context(self.end_of_term)
        
        self.assertEqual(context['title'], 'ICT80004 Final Internship Project Review Form - Close')
        self.assertEqual(context['supervisor_signature'], '')
        self.assertEqual(context['supervisor_signature_date'], '')
        self.assertEqual(context['student_signature_date'], 'October 24, 2024')
        self.assertEqual([item['score'] for item in context['score_items']], [5, 4, 3, 4, 2])
    
    def test_end_of_term_context_signed(self):
        with mock.patch('core.services.reports.lifecycle.timezone.now',
                        return_value=datetime(2024, 10, 30, 9, 15, tzinfo=dt_timezone.utc)):
            report = ReportLifecycleManager().sign(
                ReportKind.END_OF_TERM, self.end_of_term.id, signature='Sam Lee'
            )
        
        context = build_end_of_term_context(report)
        
        self.assertEqual(context['supervisor_signature'], 'Sam Lee')
        self.assertEqual(context['supervisor_signature_date'], 'October 30, 2024')
    
    def test_report_filename(self):
        self.assertEqual(report_filename(ReportKind.WEEKLY, self.weekly), 'weekly-report-week-3.pdf')
        self.assertEqual(report_filename(ReportKind.END_OF_TERM, self.end_of_term),
                         'end-of-term-report-jane-doe.pdf')
    
    def test_report_filename_without_name_slug(self):
        self.end_of_term.student_name = '***'
        self.assertEqual(report_filename(ReportKind.END_OF_TERM, self.end_of_term),
                         f'end-of-term-report-{self.end_of_term.id}.pdf')
    
    def test_render_weekly_pdf(self):
        result = render_report_pdf(ReportKind.WEEKLY, self.weekly)
        
        self.assertTrue(result.pdf_bytes.startswith(b'%PDF'))
        self.assertEqual(result.content_type, 'application/pdf')
        self.assertEqual(result.filename, 'weekly-report-week-3.pdf')
    
    def test_render_is_repeatable(self):
        """Test that exporting the same report twice gives the same bytes"""
        first = render_report_pdf(ReportKind.END_OF_TERM, self.end_of_term)
        second = render_report_pdf(ReportKind.END_OF_TERM, self.end_of_term)
        
        self.assertEqual(first.pdf_bytes, second.pdf_bytes)
    
    def test_render_uses_registered_template(self):
        service = mock.Mock(spec=ReportService)
        service.render.return_value = b'%PDF-1.4 stub'
        
        result = render_report_pdf(ReportKind.WEEKLY, self.weekly, service=service)
        
        report_key, context = service.render.call_args[0]
        self.assertEqual(report_key, 'weekly.v1')
        self.assertEqual(context['student_name'], 'Jane Doe')
        self.assertEqual(result.pdf_bytes, b'%PDF-1.4 stub')


class ReportPdfViewTestCase(TestCase):
    """Test cases for the PDF download view"""
    
    def setUp(self):
        self.client = Client()
        self.user = User.objects.create_user(username='staff', password='testpass', is_staff=True)
        self.report = ReportLifecycleManager().create(ReportKind.WEEKLY, weekly_payload())
        self.url = reverse('report-pdf', kwargs={'kind': 'weekly', 'report_id': self.report.id})
    
    def test_pdf_url(self):
        self.assertEqual(self.url, f'/reports/weekly/{self.report.id}/pdf/')
    
    def test_pdf_view_requires_login(self):
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 302)
        self.assertIn('/login/', response.url)
    
    def test_pdf_view_refuses_non_staff(self):
        User.objects.create_user(username='student', password='testpass')
        self.client.login(username='student', password='testpass')
        
        response = self.client.get(self.url)
        
        self.assertEqual(response.status_code, 302)
        self.assertIn('/login/', response.url)
    
    def test_pdf_view_returns_attachment(self):
        self.client.login(username='staff', password='testpass')
        
        response = self.client.get(self.url)
        
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response['Content-Type'], 'application/pdf')
        self.assertEqual(response['Content-Disposition'], 'attachment; filename="weekly-report-week-3.pdf"')
        self.assertTrue(response.content.startswith(b'%PDF'))
    
    def test_pdf_view_missing_report(self):
        self.client.login(username='staff', password='testpass')
        
        url = reverse('report-pdf', kwargs={'kind': 'end_of_term', 'report_id': self.report.id})
        self.assertEqual(self.client.get(url).status_code, 404)
    
    def test_pdf_view_unknown_kind(self):
        self.client.login(username='staff', password='testpass')
        
        url = reverse('report-pdf', kwargs={'kind': 'mid_term', 'report_id': self.report.id})
        self.assertEqual(self.client.get(url).status_code, 404)
