"""
Tests for the report admin
"""

from django.contrib.auth import get_user_model
from django.test import TestCase, Client
from django.urls import reverse

from core.models import ReportKind, WeeklyReport, EndOfTermReport
from core.services.reports.fixtures import weekly_payload, end_of_term_payload
from core.services.reports.lifecycle import ReportLifecycleManager
from core.services.reports.signals import report_changed

User = get_user_model()


class ReportAdminTestCase(TestCase):
    """Test cases for admin actions on reports"""

    def setUp(self):
        self.client = Client()
        self.admin = User.objects.create_superuser(username='admin', email='admin@example.com', password='adminpass')
        self.client.login(username='admin', password='adminpass')
        manager = ReportLifecycleManager()
        self.weekly = manager.create(ReportKind.WEEKLY, weekly_payload())
        self.end_of_term = manager.create(ReportKind.END_OF_TERM, end_of_term_payload())
        self.events = []
        report_changed.connect(self._record_event)

    def tearDown(self):
        report_changed.disconnect(self._record_event)

    def _record_event(self, sender, kind, report_id, action, **kwargs):
        self.events.append((kind, report_id, action))

    def test_changelist_loads(self):
        self.assertEqual(self.client.get(reverse('admin:core_weeklyreport_changelist')).status_code, 200)
        self.assertEqual(self.client.get(reverse('admin:core_endoftermreport_changelist')).status_code, 200)

    def test_change_form_is_view_only(self):
        url = reverse('admin:core_endoftermreport_change', args=[self.end_of_term.pk])

        response = self.client.get(url)

        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'Jane Doe')
        self.assertNotContains(response, 'name="_save"')

    def test_change_form_post_cannot_unsign_or_drop_tasks(self):
        ReportLifecycleManager().sign(ReportKind.WEEKLY, self.weekly.id)
        task_ids = [task.pk for task in self.weekly.tasks.all()]
        url = reverse('admin:core_weeklyreport_change', args=[self.weekly.pk])
        data = {
            'student_name': 'Jane Doe',
            'student_id': '103456789',
            'organisation': 'Acme Pty Ltd',
            'industry_supervisor': 'Sam Lee',
            'date_prepared': '2024-06-28',
            'week_number': '3',
            'total_hours': '99',
            'plans_for_next_week': 'Nothing',
            'created_at_0': '2024-06-28',
            'created_at_1': '10:00:00',
            'tasks-TOTAL_FORMS': str(len(task_ids)),
            'tasks-INITIAL_FORMS': str(len(task_ids)),
            'tasks-MIN_NUM_FORMS': '0',
            'tasks-MAX_NUM_FORMS': '0',
            '_save': 'Save',
        }
        for index, task_id in enumerate(task_ids):
            data[f'tasks-{index}-id'] = str(task_id)
            data[f'tasks-{index}-report'] = str(self.weekly.pk)
            data[f'tasks-{index}-DELETE'] = 'on'

        response = self.client.post(url, data)

        self.assertEqual(response.status_code, 403)
        report = WeeklyReport.objects.get(pk=self.weekly.pk)
        self.assertTrue(report.is_signed)
        self.assertEqual(report.total_hours, 12.5)
        self.assertEqual(report.tasks.count(), 2)

    def test_add_view_is_disabled(self):
        self.assertEqual(self.client.get(reverse('admin:core_weeklyreport_add')).status_code, 403)
        self.assertEqual(self.client.get(reverse('admin:core_endoftermreport_add')).status_code, 403)

    def test_sign_reports_action(self):
        response = self.client.post(reverse('admin:core_weeklyreport_changelist'), {
            'action': 'sign_reports',
            '_selected_action': [str(self.weekly.pk)],
        })

        self.assertEqual(response.status_code, 302)
        self.weekly.refresh_from_db()
        self.assertTrue(self.weekly.is_signed)
        self.assertEqual(self.events, [(ReportKind.WEEKLY, self.weekly.pk, 'signed')])

    def test_delete_selected_goes_through_lifecycle(self):
        response = self.client.post(reverse('admin:core_endoftermreport_changelist'), {
            'action': 'delete_selected',
            '_selected_action': [str(self.end_of_term.pk)],
            'post': 'yes',
        })

        self.assertEqual(response.status_code, 302)
        self.assertFalse(EndOfTermReport.objects.exists())
        self.assertEqual(self.events, [(ReportKind.END_OF_TERM, self.end_of_term.pk, 'deleted')])

    def test_delete_view(self):
        url = reverse('admin:core_weeklyreport_delete', args=[self.weekly.pk])

        response = self.client.post(url, {'post': 'yes'})

        self.assertEqual(response.status_code, 302)
        self.assertFalse(WeeklyReport.objects.exists())
