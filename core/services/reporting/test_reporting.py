"""
Tests for the PDF report service and templates
"""

from io import BytesIO

from django.test import SimpleTestCase
from reportlab.graphics.shapes import Drawing
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import cm
from reportlab.pdfgen import canvas as pdf_canvas
from reportlab.platypus import Table

from core.rubric import END_OF_TERM_QUESTIONS
from core.services.reporting import ReportService
from core.services.reporting.registry import (
    TemplateRegistry,
    is_registered,
    list_templates,
)
from reports.templates.weekly_v1 import WeeklyReportV1
from reports.templates.end_of_term_v1 import EndOfTermReportV1, score_mark


WEEKLY_CONTEXT = {
    'title': 'ICT80004 Weekly Communication',
    'instruction': 'To be submitted to Canvas.',
    'student_name': 'Jane Doe',
    'student_id': '103456789',
    'organisation': 'Acme Pty Ltd',
    'industry_supervisor': 'Sam Lee',
    'date_prepared': 'June 28, 2024',
    'week_number': '3',
    'tasks': [
        {'day': '1', 'date': 'June 24, 2024', 'description': 'Set up <the> environment', 'hours_spent': '4'},
        {'day': '2', 'date': 'June 25, 2024', 'description': 'Reviewed\nthe data model', 'hours_spent': '8.5'},
    ],
    'total_hours': '12.5',
    'plans_for_next_week': 'Write the import job & tests',
    'logo_path': '',
}

END_OF_TERM_CONTEXT = {
    'title': 'ICT80004 Final Internship Project Review Form - Close',
    'instruction': 'To be submitted to Canvas by week 13.',
    'student_name': 'Jane Doe',
    'student_id': '103456789',
    'organisation': 'Acme Pty Ltd',
    'industry_supervisor': 'Sam Lee',
    'date_of_submit': 'October 25, 2024',
    'score_items': [
        {'question': question, 'score': score}
        for question, score in zip(END_OF_TERM_QUESTIONS, (5, 4, 3, 4, 2))
    ],
    'student_comments': 'Learned a lot.',
    'supervisor_comments': 'Reliable and curious.',
    'student_signature': 'Jane Doe',
    'student_signature_date': 'October 24, 2024',
    'supervisor_signature': '',
    'supervisor_signature_date': '',
    'logo_path': '',
}


class MockDoc:
    """Just enough of a document for the canvas helpers"""
    pagesize = A4
    leftMargin = 2.4 * cm
    rightMargin = 2.4 * cm


class TemplateRegistryTestCase(SimpleTestCase):
    """Test cases for the template registry"""
    
    def setUp(self):
        self.registry = TemplateRegistry()
    
    def test_register_template(self):
        self.registry.register('weekly.v9', WeeklyReportV1)
        self.assertTrue(self.registry.is_registered('weekly.v9'))
    
    def test_register_duplicate_raises_error(self):
        self.registry.register('weekly.v9', WeeklyReportV1)
        
        with self.assertRaises(ValueError) as cm:
            self.registry.register('weekly.v9', EndOfTermReportV1)
        
        self.assertIn("already registered", str(cm.exception))
    
    def test_get_template_builds_new_instance(self):
        self.registry.register('weekly.v9', WeeklyReportV1)
        
        first = self.registry.get_template('weekly.v9')
        
        self.assertIsInstance(first, WeeklyReportV1)
        self.assertIsNot(first, self.registry.get_template('weekly.v9'))
    
    def test_get_unregistered_template_raises_error(self):
        with self.assertRaises(KeyError) as cm:
            self.registry.get_template('nonexistent.v1')
        
        self.assertIn("not found", str(cm.exception))
    
    def test_list_templates_sorted(self):
        self.registry.register('weekly.v1', WeeklyReportV1)
        self.registry.register('end_of_term.v1', EndOfTermReportV1)
        
        self.assertEqual(self.registry.list_templates(), ['end_of_term.v1', 'weekly.v1'])
    
    def test_report_templates_registered_on_startup(self):
        self.assertTrue(is_registered('weekly.v1'))
        self.assertTrue(is_registered('end_of_term.v1'))
        self.assertIn('weekly.v1', list_templates())


class ReportServiceTestCase(SimpleTestCase):
    """Test cases for ReportService"""
    
    def setUp(self):
        self.service = ReportService()
    
    def test_render_generates_pdf(self):
        pdf_bytes = self.service.render('weekly.v1', WEEKLY_CONTEXT)
        
        self.assertIsInstance(pdf_bytes, bytes)
        self.assertTrue(pdf_bytes.startswith(b'%PDF'))
    
    def test_render_is_repeatable(self):
        """Test that the same context renders to the same bytes"""
        first = self.service.render('end_of_term.v1', END_OF_TERM_CONTEXT)
        second = self.service.render('end_of_term.v1', END_OF_TERM_CONTEXT)
        
        self.assertEqual(first, second)
    
    def test_render_with_invalid_report_key_raises_error(self):
        with self.assertRaises(KeyError):
            self.service.render('invalid.v1', {'title': 'Test'})
    
    def test_multi_page_weekly_report(self):
        context = dict(WEEKLY_CONTEXT)
        context['tasks'] = [
            {'day': str(i % 7 + 1), 'date': 'June 24, 2024', 'description': f'Task {i}', 'hours_spent': '1'}
            for i in range(120)
        ]
        
        pdf_bytes = self.service.render('weekly.v1', context)
        
        self.assertTrue(pdf_bytes.startswith(b'%PDF'))


class WeeklyReportV1TestCase(SimpleTestCase):
    """Test cases for the weekly template"""
    
    def setUp(self):
        self.template = WeeklyReportV1()
    
    def test_build_story_has_tables(self):
        story = self.template.build_story(WEEKLY_CONTEXT)
        
        tables = [item for item in story if isinstance(item, Table)]
        # details, tasks, total hours, plans
        self.assertEqual(len(tables), 4)
        # header row plus one row per task
        self.assertEqual(len(tables[1]._cellvalues), 3)
    
    def test_build_story_without_tasks(self):
        context = dict(WEEKLY_CONTEXT, tasks=[])
        story = self.template.build_story(context)
        self.assertGreater(len(story), 0)
    
    def test_draw_header_footer(self):
        buffer = BytesIO()
        c = pdf_canvas.Canvas(buffer, pagesize=A4)
        
        self.template.draw_header_footer(c, MockDoc(), WEEKLY_CONTEXT)
        
        c.save()
        self.assertTrue(buffer.getvalue().startswith(b'%PDF'))


class EndOfTermReportV1TestCase(SimpleTestCase):
    """Test cases for the end-of-term template"""
    
    def setUp(self):
        self.template = EndOfTermReportV1()
    
    def test_score_mark(self):
        self.assertIsInstance(score_mark(True), Drawing)
        self.assertEqual(len(score_mark(True).contents), 2)
        self.assertEqual(len(score_mark(False).contents), 1)
    
    def test_rubric_table_marks_chosen_score(self):
        table = self.template._rubric_table(END_OF_TERM_CONTEXT['score_items'])
        
        rows = table._cellvalues
        self.assertEqual(len(rows), 6)
        # Columns run from score 5 down to 1; the first question scored 5
        marks = [len(cell.contents) for cell in rows[1][1:]]
        self.assertEqual(marks, [2, 1, 1, 1, 1])
        marks = [len(cell.contents) for cell in rows[5][1:]]
        self.assertEqual(marks, [1, 1, 1, 2, 1])
    
    def test_build_story_pending_signature(self):
        story = self.template.build_story(END_OF_TERM_CONTEXT)
        self.assertGreater(len([item for item in story if isinstance(item, Table)]), 3)
    
    def test_draw_header_footer(self):
        buffer = BytesIO()
        c = pdf_canvas.Canvas(buffer, pagesize=A4)
        
        self.template.draw_header_footer(c, MockDoc(), END_OF_TERM_CONTEXT)
        
        c.save()
        self.assertGreater(len(buffer.getvalue()), 0)
