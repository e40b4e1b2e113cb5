"""
Tests for report drafts
"""

from datetime import date

from django.http import QueryDict
from django.test import SimpleTestCase

from core.models import ReportKind
from core.rubric import END_OF_TERM_QUESTIONS
from core.services.reports.drafts import ReportDraft

TODAY = date(2024, 3, 4)


class WeeklyDraftTestCase(SimpleTestCase):
    """Test cases for weekly report drafts"""
    
    def setUp(self):
        self.draft = ReportDraft.empty(ReportKind.WEEKLY, today=TODAY)
    
    def test_empty_draft_has_one_task(self):
        self.assertEqual(len(self.draft.children), 1)
        self.assertEqual(dict(self.draft.children[0]), {
            'day': '1',
            'date': '2024-03-04',
            'description': '',
            'hours_spent': '',
        })
        self.assertEqual(self.draft.values['student_name'], '')
    
    def test_with_value_returns_new_draft(self):
        """Test that drafts are never changed in place"""
        updated = self.draft.with_value('student_name', 'Jane Doe')
        
        self.assertEqual(updated.values['student_name'], 'Jane Doe')
        self.assertEqual(self.draft.values['student_name'], '')
        with self.assertRaises(TypeError):
            updated.values['student_name'] = 'Other'
    
    def test_with_value_unknown_field(self):
        with self.assertRaises(KeyError):
            self.draft.with_value('total_hours', 3)
    
    def test_with_value_clears_field_error(self):
        draft = self.draft.with_errors({
            'student_name': ['Student name is required'],
            'organisation': ['Organisation is required'],
        })
        
        draft = draft.with_value('student_name', 'Jane Doe')
        
        self.assertEqual(draft.errors_for('student_name'), ())
        self.assertEqual(draft.errors_for('organisation'), ('Organisation is required',))
    
    def test_add_child(self):
        """Test that added rows start on day 1 dated today"""
        draft = self.draft.with_child_value(0, 'day', '3').add_child()
        
        self.assertEqual(len(draft.children), 2)
        self.assertEqual(draft.children[0]['day'], '3')
        self.assertEqual(draft.children[1]['day'], '1')
        self.assertEqual(draft.children[1]['date'], '2024-03-04')
    
    def test_add_child_clears_collection_error(self):
        draft = self.draft.with_errors({'tasks': ['At least one task is required']})
        self.assertEqual(draft.add_child().errors_for('tasks'), ())
    
    def test_with_child_value_bounds(self):
        with self.assertRaises(IndexError):
            self.draft.with_child_value(1, 'description', 'x')
        with self.assertRaises(KeyError):
            self.draft.with_child_value(0, 'question', 'x')
    
    def test_remove_last_row_is_noop(self):
        self.assertIs(self.draft.remove_child(0), self.draft)
    
    def test_remove_child_moves_row_errors(self):
        """Test that errors of later rows follow their rows"""
        draft = (
            self.draft.add_child().add_child()
            .with_child_value(2, 'description', 'Third')
            .with_errors({
                'tasks.0.description': ['Task description is required'],
                'tasks.2.hours_spent': ['Hours spent are required'],
                'student_name': ['Student name is required'],
            })
        )
        
        draft = draft.remove_child(0)
        
        self.assertEqual(len(draft.children), 2)
        self.assertEqual(draft.children[1]['description'], 'Third')
        self.assertEqual(dict(draft.errors), {
            'tasks.1.hours_spent': ('Hours spent are required',),
            'student_name': ('Student name is required',),
        })
    
    def test_rows_split_errors_per_row(self):
        draft = self.draft.add_child().with_errors({'tasks.1.day': ['Day is required']})
        
        rows = draft.rows()
        
        self.assertEqual(rows[0]['errors'], {})
        self.assertEqual(rows[1]['index'], 1)
        self.assertEqual(rows[1]['errors'], {'day': ('Day is required',)})
    
    def test_total_hours_ignores_unparseable_rows(self):
        draft = (
            self.draft.add_child().add_child()
            .with_child_value(0, 'hours_spent', '4')
            .with_child_value(1, 'hours_spent', '2.5')
            .with_child_value(2, 'hours_spent', 'soon')
        )
        self.assertEqual(draft.total_hours(), 6.5)
    
    def test_to_payload(self):
        draft = (
            self.draft.with_value('week_number', '3')
            .with_child_value(0, 'hours_spent', '7.5')
            .with_child_value(0, 'description', 'Set up CI')
        )
        
        payload = draft.to_payload()
        
        self.assertEqual(payload['week_number'], '3')
        self.assertEqual(payload['total_hours'], 7.5)
        self.assertEqual(payload['tasks'], [{
            'day': '1', 'date': '2024-03-04', 'description': 'Set up CI', 'hours_spent': '7.5',
        }])
    
    def test_from_form_data(self):
        """Test that dotted task keys are read in index order"""
        data = QueryDict(mutable=True)
        data.update({
            'student_name': 'Jane Doe',
            'tasks.1.description': 'Second',
            'tasks.0.description': 'First',
            'tasks.0.day': '2',
            'score_items.0.score': '5',
            'csrfmiddlewaretoken': 'token',
        })
        
        draft = ReportDraft.from_form_data(ReportKind.WEEKLY, data, today=TODAY)
        
        self.assertEqual(draft.values['student_name'], 'Jane Doe')
        self.assertEqual(draft.values['week_number'], '')
        self.assertEqual([row['description'] for row in draft.children], ['First', 'Second'])
        self.assertEqual(draft.children[0]['day'], '2')
        self.assertEqual(draft.children[1]['day'], '')


class EndOfTermDraftTestCase(SimpleTestCase):
    """Test cases for end-of-term report drafts"""
    
    def setUp(self):
        self.draft = ReportDraft.empty(ReportKind.END_OF_TERM, today=TODAY)
    
    def test_empty_draft_lists_rubric(self):
        self.assertEqual([row['question'] for row in self.draft.children], list(END_OF_TERM_QUESTIONS))
        self.assertTrue(all(row['score'] == '' for row in self.draft.children))
    
    def test_rows_are_fixed(self):
        with self.assertRaises(ValueError):
            self.draft.add_child()
        with self.assertRaises(ValueError):
            self.draft.remove_child(0)
    
    def test_to_payload_has_no_total_hours(self):
        payload = self.draft.with_child_value(2, 'score', '4').to_payload()
        
        self.assertNotIn('total_hours', payload)
        self.assertEqual(len(payload['score_items']), 5)
        self.assertEqual(payload['score_items'][2]['score'], '4')
        self.assertEqual(self.draft.total_hours(), 0.0)
