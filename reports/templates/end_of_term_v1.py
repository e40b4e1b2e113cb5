"""
Final Internship Project Review Template (v1)

Template for the end-of-term review: rubric self-assessment, comments and
signatures of student and industry supervisor.
"""

from xml.sax.saxutils import escape

from reportlab.graphics.shapes import Drawing, Circle
from reportlab.lib import colors
from reportlab.lib.units import cm
from reportlab.platypus import Paragraph, Spacer, Table

from core.rubric import SCORE_DESCRIPTIONS, MAX_SCORE, MIN_SCORE
from core.services.reporting.canvas import draw_header, draw_logo, draw_footer
from core.services.reporting.styles import (
    get_report_styles,
    get_table_style,
    get_field_table_style,
    get_text_box_style,
)

MARK_SIZE = 10


def _text(value):
    return escape(str(value or '')).replace('\n', '<br/>')


def score_mark(selected: bool) -> Drawing:
    """An open circle, filled when the score is the chosen one."""
    mark = Drawing(MARK_SIZE, MARK_SIZE)
    centre = MARK_SIZE / 2
    mark.add(Circle(centre, centre, 4, strokeColor=colors.black, strokeWidth=0.5, fillColor=None))
    if selected:
        mark.add(Circle(centre, centre, 2.5, strokeColor=None, fillColor=colors.black))
    return mark


class EndOfTermReportV1:
    """Template for end-of-term reports version 1"""
    
    def __init__(self):
        self.styles = get_report_styles()
    
    def _rubric_table(self, score_items):
        header = self.styles['TableHeader']
        cell = self.styles['TableCell']
        scores = list(range(MAX_SCORE, MIN_SCORE - 1, -1))
        
        table_data = [
            [Paragraph('Knowledge / Your perception', cell)]
            + [Paragraph(SCORE_DESCRIPTIONS[score], header) for score in scores]
        ]
        for number, item in enumerate(score_items, start=1):
            table_data.append(
                [Paragraph(f"{number}. {_text(item.get('question'))}", cell)]
                + [score_mark(item.get('score') == score) for score in scores]
            )
        
        table = Table(table_data, colWidths=[6.4 * cm] + [1.96 * cm] * len(scores), repeatRows=1)
        style = get_table_style()
        style.add('ALIGN', (1, 1), (-1, -1), 'CENTER')
        table.setStyle(style)
        return table
    
    def _text_box(self, content):
        box = Table([[Paragraph(_text(content), self.styles['ReportBody'])]], colWidths=[16.2 * cm])
        box.setStyle(get_text_box_style())
        return box
    
    def build_story(self, context: dict) -> list:
        """
        Build the PDF story from context data.
        
        Expected context structure:
        {
            'title': str,
            'instruction': str,
            'student_name': str,
            'student_id': str,
            'organisation': str,
            'industry_supervisor': str,
            'date_of_submit': str (display date),
            'score_items': list of dict with 'question' and 'score' (int),
            'student_comments': str,
            'supervisor_comments': str,
            'student_signature': str,
            'student_signature_date': str (display date),
            'supervisor_signature': str ('' while pending),
            'supervisor_signature_date': str ('' while pending),
            'logo_path': str (optional),
        }
        """
        story = []
        body = self.styles['ReportBody']
        
        details = [
            ['Student Name:', Paragraph(_text(context.get('student_name')), body),
             'ID:', Paragraph(_text(context.get('student_id')), body)],
            ['Organisation:', Paragraph(_text(context.get('organisation')), body), '', ''],
            ['Industry Supervisor:', Paragraph(_text(context.get('industry_supervisor')), body),
             'Date:', Paragraph(_text(context.get('date_of_submit')), body)],
        ]
        details_table = Table(details, colWidths=[3.6 * cm, 6.6 * cm, 1.4 * cm, 4.6 * cm])
        details_table.setStyle(get_field_table_style(
            value_cells=[(1, 0), (3, 0), (1, 1), (1, 2), (3, 2)]
        ))
        story.append(details_table)
        story.append(Spacer(1, 0.6 * cm))
        
        # Rubric
        story.append(Paragraph(
            'Rate your current level of knowledge on the following by ticking on the appropriate box.',
            self.styles['ReportHeading']
        ))
        story.append(Paragraph(
            '(Complete this in consultation with your industry supervisor)',
            self.styles['ReportHeading']
        ))
        story.append(self._rubric_table(context.get('score_items', [])))
        story.append(Spacer(1, 0.5 * cm))
        
        # Comments
        story.append(Paragraph('Student Comments:', self.styles['ReportHeading']))
        story.append(self._text_box(context.get('student_comments')))
        story.append(Paragraph('Supervisor Comments:', self.styles['ReportHeading']))
        story.append(self._text_box(context.get('supervisor_comments')))
        story.append(Spacer(1, 0.8 * cm))
        
        # Signatures
        signatures = [
            ['Student Signature:', Paragraph(_text(context.get('student_signature')), body),
             'Date:', Paragraph(_text(context.get('student_signature_date')), body)],
            ['Supervisor Signature:', Paragraph(_text(context.get('supervisor_signature')), body),
             'Date:', Paragraph(_text(context.get('supervisor_signature_date')), body)],
        ]
        signatures_table = Table(signatures, colWidths=[3.8 * cm, 6.4 * cm, 1.4 * cm, 4.6 * cm])
        signatures_table.setStyle(get_field_table_style(
            value_cells=[(1, 0), (3, 0), (1, 1), (3, 1)]
        ))
        story.append(signatures_table)
        
        return story
    
    def draw_header_footer(self, canvas, doc, context: dict):
        """Draw header and footer on each page"""
        draw_header(
            canvas, doc,
            context.get('title', 'Final Internship Project Review Form - Close'),
            context.get('instruction'),
        )
        draw_logo(canvas, doc, context.get('logo_path'))
        draw_footer(canvas, doc, context.get('student_name') or None)
