"""
Weekly Communication Template (v1)

Template for the weekly report a student sends to their industry supervisor.
"""

from xml.sax.saxutils import escape

from reportlab.lib.units import cm
from reportlab.platypus import Paragraph, Spacer, Table

from core.services.reporting.canvas import draw_header, draw_logo, draw_footer
from core.services.reporting.styles import (
    get_report_styles,
    get_table_style,
    get_field_table_style,
    get_text_box_style,
)


def _text(value):
    """Escape user text for a Paragraph and keep its line breaks."""
    return escape(str(value or '')).replace('\n', '<br/>')


class WeeklyReportV1:
    """Template for weekly reports version 1"""
    
    def __init__(self):
        self.styles = get_report_styles()
    
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
            'date_prepared': str (display date),
            'week_number': str,
            'tasks': list of dict with 'day', 'date', 'description', 'hours_spent',
            'total_hours': str,
            'plans_for_next_week': str,
            'logo_path': str (optional),
        }
        """
        story = []
        body = self.styles['ReportBody']
        cell = self.styles['TableCell']
        header = self.styles['TableHeader']
        
        # Student details
        details = [
            ['Student Name:', Paragraph(_text(context.get('student_name')), body),
             'ID:', Paragraph(_text(context.get('student_id')), body)],
            ['Organisation:', Paragraph(_text(context.get('organisation')), body), '', ''],
            ['Industry Supervisor:', Paragraph(_text(context.get('industry_supervisor')), body), '', ''],
            ['Date Prepared:', Paragraph(_text(context.get('date_prepared')), body),
             'Internship Week #:', Paragraph(_text(context.get('week_number')), body)],
        ]
        details_table = Table(details, colWidths=[3.6 * cm, 6.4 * cm, 3.2 * cm, 3 * cm])
        details_table.setStyle(get_field_table_style(
            value_cells=[(1, 0), (3, 0), (1, 1), (1, 2), (1, 3), (3, 3)]
        ))
        story.append(details_table)
        story.append(Spacer(1, 0.6 * cm))
        
        # Tasks
        table_data = [[
            Paragraph('Day', header),
            Paragraph('Date', header),
            Paragraph('Task(s) Ongoing and/or Completed', header),
            Paragraph('Hours', header),
        ]]
        for task in context.get('tasks', []):
            table_data.append([
                Paragraph(_text(task.get('day')), header),
                Paragraph(_text(task.get('date')), cell),
                Paragraph(_text(task.get('description')), cell),
                Paragraph(_text(task.get('hours_spent')), header),
            ])
        
        tasks_table = Table(table_data, colWidths=[1.4 * cm, 3.4 * cm, 9.4 * cm, 2 * cm], repeatRows=1)
        tasks_table.setStyle(get_table_style())
        story.append(tasks_table)
        story.append(Spacer(1, 0.5 * cm))
        
        # Summary
        total = Table(
            [['Total hours completed for the week:', Paragraph(_text(context.get('total_hours')), body)]],
            colWidths=[6.4 * cm, 3 * cm],
            hAlign='LEFT',
        )
        total.setStyle(get_field_table_style(value_cells=[(1, 0)]))
        story.append(total)
        story.append(Spacer(1, 0.4 * cm))
        
        story.append(Paragraph(
            'Plans for next week (include notes on extra days, absences and make up days if applicable)',
            body
        ))
        plans = Table(
            [[Paragraph(_text(context.get('plans_for_next_week')), body)]],
            colWidths=[16.2 * cm],
        )
        plans.setStyle(get_text_box_style())
        story.append(plans)
        
        return story
    
    def draw_header_footer(self, canvas, doc, context: dict):
        """Draw header and footer on each page"""
        draw_header(canvas, doc, context.get('title', 'Weekly Communication'), context.get('instruction'))
        draw_logo(canvas, doc, context.get('logo_path'))
        
        week = context.get('week_number')
        footer_text = f"{context.get('student_name', '')} - Week {week}" if week else None
        draw_footer(canvas, doc, footer_text)
