"""
PDF Styling

Provides the paragraph and table styles shared by the report templates.
The forms are printed black on white, like the paper forms they replace.
"""

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_LEFT
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.platypus import TableStyle


GRID_LINE_WIDTH = 0.25


def get_report_styles():
    """
    Get standard report styles.
    
    Returns:
        Dictionary of ParagraphStyle objects
    """
    styles = getSampleStyleSheet()
    
    return {
        'ReportTitle': ParagraphStyle(
            'ReportTitle',
            parent=styles['Heading1'],
            fontSize=14,
            textColor=colors.black,
            spaceAfter=6,
            alignment=TA_LEFT,
            fontName='Helvetica-Bold'
        ),
        'ReportInstruction': ParagraphStyle(
            'ReportInstruction',
            parent=styles['BodyText'],
            fontSize=10,
            textColor=colors.black,
            spaceAfter=10,
            alignment=TA_LEFT,
            fontName='Helvetica'
        ),
        'ReportHeading': ParagraphStyle(
            'ReportHeading',
            parent=styles['Heading3'],
            fontSize=10,
            textColor=colors.black,
            spaceAfter=4,
            spaceBefore=8,
            alignment=TA_LEFT,
            fontName='Helvetica-Bold'
        ),
        'ReportBody': ParagraphStyle(
            'ReportBody',
            parent=styles['BodyText'],
            fontSize=10,
            textColor=colors.black,
            spaceAfter=4,
            alignment=TA_LEFT,
            fontName='Helvetica'
        ),
        'FieldLabel': ParagraphStyle(
            'FieldLabel',
            parent=styles['Normal'],
            fontSize=10,
            textColor=colors.black,
            alignment=TA_LEFT,
            fontName='Helvetica'
        ),
        'FieldValue': ParagraphStyle(
            'FieldValue',
            parent=styles['Normal'],
            fontSize=10,
            textColor=colors.black,
            alignment=TA_LEFT,
            fontName='Helvetica'
        ),
        'TableHeader': ParagraphStyle(
            'TableHeader',
            parent=styles['Normal'],
            fontSize=9,
            textColor=colors.black,
            alignment=TA_CENTER,
            fontName='Helvetica'
        ),
        'TableCell': ParagraphStyle(
            'TableCell',
            parent=styles['Normal'],
            fontSize=9,
            textColor=colors.black,
            alignment=TA_LEFT,
            fontName='Helvetica'
        ),
    }


def get_table_style():
    """
    Get the plain grid style used for task and rubric tables.
    
    Returns:
        TableStyle with a thin black grid
    """
    return TableStyle([
        ('GRID', (0, 0), (-1, -1), GRID_LINE_WIDTH, colors.black),
        ('FONTNAME', (0, 0), (-1, -1), 'Helvetica'),
        ('FONTSIZE', (0, 0), (-1, -1), 9),
        ('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),
        ('TOPPADDING', (0, 0), (-1, -1), 4),
        ('BOTTOMPADDING', (0, 0), (-1, -1), 4),
    ])


def get_field_table_style(value_cells=()):
    """
    Get the style for label/value rows; each value sits on an underline.
    
    Args:
        value_cells: (column, row) positions of the value cells to underline
    """
    commands = [
        ('FONTNAME', (0, 0), (-1, -1), 'Helvetica'),
        ('FONTSIZE', (0, 0), (-1, -1), 10),
        ('VALIGN', (0, 0), (-1, -1), 'BOTTOM'),
        ('LEFTPADDING', (0, 0), (-1, -1), 0),
        ('BOTTOMPADDING', (0, 0), (-1, -1), 3),
        ('TOPPADDING', (0, 0), (-1, -1), 6),
    ]
    for cell in value_cells:
        commands.append(('LINEBELOW', cell, cell, GRID_LINE_WIDTH, colors.black))
    return TableStyle(commands)


def get_text_box_style():
    """Get the style for a boxed free-text area (plans, comments)."""
    return TableStyle([
        ('BOX', (0, 0), (-1, -1), GRID_LINE_WIDTH, colors.black),
        ('VALIGN', (0, 0), (-1, -1), 'TOP'),
        ('TOPPADDING', (0, 0), (-1, -1), 6),
        ('LEFTPADDING', (0, 0), (-1, -1), 6),
        ('RIGHTPADDING', (0, 0), (-1, -1), 6),
    ])
