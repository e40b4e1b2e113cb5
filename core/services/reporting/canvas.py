"""
Canvas Helpers

Provides helper functions for drawing headers, logos, footers and page
numbers. Nothing drawn here depends on the time of rendering.
"""

import logging

from reportlab.lib import colors
from reportlab.lib.units import cm
from reportlab.lib.utils import ImageReader

logger = logging.getLogger(__name__)

LOGO_WIDTH = 3.6 * cm
LOGO_HEIGHT = 1.8 * cm


def draw_page_number(canvas, doc):
    """
    Draw the page number at the bottom centre.
    
    Args:
        canvas: ReportLab canvas object
        doc: ReportLab document object
    """
    canvas.saveState()
    canvas.setFont('Helvetica', 8)
    canvas.setFillColor(colors.HexColor('#666666'))
    canvas.drawCentredString(
        doc.pagesize[0] / 2,
        1.2 * cm,
        f"Page {canvas.getPageNumber()}"
    )
    canvas.restoreState()


def draw_header(canvas, doc, title, subtitle=None):
    """
    Draw the form title, underlined, with an optional instruction line.
    
    Args:
        canvas: ReportLab canvas object
        doc: ReportLab document object
        title: Form title (e.g., 'ICT80004 Weekly Communication')
        subtitle: Optional instruction text below the title
    """
    canvas.saveState()
    
    x = doc.leftMargin
    y = doc.pagesize[1] - 2.6 * cm
    
    canvas.setFont('Helvetica-Bold', 13)
    canvas.setFillColor(colors.black)
    canvas.drawString(x, y, title)
    
    canvas.setStrokeColor(colors.black)
    canvas.setLineWidth(0.5)
    canvas.line(x, y - 2, x + canvas.stringWidth(title, 'Helvetica-Bold', 13), y - 2)
    
    if subtitle:
        canvas.setFont('Helvetica', 9)
        canvas.drawString(x, y - 0.6 * cm, subtitle)
    
    canvas.restoreState()


def draw_logo(canvas, doc, logo_path):
    """
    Draw the institution logo in the top right corner.
    
    A missing or unreadable image is logged and skipped.
    
    Args:
        canvas: ReportLab canvas object
        doc: ReportLab document object
        logo_path: Path to the image file, or None
    """
    if not logo_path:
        return
    
    try:
        image = ImageReader(str(logo_path))
    except (OSError, IOError) as e:
        logger.warning(f"Could not read logo {logo_path}: {e}")
        return
    
    canvas.saveState()
    canvas.drawImage(
        image,
        doc.pagesize[0] - doc.rightMargin - LOGO_WIDTH,
        doc.pagesize[1] - 1 * cm - LOGO_HEIGHT,
        width=LOGO_WIDTH,
        height=LOGO_HEIGHT,
        preserveAspectRatio=True,
        mask='auto',
    )
    canvas.restoreState()


def draw_footer(canvas, doc, footer_text=None):
    """
    Draw a footer with optional text and the page number.
    
    Args:
        canvas: ReportLab canvas object
        doc: ReportLab document object
        footer_text: Optional footer text (drawn on left side)
    """
    canvas.saveState()
    
    canvas.setStrokeColor(colors.HexColor('#cccccc'))
    canvas.setLineWidth(0.5)
    canvas.line(doc.leftMargin, 1.8 * cm, doc.pagesize[0] - doc.rightMargin, 1.8 * cm)
    
    if footer_text:
        canvas.setFont('Helvetica', 8)
        canvas.setFillColor(colors.HexColor('#666666'))
        canvas.drawString(doc.leftMargin, 1.2 * cm, footer_text)
    
    draw_page_number(canvas, doc)
    
    canvas.restoreState()
