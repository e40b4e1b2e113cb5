"""
Core Report Service

Renders registered report templates to PDF bytes with ReportLab Platypus.
Rendering is repeatable: the document is written in ReportLab's invariant
mode, so the same context always yields the same bytes.
"""

import logging
from io import BytesIO

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import cm
from reportlab.platypus import SimpleDocTemplate

from .registry import get_template

logger = logging.getLogger(__name__)


class ReportService:
    """
    Core service for PDF report rendering.
    
    This service provides:
    - PDF rendering using ReportLab Platypus
    - Template-based report generation via registry
    - Repeatable generation (same input → same output)
    """
    
    def render(self, report_key: str, context: dict) -> bytes:
        """
        Render a report to PDF bytes.
        
        Args:
            report_key: Report template identifier (e.g., 'weekly.v1')
            context: Serializable dict with report data
            
        Returns:
            PDF content as bytes
            
        Raises:
            KeyError: If report_key is not registered
        """
        template = get_template(report_key)
        
        buffer = BytesIO()
        
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=2.4 * cm,
            leftMargin=2.4 * cm,
            topMargin=3.5 * cm,    # room for header and logo
            bottomMargin=2.5 * cm,
            title=context.get('title', ''),
            author=context.get('student_name', ''),
            invariant=1,
        )
        
        story = template.build_story(context)
        
        if hasattr(template, 'draw_header_footer'):
            def on_page(canvas, doc_obj):
                template.draw_header_footer(canvas, doc_obj, context)
            
            doc.build(story, onFirstPage=on_page, onLaterPages=on_page)
        else:
            doc.build(story)
        
        pdf_bytes = buffer.getvalue()
        buffer.close()
        
        logger.debug(f"Rendered {report_key} ({len(pdf_bytes)} bytes)")
        return pdf_bytes
