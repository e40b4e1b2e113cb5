"""
Core Report Service

Provides generic PDF report rendering through registered templates.
"""

from .dto import PdfResult
from .service import ReportService

__all__ = ['PdfResult', 'ReportService']
