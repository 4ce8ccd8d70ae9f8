"""
Bidirectional (Arabic/Latin) PDF receipt for form submissions.
"""

from .text_direction import TextDirection, classify, contains_rtl, is_pure_rtl, prepare_text, shape
from .fonts import ReceiptFonts, resolve_fonts_for_app, resolve_receipt_fonts
from .layout import DrawContext, render_field, render_multiline
from .generator import InvalidSubmissionError, build_receipt_pdf, generate_receipt, receipt_filename

__all__ = [
    # Text direction
    'TextDirection',
    'classify',
    'contains_rtl',
    'is_pure_rtl',
    'prepare_text',
    'shape',
    # Fonts
    'ReceiptFonts',
    'resolve_fonts_for_app',
    'resolve_receipt_fonts',
    # Layout
    'DrawContext',
    'render_field',
    'render_multiline',
    # Document
    'InvalidSubmissionError',
    'build_receipt_pdf',
    'generate_receipt',
    'receipt_filename',
]
