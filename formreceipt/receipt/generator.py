"""Assemble the submission receipt PDF."""

import logging
import os
from io import BytesIO

from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

from formreceipt.utils import format_arabic_date
from .fonts import resolve_receipt_fonts
from .layout import DrawContext, RIGHT_MARGIN, render_field, render_multiline
from .text_direction import prepare_text

logger = logging.getLogger(__name__)

RECEIPT_TITLE = 'المعلومات الشخصية للمستخدم'
FIELD_LABELS = (
    ('name', ': الإسم و اللقب'),
    ('email', ': البريد الإلكتروني'),
    ('phone', ': رقم الهاتف'),
)
MESSAGE_LABEL = 'الرسالة:'
DATE_LABEL = ': تاريخ التسجيل'

HEADER_COLOR = (102, 126, 234)
HEADER_HEIGHT = 35
RULE_COLOR = (200, 200, 200)
DATE_COLOR = (100, 100, 100)
LEFT_MARGIN = 20
FIELD_GAP = 5
MESSAGE_WIDTH = 170


class InvalidSubmissionError(ValueError):
    pass


def receipt_filename(submission_id):
    return f'form-submission-{submission_id}.pdf'


def _rule(ctx, y):
    ctx.set_draw_color(*RULE_COLOR)
    ctx.set_line_width(0.5)
    ctx.line(LEFT_MARGIN, y, RIGHT_MARGIN, y)


def draw_receipt(ctx, submission, tz_name=None):
    """Lay out one submission on the context's current page. Returns the final cursor row."""
    ctx.set_fill_color(*HEADER_COLOR)
    ctx.filled_rect(0, 0, ctx.page_width, HEADER_HEIGHT)

    ctx.set_text_color(255, 255, 255)
    ctx.set_font(ctx.fonts.rtl_bold, 24)
    ctx.text(prepare_text(RECEIPT_TITLE, True), ctx.page_width / 2, 22, align='center')
    ctx.set_text_color(0, 0, 0)

    y = 50
    _rule(ctx, y)
    y += 15

    for key, label in FIELD_LABELS:
        y += render_field(ctx, label, submission.get(key), LEFT_MARGIN, y)
        y += FIELD_GAP
    y += 10

    message = submission.get('message')
    if message:
        ctx.set_font(ctx.fonts.rtl_bold, 12)
        ctx.text(prepare_text(MESSAGE_LABEL, True), RIGHT_MARGIN, y, align='right')
        y += 8
        y += render_multiline(ctx, message, LEFT_MARGIN, y, MESSAGE_WIDTH)
        y += 10

    _rule(ctx, y)
    y += 10

    ctx.set_font(ctx.fonts.rtl_bold, 10)
    ctx.set_text_color(*DATE_COLOR)
    submitted = format_arabic_date(submission.get('createdAt'), tz_name)
    ctx.text(f'{prepare_text(DATE_LABEL, True)} {prepare_text(submitted)}', RIGHT_MARGIN, y, align='right')
    return y


def build_receipt_pdf(submission, fonts=None, tz_name=None):
    """Render the receipt into memory and return the PDF bytes."""
    if not submission or not submission.get('_id'):
        raise InvalidSubmissionError('Invalid submission data received')

    buffer = BytesIO()
    pdf = canvas.Canvas(buffer, pagesize=A4)
    pdf.setTitle(receipt_filename(submission['_id']))
    ctx = DrawContext(pdf, fonts or resolve_receipt_fonts())
    draw_receipt(ctx, submission, tz_name)
    pdf.showPage()
    pdf.save()
    return buffer.getvalue()


def generate_receipt(submission, output_dir=None, fonts=None, tz_name=None):
    """Build the receipt and save it as form-submission-<id>.pdf. Returns the path."""
    pdf_bytes = build_receipt_pdf(submission, fonts=fonts, tz_name=tz_name)

    output_dir = output_dir or os.getcwd()
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, receipt_filename(submission['_id']))
    with open(path, 'wb') as f:
        f.write(pdf_bytes)
    logger.info('Saved receipt %s (%d bytes)', path, len(pdf_bytes))
    return path
