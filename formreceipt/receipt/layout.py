"""Drawing context and the label/value renderers used by the receipt."""

from reportlab.lib.units import mm
from reportlab.lib.utils import simpleSplit

from .fonts import ReceiptFonts
from .text_direction import PLACEHOLDER, TextDirection, classify, contains_rtl, prepare_text

PAGE_WIDTH = 210
PAGE_HEIGHT = 297
RIGHT_MARGIN = 190

FIELD_FONT_SIZE = 12
VALUE_INDENT = 40
VALUE_ROW_OFFSET = 8
TWO_ROW_HEIGHT = 20
ONE_ROW_HEIGHT = 12
LINE_HEIGHT = 7


class DrawContext:
    """
    Wraps a reportlab canvas with a top-left origin measured in millimetres.

    The current font is kept on the context so wrapping can measure with
    the same face that will draw the text.
    """

    def __init__(self, canvas, fonts=None, page_width=PAGE_WIDTH, page_height=PAGE_HEIGHT):
        self.canvas = canvas
        self.fonts = fonts or ReceiptFonts()
        self.page_width = page_width
        self.page_height = page_height
        self.font_name = self.fonts.latin
        self.font_size = FIELD_FONT_SIZE

    def _y(self, y):
        return (self.page_height - y) * mm

    def set_font(self, font_name, size=None):
        self.font_name = font_name
        if size is not None:
            self.font_size = size
        self.canvas.setFont(self.font_name, self.font_size)

    def set_text_color(self, r, g, b):
        self.canvas.setFillColorRGB(r / 255.0, g / 255.0, b / 255.0)

    def set_fill_color(self, r, g, b):
        self.canvas.setFillColorRGB(r / 255.0, g / 255.0, b / 255.0)

    def set_draw_color(self, r, g, b):
        self.canvas.setStrokeColorRGB(r / 255.0, g / 255.0, b / 255.0)

    def set_line_width(self, width):
        self.canvas.setLineWidth(width * mm)

    def filled_rect(self, x, y, width, height):
        self.canvas.rect(x * mm, self._y(y + height), width * mm, height * mm, stroke=0, fill=1)

    def line(self, x1, y1, x2, y2):
        self.canvas.line(x1 * mm, self._y(y1), x2 * mm, self._y(y2))

    def text(self, text, x, y, align='left'):
        if align == 'right':
            self.canvas.drawRightString(x * mm, self._y(y), text)
        elif align == 'center':
            self.canvas.drawCentredString(x * mm, self._y(y), text)
        else:
            self.canvas.drawString(x * mm, self._y(y), text)

    def split_text(self, text, max_width):
        """Word-wrap text to max_width millimetres using the current font."""
        return simpleSplit(text, self.font_name, self.font_size, max_width * mm)


def render_field(ctx, label, value, x, y):
    """
    Draw a bold label and its value, returning the vertical space used.

    Arabic labels hang from the right margin and push the value onto the
    next row; Latin labels keep the value on the same row, indented.
    """
    if not value:
        value = PLACEHOLDER

    label_is_rtl = contains_rtl(label)
    if label_is_rtl:
        ctx.set_font(ctx.fonts.rtl_bold, FIELD_FONT_SIZE)
        ctx.text(prepare_text(label, True), RIGHT_MARGIN, y, align='right')
    else:
        ctx.set_font(ctx.fonts.latin_bold, FIELD_FONT_SIZE)
        ctx.text(label, x, y)

    direction = classify(value)
    if direction is TextDirection.PURE_RTL:
        ctx.set_font(ctx.fonts.rtl)
        ctx.text(prepare_text(value, True), RIGHT_MARGIN, y + VALUE_ROW_OFFSET, align='right')
        return TWO_ROW_HEIGHT

    if direction is TextDirection.MIXED:
        ctx.set_font(ctx.fonts.rtl)
        drawn = prepare_text(value)
    else:
        ctx.set_font(ctx.fonts.latin)
        drawn = value

    if label_is_rtl:
        ctx.text(drawn, RIGHT_MARGIN, y + VALUE_ROW_OFFSET, align='right')
        return TWO_ROW_HEIGHT
    ctx.text(drawn, x + VALUE_INDENT, y)
    return ONE_ROW_HEIGHT


def render_multiline(ctx, text, x, y, max_width):
    """Draw word-wrapped text and return len(lines) * LINE_HEIGHT."""
    if not text:
        text = PLACEHOLDER

    direction = classify(text)
    ctx.set_font(ctx.fonts.rtl if direction.has_rtl else ctx.fonts.latin)

    # wrap in logical order so each shaped line still reads top to bottom
    lines = ctx.split_text(text, max_width)
    for index, line in enumerate(lines):
        line_y = y + index * LINE_HEIGHT
        if not line:
            continue
        if direction is TextDirection.PURE_RTL:
            ctx.text(prepare_text(line, True), RIGHT_MARGIN, line_y, align='right')
        elif direction is TextDirection.MIXED:
            ctx.text(prepare_text(line, False), x, line_y)
        else:
            ctx.text(line, x, line_y)

    return len(lines) * LINE_HEIGHT
