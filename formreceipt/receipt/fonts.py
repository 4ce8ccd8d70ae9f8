"""Font lookup and registration for the PDF receipt."""

import logging
import os
from dataclasses import dataclass
from hashlib import md5
from typing import Optional

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

logger = logging.getLogger(__name__)

# Searched in order when no font is configured
SYSTEM_RTL_FONTS = (
    ('/usr/share/fonts/truetype/fonts-arabeyes/Amiri-Regular.ttf', '/usr/share/fonts/truetype/fonts-arabeyes/Amiri-Bold.ttf'),
    ('/usr/share/fonts/opentype/fonts-hosny-amiri/Amiri-Regular.ttf', '/usr/share/fonts/opentype/fonts-hosny-amiri/Amiri-Bold.ttf'),
    ('/usr/share/fonts/truetype/amiri/amiri-regular.ttf', '/usr/share/fonts/truetype/amiri/amiri-bold.ttf'),
    ('/usr/share/fonts/truetype/noto/NotoNaskhArabic-Regular.ttf', '/usr/share/fonts/truetype/noto/NotoNaskhArabic-Bold.ttf'),
    ('/usr/share/fonts/truetype/noto/NotoSansArabic-Regular.ttf', '/usr/share/fonts/truetype/noto/NotoSansArabic-Bold.ttf'),
    ('/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf', '/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf'),
    ('/Library/Fonts/Arial Unicode.ttf', None),
    ('C:\\Windows\\Fonts\\arial.ttf', 'C:\\Windows\\Fonts\\arialbd.ttf'),
)


@dataclass(frozen=True)
class ReceiptFonts:
    latin: str = 'Helvetica'
    latin_bold: str = 'Helvetica-Bold'
    rtl: str = 'Helvetica'
    rtl_bold: str = 'Helvetica-Bold'

    @property
    def has_rtl_font(self) -> bool:
        return self.rtl != self.latin


def register_font_face(path: Optional[str], label: str) -> str:
    """Register the TTF at path with reportlab once and return its face name.

    The name carries a digest of the path so two different files given the
    same label never clash. Without a path the label itself is returned.
    """
    if not path:
        return label
    digest = md5(os.path.abspath(path).encode('utf-8')).hexdigest()[:8]
    face = f'{label}-{digest}'
    if face in pdfmetrics.getRegisteredFontNames():
        logger.debug('Font face %s already registered', face)
    else:
        pdfmetrics.registerFont(TTFont(face, path))
        logger.debug('Registered %s as %s', path, face)
    return face


def find_system_rtl_font():
    """Return (regular_path, bold_path) of the first installed Arabic-capable font."""
    for regular, bold in SYSTEM_RTL_FONTS:
        if os.path.isfile(regular):
            if not bold or not os.path.isfile(bold):
                bold = None
            return regular, bold
    return None, None


def resolve_receipt_fonts(regular_path=None, bold_path=None):
    """
    Register the Arabic faces used on the receipt.

    Falls back to Helvetica when no usable TTF is found; Arabic then shows
    as missing glyphs but the document still renders.
    """
    if not regular_path:
        regular_path, found_bold = find_system_rtl_font()
        bold_path = bold_path or found_bold

    if not regular_path:
        logger.warning('No Arabic font found. Using Helvetica, Arabic text will not render correctly.')
        return ReceiptFonts()

    try:
        rtl = register_font_face(regular_path, 'ReceiptRTL')
        rtl_bold = register_font_face(bold_path or regular_path, 'ReceiptRTLBold')
    except Exception as e:
        logger.warning('Could not register font %s: %s. Using Helvetica.', regular_path, e)
        return ReceiptFonts()

    logger.debug('Receipt fonts: %s / %s', rtl, rtl_bold)
    return ReceiptFonts(rtl=rtl, rtl_bold=rtl_bold)


def resolve_fonts_for_app(app):
    """Fonts resolved once per Flask app and kept in app.extensions."""
    fonts = app.extensions.get('receipt_fonts')
    if fonts is None:
        fonts = resolve_receipt_fonts(app.config.get('RECEIPT_FONT_PATH'),
                                      app.config.get('RECEIPT_FONT_BOLD_PATH'))
        app.extensions['receipt_fonts'] = fonts
    return fonts
