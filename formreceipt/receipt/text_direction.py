"""
Direction detection and shaping for Arabic/Latin text.

ReportLab draws glyph runs strictly left to right, so Arabic has to be
reshaped (contextual letter forms) and reordered into visual order before
it reaches the canvas.
"""

import enum
import logging
import re
from typing import Optional

import arabic_reshaper
from bidi.algorithm import get_display

_LOGGER = logging.getLogger(__name__)

PLACEHOLDER = 'N/A'

# Arabic block only, matching the script of the form labels
RTL_CHAR = re.compile(r"[\u0600-\u06FF]")
RTL_ONLY = re.compile(r"^[\u0600-\u06FF]+$")
# whitespace, Arabic comma/semicolon/question mark, tatweel, Latin punctuation
IGNORED_FOR_PURITY = re.compile(r"[\s\u060C\u061B\u061F\u0640.,!?;:()]")


class TextDirection(enum.Enum):
    PURE_RTL = 'pure_rtl'
    MIXED = 'mixed'
    LATIN = 'latin'

    @property
    def has_rtl(self) -> bool:
        return self is not TextDirection.LATIN


def contains_rtl(text) -> bool:
    """True if at least one character belongs to the Arabic block."""
    if not text or not isinstance(text, str):
        return False
    return RTL_CHAR.search(text) is not None


def is_pure_rtl(text) -> bool:
    """True if the text is only Arabic once whitespace and punctuation are dropped."""
    if not text or not isinstance(text, str):
        return False
    stripped = IGNORED_FOR_PURITY.sub('', text)
    return RTL_ONLY.match(stripped) is not None


def classify(text) -> TextDirection:
    if is_pure_rtl(text):
        return TextDirection.PURE_RTL
    if contains_rtl(text):
        return TextDirection.MIXED
    return TextDirection.LATIN


def shape(text, base_dir: Optional[str] = None):
    """
    Reshape and reorder text for a left-to-right drawing primitive.

    :param text: Logical-order text
    :param base_dir: 'R' to force a right-to-left paragraph, None to let the
                     bidi algorithm pick it from the first strong character
    :return: Visual-order text, or the input unchanged if shaping failed
    """
    if not text:
        return text
    try:
        reshaped = arabic_reshaper.reshape(text)
        if base_dir:
            return get_display(reshaped, base_dir=base_dir)
        return get_display(reshaped)
    except Exception as e:
        _LOGGER.warning('Arabic shaping failed, drawing unshaped text: %s', e)
        return text


def prepare_text(text, force_direction: Optional[bool] = None) -> str:
    """
    Turn a field value into something drawable.

    Text is shaped only when it contains Arabic. ``force_direction`` replaces
    the purity check when deciding whether the paragraph runs right to left.
    """
    if not text:
        return PLACEHOLDER
    rtl = force_direction if force_direction is not None else is_pure_rtl(text)
    if not contains_rtl(text):
        return text
    return shape(text, base_dir='R' if rtl else None)
