#!/usr/bin/env python3

import io
import os
import tempfile
import unittest
from unittest import mock

from PyPDF2 import PdfReader
from reportlab.lib.units import mm

from formreceipt.receipt import (
    InvalidSubmissionError,
    ReceiptFonts,
    build_receipt_pdf,
    generate_receipt,
    receipt_filename,
)
from formreceipt.receipt.generator import RECEIPT_TITLE, draw_receipt
from formreceipt.receipt.layout import DrawContext
from formreceipt.receipt.text_direction import prepare_text


def _submission(**overrides):
    data = {
        '_id': '6f1c2a9e0b7d4c3aa1b2c3d4e5f60718',
        'name': 'Ahmed Ben Ali',
        'email': 'ahmed@example.com',
        'phone': '+213 555 12 34 56',
        'createdAt': '2026-10-18T14:30:00.000Z',
    }
    data.update(overrides)
    return data


class BuildReceiptTest(unittest.TestCase):
    def test_missing_identity_fails_before_drawing(self) -> None:
        with mock.patch('formreceipt.receipt.generator.canvas.Canvas') as canvas_cls:
            for bad in (None, {}, _submission(_id=None), _submission(_id='')):
                with self.assertRaises(InvalidSubmissionError):
                    build_receipt_pdf(bad, fonts=ReceiptFonts())
        canvas_cls.assert_not_called()

    def test_single_a4_page(self) -> None:
        pdf_bytes = build_receipt_pdf(_submission(), fonts=ReceiptFonts())

        self.assertTrue(pdf_bytes.startswith(b'%PDF'))
        reader = PdfReader(io.BytesIO(pdf_bytes))
        self.assertEqual(len(reader.pages), 1)
        box = reader.pages[0].mediabox
        self.assertAlmostEqual(float(box.width), 210 * mm, places=1)
        self.assertAlmostEqual(float(box.height), 297 * mm, places=1)

    def test_shaping_failure_does_not_abort(self) -> None:
        with mock.patch('formreceipt.receipt.text_direction.arabic_reshaper.reshape',
                        side_effect=RuntimeError('broken reshaper')):
            pdf_bytes = build_receipt_pdf(_submission(name='محمد'), fonts=ReceiptFonts())
        self.assertTrue(pdf_bytes.startswith(b'%PDF'))

    def test_missing_fields_and_bad_date_use_placeholders(self) -> None:
        data = {'_id': 'abc', 'createdAt': 'not a date'}
        pdf_bytes = build_receipt_pdf(data, fonts=ReceiptFonts())
        self.assertTrue(pdf_bytes.startswith(b'%PDF'))

    def test_unknown_timezone_does_not_abort(self) -> None:
        with self.assertLogs('formreceipt.utils', level='WARNING'):
            pdf_bytes = build_receipt_pdf(_submission(), fonts=ReceiptFonts(), tz_name='Not/AZone')
        self.assertTrue(pdf_bytes.startswith(b'%PDF'))


class DrawReceiptTest(unittest.TestCase):
    def setUp(self) -> None:
        self.canvas = mock.MagicMock()
        self.ctx = DrawContext(self.canvas, ReceiptFonts())

    def test_layout_sequence(self) -> None:
        draw_receipt(self.ctx, _submission())

        self.canvas.rect.assert_called_once()
        self.assertAlmostEqual(self.canvas.rect.call_args.args[2], 210 * mm)
        self.assertEqual(self.canvas.line.call_count, 2)
        title = self.canvas.drawCentredString.call_args
        self.assertAlmostEqual(title.args[0], 105 * mm)
        self.assertEqual(title.args[2], prepare_text(RECEIPT_TITLE, True))

        # three Arabic labels, three values under them, the date line
        right_aligned = [call.args[2] for call in self.canvas.drawRightString.call_args_list]
        self.assertEqual(len(right_aligned), 7)
        self.assertIn('Ahmed Ben Ali', right_aligned)
        self.assertIn('ahmed@example.com', right_aligned)
        self.assertIn('+213 555 12 34 56', right_aligned)
        self.assertIn('2026', right_aligned[-1])

    def test_fields_advance_the_cursor(self) -> None:
        draw_receipt(self.ctx, _submission())

        label_rows = [round(297 - call.args[1] / mm, 3)
                      for call in self.canvas.drawRightString.call_args_list[:6:2]]
        # each field uses 20 units plus a 5 unit gap
        self.assertEqual(label_rows, [65, 90, 115])

    def test_message_block_is_optional(self) -> None:
        final_without = draw_receipt(DrawContext(mock.MagicMock(), ReceiptFonts()), _submission())
        final_with = draw_receipt(self.ctx, _submission(message='A short note'))

        self.assertEqual(final_with - final_without, 8 + 7 + 10)
        drawn = [call.args[2] for call in self.canvas.drawString.call_args_list]
        self.assertIn('A short note', drawn)


class GenerateReceiptTest(unittest.TestCase):
    def test_writes_file_named_after_identity(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = generate_receipt(_submission(), output_dir=tmp, fonts=ReceiptFonts())

            self.assertEqual(os.path.basename(path), 'form-submission-6f1c2a9e0b7d4c3aa1b2c3d4e5f60718.pdf')
            with open(path, 'rb') as f:
                self.assertTrue(f.read().startswith(b'%PDF'))

    def test_invalid_submission_writes_nothing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(InvalidSubmissionError):
                generate_receipt({'name': 'x'}, output_dir=tmp, fonts=ReceiptFonts())
            self.assertEqual(os.listdir(tmp), [])

    def test_failed_assembly_writes_nothing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch('formreceipt.receipt.generator.draw_receipt', side_effect=RuntimeError('layout')):
                with self.assertRaises(RuntimeError):
                    generate_receipt(_submission(), output_dir=tmp, fonts=ReceiptFonts())
            self.assertEqual(os.listdir(tmp), [])

    def test_filename(self) -> None:
        self.assertEqual(receipt_filename('abc'), 'form-submission-abc.pdf')


if __name__ == '__main__':
    unittest.main()
