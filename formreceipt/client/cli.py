#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Command line client: submit the form, list submissions and download
PDF receipts from a running form service.
"""

import argparse
import logging
import os
import sys

from formreceipt.receipt import InvalidSubmissionError, generate_receipt, resolve_receipt_fonts
from .api import DEFAULT_API_URL, FormApiClient
from .notify import show_error, show_loading, show_success

logger = logging.getLogger(__name__)


def download_receipt(client, submission_id, output_dir, font_path=None, tz_name=None):
    """Fetch a submission and write its receipt. Returns the PDF path or None."""
    show_loading('Generating PDF...')
    outcome = client.download_submission(submission_id)
    if not outcome.success:
        show_error(outcome)
        return None

    try:
        path = generate_receipt(outcome.data, output_dir=output_dir,
                                fonts=resolve_receipt_fonts(font_path), tz_name=tz_name)
    except (InvalidSubmissionError, OSError) as e:
        show_error(e)
        return None

    show_success(f'PDF downloaded successfully! {path}', icon='📄')
    return path


def cmd_submit(client, args):
    show_loading('Submitting form...')
    outcome = client.submit_form({
        'name': args.name,
        'email': args.email,
        'phone': args.phone,
        'message': args.message,
    })
    if not outcome.success:
        show_error(outcome)
        return 1

    show_success(outcome.message or 'Form submitted successfully!')
    submission_id = (outcome.data or {}).get('_id')
    print(submission_id)
    if args.receipt and submission_id:
        if download_receipt(client, submission_id, args.output_dir, args.font, args.timezone) is None:
            return 1
    return 0


def cmd_list(client, args):
    outcome = client.get_all_submissions()
    if not outcome.success:
        show_error(outcome)
        return 1

    for record in outcome.data or []:
        print('{}\t{}\t{}\t{}\t{}'.format(
            record.get('_id'), record.get('createdAt'), record.get('name'),
            record.get('email'), record.get('phone')))
    return 0


def cmd_receipt(client, args):
    path = download_receipt(client, args.submission_id, args.output_dir, args.font, args.timezone)
    return 0 if path else 1


def build_parser():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument('--api-url', default=os.environ.get('FORM_API_URL', DEFAULT_API_URL),
                        help='Base URL of the API (default: $FORM_API_URL or %s)' % DEFAULT_API_URL)
    parser.add_argument('--timeout', type=float, default=10,
                        help='Request timeout in seconds')
    parser.add_argument('--font', default=None,
                        help='TTF font with Arabic glyphs used for receipts')
    parser.add_argument('--timezone', default=None,
                        help='IANA timezone for the receipt date, e.g. Africa/Algiers')
    parser.add_argument('-v', '--verbose', action='store_true')
    sub = parser.add_subparsers(dest='command', required=True)

    submit = sub.add_parser('submit', help='Submit the form')
    submit.add_argument('--name', required=True)
    submit.add_argument('--email', required=True)
    submit.add_argument('--phone', required=True)
    submit.add_argument('--message', default=None)
    submit.add_argument('--receipt', action='store_true',
                        help='Download the PDF receipt right after submitting')
    submit.add_argument('--output-dir', default='.')
    submit.set_defaults(func=cmd_submit)

    listing = sub.add_parser('list', help='List all submissions, newest first')
    listing.set_defaults(func=cmd_list)

    receipt = sub.add_parser('receipt', help='Download the PDF receipt of a submission')
    receipt.add_argument('submission_id')
    receipt.add_argument('--output-dir', default='.')
    receipt.set_defaults(func=cmd_receipt)

    return parser


def main(argv=None, client=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    client = client or FormApiClient(args.api_url, timeout=args.timeout)
    return args.func(client, args)


if __name__ == '__main__':
    sys.exit(main())
