"""
This are the default settings. (DONT CHANGE THIS FILE)
Adjust your settings in 'instance/application.py'
"""

import os
import logging

basedir = os.path.abspath(os.path.dirname(__file__))

class Config(object):
    DEBUG = False
    TESTING = False
    LOG_LEVEL = logging.WARNING

    SERVER_PORT = 5000
    SERVER_HOST = '0.0.0.0'

    # Submissions are stored in instance/submissions.json unless set here
    SUBMISSIONS_JSON_PATH = None

    # TTF with Arabic glyphs used for the PDF receipt.
    # Leave as None to search the usual system font folders.
    RECEIPT_FONT_PATH = None
    RECEIPT_FONT_BOLD_PATH = None
    RECEIPT_TIMEZONE = None

    FORM_NAME_MAX_LENGTH = 100
    FORM_MESSAGE_MAX_LENGTH = 1000

    BOOTSTRAP_SERVE_LOCAL = True
