#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
This is a web service collecting a name, email and phone number and
issuing bilingual (Arabic/Latin) PDF receipts for each submission.
"""

import argparse

from flask import Flask
from flask_bootstrap import Bootstrap

from config import Config

bootstrap = Bootstrap()


def create_app(config_class=Config):
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(config_class)
    app.config.from_pyfile('application.py', silent=True)

    app.logger.setLevel(app.config['LOG_LEVEL'])

    setup_fonts(app)

    bootstrap.init_app(app)

    from formreceipt.main import bp as main_bp
    app.register_blueprint(main_bp)

    from formreceipt.forms import bp as forms_bp
    app.register_blueprint(forms_bp, url_prefix='/api/form')

    from formreceipt.errors import bp as errors_bp
    app.register_blueprint(errors_bp)

    return app


def setup_fonts(app):
    from formreceipt.receipt import resolve_fonts_for_app

    fonts = resolve_fonts_for_app(app)
    if fonts.has_rtl_font:
        app.logger.debug("Selected the following receipt font: {}".format(fonts.rtl))
    else:
        app.logger.warning(
            "Could not find a font with Arabic glyphs. Set RECEIPT_FONT_PATH in instance/application.py.\n")


def parse_args(app, argv=None):
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument('--host', default=False,
                        help='Interface to listen on. Defaults to 0.0.0.0.')
    parser.add_argument('--port', default=False, type=int,
                        help='Port to listen on. Defaults to 5000.')
    parser.add_argument('--store', default=False,
                        help='Path of the JSON file holding the submissions (default: instance/submissions.json)')
    parser.add_argument('--font', default=False,
                        help='TTF font with Arabic glyphs used for the receipts')
    args = parser.parse_args(argv)

    if args.host:
        app.config.update(
            SERVER_HOST=args.host
        )

    if args.port:
        app.config.update(
            SERVER_PORT=args.port
        )

    if args.store:
        app.config.update(
            SUBMISSIONS_JSON_PATH=args.store
        )

    if args.font:
        app.config.update(
            RECEIPT_FONT_PATH=args.font
        )
        app.extensions.pop('receipt_fonts', None)
        setup_fonts(app)

    return args
