#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging

from formreceipt import create_app, parse_args

logging.basicConfig(level=getattr(logging, 'INFO', logging.INFO))

app = create_app()
app.logger.setLevel(logging.INFO)

if __name__ == "__main__":
    parse_args(app)
    app.run(host = app.config['SERVER_HOST'], port = app.config['SERVER_PORT'])
