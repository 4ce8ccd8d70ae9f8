"""User-facing status messages for the command line client."""

import sys

from .api import UNEXPECTED_MESSAGE


def _out(stream):
    return stream if stream is not None else sys.stdout


def show_loading(message, stream=None):
    print(f'... {message}', file=_out(stream))


def show_success(message, icon='✅', stream=None):
    print(f'{icon} {message}', file=_out(stream))


def show_error(error, stream=None):
    """
    Print an error for the user.

    Accepts an ApiOutcome (or anything with ``errors``/``message``), a plain
    string, or an exception. Validation errors are printed one per line.
    Returns the list of printed messages.
    """
    stream = stream if stream is not None else sys.stderr
    errors = getattr(error, 'errors', None)
    message = getattr(error, 'message', None)

    if isinstance(errors, list) and errors:
        lines = [str(err) for err in errors]
    elif message:
        lines = [str(message)]
    elif isinstance(error, str) and error:
        lines = [error]
    elif isinstance(error, Exception) and str(error):
        lines = [str(error)]
    else:
        lines = [UNEXPECTED_MESSAGE]

    for line in lines:
        print(f'❌ {line}', file=stream)
    return lines
