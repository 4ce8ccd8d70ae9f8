"""App-wide error handlers returning the JSON error envelope."""

from flask import current_app, jsonify
from werkzeug.exceptions import HTTPException

from . import bp


@bp.app_errorhandler(404)
def not_found(error):
    return jsonify({'success': False, 'message': 'Not found', 'error': str(error)}), 404


@bp.app_errorhandler(405)
def method_not_allowed(error):
    return jsonify({'success': False, 'message': 'Method not allowed', 'error': str(error)}), 405


@bp.app_errorhandler(Exception)
def unhandled(error):
    if isinstance(error, HTTPException):
        return jsonify({'success': False, 'message': error.name, 'error': error.description}), error.code
    current_app.logger.error('Unhandled exception: %s', error, exc_info=True)
    return jsonify({'success': False, 'message': 'Something went wrong!', 'error': str(error)}), 500
