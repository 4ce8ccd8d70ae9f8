"""Flask routes for form submissions - route handlers only."""

from flask import current_app, request, make_response, jsonify

from . import bp
from .store import get_store
from .validation import validate_submission
from formreceipt.receipt import build_receipt_pdf, resolve_fonts_for_app, receipt_filename

MSG_CREATED = 'تم التسجيل بنجاح'
MSG_INVALID = 'خطأ, يرجى إعادة ملئ البيانات بشكل صحيح'
MSG_NOT_FOUND = 'إستمارة التسجيل غير موجودة'
MSG_DOWNLOAD_FAILED = 'خطأ في تحميل الإستمارة'


@bp.route('/submit', methods=['POST'])
def submit():
    """Create a new form submission."""
    payload = request.get_json(force=True, silent=True)
    fields, errors = validate_submission(
        payload,
        name_max_length=current_app.config['FORM_NAME_MAX_LENGTH'],
        message_max_length=current_app.config['FORM_MESSAGE_MAX_LENGTH'])

    if errors:
        current_app.logger.info('[submit] Rejected submission: %s', errors)
        return jsonify({'success': False, 'message': MSG_INVALID, 'errors': errors}), 400

    try:
        submission = get_store().create(**fields)
    except Exception as e:
        current_app.logger.error('[submit] Could not save submission: %s', e, exc_info=True)
        return jsonify({'success': False, 'message': 'Database error occurred', 'error': str(e)}), 500

    current_app.logger.info('[submit] Saved submission %s', submission._id)
    return jsonify({'success': True, 'message': MSG_CREATED, 'data': submission.to_dict()}), 201


@bp.route('/submissions', methods=['GET'])
def submissions():
    """List all submissions, newest first."""
    try:
        records = [s.to_dict() for s in get_store().list_all()]
    except Exception as e:
        current_app.logger.error('[submissions] Could not load submissions: %s', e)
        return jsonify({'success': False, 'message': 'Error fetching submissions', 'error': str(e)}), 500

    return jsonify({'success': True, 'count': len(records), 'data': records})


@bp.route('/download/<submission_id>', methods=['GET'])
def download(submission_id):
    """Return one submission as JSON so the client can build the receipt."""
    try:
        submission = get_store().get(submission_id)
    except Exception as e:
        current_app.logger.error('[download] Could not load submission %s: %s', submission_id, e)
        return jsonify({'success': False, 'message': MSG_DOWNLOAD_FAILED, 'error': str(e)}), 500

    if submission is None:
        return jsonify({'success': False, 'message': MSG_NOT_FOUND}), 404

    return jsonify({'success': True, 'data': submission.to_dict()})


@bp.route('/receipt/<submission_id>', methods=['GET'])
def receipt(submission_id):
    """Render the receipt PDF on the server."""
    try:
        submission = get_store().get(submission_id)
        if submission is None:
            return jsonify({'success': False, 'message': MSG_NOT_FOUND}), 404

        pdf_bytes = build_receipt_pdf(
            submission.to_dict(),
            fonts=resolve_fonts_for_app(current_app),
            tz_name=current_app.config.get('RECEIPT_TIMEZONE'))
    except Exception as e:
        current_app.logger.error('[receipt] Failed for %s: %s', submission_id, e, exc_info=True)
        return jsonify({'success': False, 'message': MSG_DOWNLOAD_FAILED, 'error': str(e)}), 500

    response = make_response(pdf_bytes)
    response.headers.set('Content-Type', 'application/pdf')
    response.headers.set('Content-Disposition', 'attachment', filename=receipt_filename(submission_id))
    return response
