from flask import current_app, render_template

from . import bp


@bp.route('/')
def index():
    """Submission form page."""
    return render_template('index.html',
                           name_max_length=current_app.config['FORM_NAME_MAX_LENGTH'],
                           message_max_length=current_app.config['FORM_MESSAGE_MAX_LENGTH'])
