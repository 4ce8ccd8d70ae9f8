from flask import Blueprint

bp = Blueprint('forms', __name__)

from . import routes  # noqa: E402,F401
