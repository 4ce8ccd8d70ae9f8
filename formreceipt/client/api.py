import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_API_URL = 'http://localhost:5000/api'
DEFAULT_TIMEOUT = 10
NO_RESPONSE_MESSAGE = 'No response from server. Please check your connection.'
UNEXPECTED_MESSAGE = 'An unexpected error occurred'

OK = 'ok'
VALIDATION = 'validation'
NOT_FOUND = 'not_found'
TRANSPORT = 'transport'
SERVER = 'server'
UNEXPECTED = 'unexpected'


@dataclass
class ApiOutcome:
    """Result of one API call: either data or a classified error."""

    kind: str
    message: str = ''
    data: Any = None
    errors: List[str] = field(default_factory=list)
    error: Optional[str] = None
    status_code: Optional[int] = None

    @property
    def success(self):
        return self.kind == OK


def normalize_base_url(base_url):
    base_url = (base_url or DEFAULT_API_URL).strip().rstrip('/')
    if '://' not in base_url:
        logger.warning('API base URL %s has no scheme, assuming http://', base_url)
        base_url = 'http://' + base_url
    return base_url


def outcome_from_response(response):
    try:
        body = response.json()
    except ValueError:
        body = None
    if not isinstance(body, dict):
        body = {}

    if response.ok and body.get('success', True):
        return ApiOutcome(OK, message=body.get('message', ''), data=body.get('data'),
                          status_code=response.status_code)

    errors = body.get('errors')
    message = body.get('message') or UNEXPECTED_MESSAGE
    if response.status_code == 404:
        kind = NOT_FOUND
    elif isinstance(errors, list) and errors:
        kind = VALIDATION
    elif response.status_code >= 500:
        kind = SERVER
    else:
        kind = UNEXPECTED
    return ApiOutcome(kind, message=message, errors=errors if isinstance(errors, list) else [],
                      error=body.get('error'), status_code=response.status_code)


class FormApiClient:
    """Talks to the /api/form endpoints. Every call returns an ApiOutcome, never raises."""

    def __init__(self, base_url=None, timeout=DEFAULT_TIMEOUT, session=None):
        self.base_url = normalize_base_url(base_url)
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({'Content-Type': 'application/json'})

    def _request(self, method, path, **kwargs):
        url = f'{self.base_url}/form{path}'
        logger.debug('%s %s', method, url)
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            logger.warning('No response from %s: %s', url, e)
            return ApiOutcome(TRANSPORT, message=NO_RESPONSE_MESSAGE, error=str(e))
        except requests.exceptions.RequestException as e:
            logger.error('Request to %s failed: %s', url, e)
            return ApiOutcome(UNEXPECTED, message=str(e), error=str(e))
        return outcome_from_response(response)

    def submit_form(self, form_data):
        return self._request('POST', '/submit', json=form_data)

    def get_all_submissions(self):
        return self._request('GET', '/submissions')

    def download_submission(self, submission_id):
        return self._request('GET', f'/download/{submission_id}')
