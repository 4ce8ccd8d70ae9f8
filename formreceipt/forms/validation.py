"""Field validation for form submissions."""

import re

EMAIL = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
PHONE = re.compile(r"^\+?[0-9][0-9\s\-()]{7,19}$")

NAME_MIN_LENGTH = 2


def _clean(value):
    if value is None:
        return ''
    if not isinstance(value, str):
        value = str(value)
    return value.strip()


def validate_submission(payload, name_max_length=100, message_max_length=1000):
    """
    Check a submit payload.

    :param payload: Decoded JSON body
    :return: (cleaned fields, list of error messages); one message per invalid field
    """
    if not isinstance(payload, dict):
        payload = {}

    fields = {
        'name': _clean(payload.get('name')),
        'email': _clean(payload.get('email')).lower(),
        'phone': _clean(payload.get('phone')),
        'message': _clean(payload.get('message')) or None,
    }
    errors = []

    name = fields['name']
    if not name:
        errors.append('الإسم و اللقب مطلوب')
    elif len(name) < NAME_MIN_LENGTH or len(name) > name_max_length:
        errors.append(f'الإسم و اللقب يجب أن يكون بين {NAME_MIN_LENGTH} و {name_max_length} حرفا')

    if not fields['email']:
        errors.append('البريد الإلكتروني مطلوب')
    elif not EMAIL.match(fields['email']):
        errors.append('البريد الإلكتروني غير صالح')

    if not fields['phone']:
        errors.append('رقم الهاتف مطلوب')
    elif not PHONE.match(fields['phone']):
        errors.append('رقم الهاتف غير صالح')

    if fields['message'] and len(fields['message']) > message_max_length:
        errors.append(f'الرسالة يجب ألا تتجاوز {message_max_length} حرف')

    return fields, errors
