"""Submission storage in a JSON document file."""

import os
import json
import threading
import uuid
from dataclasses import asdict, dataclass
from typing import Optional

from flask import current_app

from formreceipt.utils import utc_now_iso

_lock = threading.Lock()


class StoreError(Exception):
    pass


@dataclass(frozen=True)
class Submission:
    _id: str
    name: str
    email: str
    phone: str
    createdAt: str
    message: Optional[str] = None

    def to_dict(self):
        data = asdict(self)
        if data['message'] is None:
            del data['message']
        return data

    @classmethod
    def from_dict(cls, data):
        return cls(
            _id=data['_id'],
            name=data['name'],
            email=data['email'],
            phone=data['phone'],
            createdAt=data['createdAt'],
            message=data.get('message'),
        )


def get_submissions_json_path():
    """Get path to submissions.json file."""
    path = current_app.config.get('SUBMISSIONS_JSON_PATH')
    if path:
        return path
    instance_path = current_app.instance_path
    os.makedirs(instance_path, exist_ok=True)
    return os.path.join(instance_path, 'submissions.json')


class SubmissionStore:
    """Append-only list of submissions kept in one JSON file."""

    def __init__(self, json_path):
        self.json_path = json_path

    def _load(self):
        if not os.path.exists(self.json_path):
            return []
        try:
            with open(self.json_path, 'r', encoding='utf-8') as f:
                records = json.load(f)
        except (OSError, ValueError) as e:
            raise StoreError(f'Could not read {self.json_path}: {e}') from e
        if not isinstance(records, list):
            raise StoreError(f'{self.json_path} does not contain a list of submissions')
        return [Submission.from_dict(record) for record in records]

    def _save(self, submissions):
        tmp_path = self.json_path + '.tmp'
        try:
            with open(tmp_path, 'w', encoding='utf-8') as f:
                json.dump([s.to_dict() for s in submissions], f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.json_path)
        except OSError as e:
            raise StoreError(f'Could not write {self.json_path}: {e}') from e

    def create(self, name, email, phone, message=None):
        submission = Submission(
            _id=uuid.uuid4().hex,
            name=name,
            email=email,
            phone=phone,
            createdAt=utc_now_iso(),
            message=message or None,
        )
        with _lock:
            submissions = self._load()
            submissions.append(submission)
            self._save(submissions)
        return submission

    def list_all(self):
        """All submissions, newest first."""
        with _lock:
            submissions = self._load()
        # reversed first so equal timestamps keep newest-first order
        return sorted(reversed(submissions), key=lambda s: s.createdAt, reverse=True)

    def get(self, submission_id):
        with _lock:
            submissions = self._load()
        for submission in submissions:
            if submission._id == submission_id:
                return submission
        return None


def get_store():
    return SubmissionStore(get_submissions_json_path())
