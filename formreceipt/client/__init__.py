"""
Client side of the form service: HTTP transport, status messages and CLI.
"""

from .api import ApiOutcome, FormApiClient, normalize_base_url

__all__ = ['ApiOutcome', 'FormApiClient', 'normalize_base_url']
