"""
Sections API client

Thin CRUD wrapper over the backend's ``/api/sections`` resource. Payloads are
sent and returned verbatim; the client enforces nothing about their shape.

Configure in settings.py:
LAMMS_API_BASE_URL = 'http://localhost:8000'

Errors are not translated: connection failures raise the ``requests``
exception that caused them and non-2xx responses raise ``requests.HTTPError``.
"""

from django.conf import settings
import requests
import logging

logger = logging.getLogger(__name__)

SECTIONS_PATH = '/api/sections'


class SectionService:
    """CRUD calls against the sections resource of a fixed origin."""

    def __init__(self, base_url=None, session=None):
        if base_url is None:
            base_url = getattr(settings, 'LAMMS_API_BASE_URL', 'http://localhost:8000')
        self.base_url = base_url.rstrip('/')
        self.session = session or requests.Session()

    def get_sections(self):
        return self._request('GET', SECTIONS_PATH)

    def create_section(self, section_data):
        return self._request('POST', SECTIONS_PATH, json=section_data)

    def update_section(self, section_id, section_data):
        return self._request('PUT', f"{SECTIONS_PATH}/{section_id}", json=section_data)

    def delete_section(self, section_id):
        return self._request('DELETE', f"{SECTIONS_PATH}/{section_id}")

    def _request(self, method, path, **kwargs):
        url = f"{self.base_url}{path}"
        logger.debug("%s %s", method, url)
        try:
            response = self.session.request(method, url, **kwargs)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Sections API error on {method} {url}: {str(e)}")
            raise

        # DELETE answers 204 with no body
        if not response.content:
            return None
        return response.json()
