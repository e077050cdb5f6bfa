"""
HTTP client for the JamAI Base table API
Two preconfigured sessions: one for JSON calls, one for multipart uploads
"""

import os
import logging
from typing import Any, Dict, Optional

import requests

from config.exceptions import TransportError
from config.settings import Settings

logger = logging.getLogger(__name__)


class JamAIClient:
    """Send authenticated requests to the extraction service"""

    def __init__(self, settings: Settings):
        self.base_url = settings.base_url.rstrip('/')
        self.timeout = settings.timeout
        self.project_id = settings.project_id

        auth_headers = {
            'Authorization': f'Bearer {settings.pat}',
            'Project-ID': settings.project_id,
        }

        self.session = requests.Session()
        self.session.headers.update(auth_headers)
        self.session.headers.update({
            'Content-Type': 'application/json',
            'Accept': 'application/json',
        })

        # requests sets the multipart Content-Type with its boundary per request
        self.file_session = requests.Session()
        self.file_session.headers.update(auth_headers)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self):
        """Close both underlying sessions"""
        self.session.close()
        self.file_session.close()

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """GET a JSON resource"""
        url = self._url(path)
        logger.debug(f"Making request to: {self.project_id}@{url} params={params}")
        return self._send(self.session.get, url, params=params)

    def post_json(self, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """POST a JSON body and decode the JSON response"""
        url = self._url(path)
        logger.debug(f"Making request to: {self.project_id}@{url}")
        logger.debug(f"Request data: {payload}")
        return self._send(self.session.post, url, json=payload)

    def post_file(self, path: str, file_path: str, field: str = 'file') -> Dict[str, Any]:
        """
        Upload a file as multipart form data

        Args:
            path: Endpoint path relative to the API root
            file_path: Local file to stream
            field: Form field name carrying the file

        Returns:
            Decoded JSON response
        """
        url = self._url(path)
        filename = os.path.basename(file_path)
        logger.debug(f"Uploading {filename} to: {self.project_id}@{url}")

        with open(file_path, 'rb') as fh:
            return self._send(self.file_session.post, url, files={field: (filename, fh)})

    def _send(self, method, url: str, **kwargs) -> Dict[str, Any]:
        try:
            response = method(url, timeout=self.timeout, **kwargs)
        except requests.Timeout as e:
            raise TransportError(f"Request to {url} timed out after {self.timeout}s") from e
        except requests.RequestException as e:
            raise TransportError(f"Request to {url} failed: {e}") from e

        logger.debug(f"Received response: {response.status_code} {response.text}")

        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            raise TransportError(
                f"Request to {url} returned an error",
                status_code=response.status_code,
                body=_response_body(response),
            ) from e

        try:
            return response.json()
        except ValueError as e:
            raise TransportError(
                f"Response from {url} is not valid JSON",
                status_code=response.status_code,
                body=response.text,
            ) from e


def _response_body(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text
