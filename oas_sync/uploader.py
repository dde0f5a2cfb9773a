# Copyright 2025 ATP Project Contributors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Catalog Uploader

Sends a normalized OAS payload to the Brainfish catalog upload endpoint.
Exactly one request is made per upload; there is no retry and no timeout.
"""

import logging
from urllib.parse import urljoin

import httpx

from . import __version__
from .config import DEFAULT_BASE_URL
from .exceptions import UploadFailedError
from .models import NormalizedPayload, UploadResult
from .multipart import build_multipart_body

logger = logging.getLogger(__name__)

UPLOAD_PATH = "/api/catalogs.upload"
UPLOAD_FIELD_NAME = "file"
UPLOAD_CONTENT_TYPE = "application/json"


class CatalogUploader:
    """
    Synchronous uploader for a single Brainfish catalog.

    The endpoint path is absolute, so only the scheme, host and port of
    ``base_url`` are used.
    """

    def __init__(
        self,
        api_token: str,
        catalog_id: str,
        base_url: str = DEFAULT_BASE_URL,
        transport: httpx.BaseTransport | None = None,
    ):
        """
        Initialize the uploader.

        Args:
            api_token: Brainfish API token sent as a Bearer credential
            catalog_id: Target catalog identifier
            base_url: Base URL of the Brainfish deployment
            transport: Optional httpx transport, e.g. httpx.MockTransport in tests
        """
        self.api_token = api_token
        self.catalog_id = catalog_id
        self.base_url = base_url
        self.client = httpx.Client(timeout=None, transport=transport)

    @property
    def upload_url(self) -> str:
        return urljoin(self.base_url, UPLOAD_PATH)

    def _get_headers(self) -> dict[str, str]:
        """Get default headers for requests."""
        return {
            "User-Agent": f"oas-sync/{__version__}",
            "Accept": "*/*",
            "Authorization": f"Bearer {self.api_token}",
        }

    def upload(self, payload: NormalizedPayload) -> UploadResult:
        """
        Upload a normalized payload to the catalog.

        Args:
            payload: JSON payload and the file name to upload it as

        Returns:
            UploadResult for a 2xx response

        Raises:
            UploadFailedError: on a non-2xx status or a transport failure
        """
        logger.info(f"Uploading {payload.file_name} to Brainfish catalog: {self.catalog_id}")

        body, form_headers = build_multipart_body(
            UPLOAD_FIELD_NAME, payload.file_name, UPLOAD_CONTENT_TYPE, payload.as_bytes()
        )
        headers = self._get_headers()
        headers.update(form_headers)

        request = self.client.build_request(
            "POST", self.upload_url, params={"catalogId": self.catalog_id}, content=body, headers=headers
        )
        logger.info(f"Making request to: {request.url}")

        try:
            response = self.client.send(request)
        except httpx.RequestError as e:
            logger.error(f"Request error: {e}")
            raise UploadFailedError(f"Request failed: {e}")

        logger.info(f"Response status: {response.status_code}")
        logger.info(f"Response data: {response.text}")

        if not response.is_success:
            raise UploadFailedError(
                f"Upload failed with status {response.status_code}: {response.text}",
                status_code=response.status_code,
                response_body=response.text,
            )

        return UploadResult(
            success=True,
            status_code=response.status_code,
            file_name=payload.file_name,
            response_body=response.text,
        )

    def close(self):
        """Close the HTTP client."""
        self.client.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
