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

"""Read → normalize → upload."""

import logging

import httpx

from .config import SyncConfig
from .loader import read_oas_file
from .models import SyncResult
from .normalizer import normalize
from .uploader import CatalogUploader

logger = logging.getLogger(__name__)

SUCCESS_STATUS = "✅ OAS file successfully synced to Brainfish!"


def sync_oas_file(config: SyncConfig, transport: httpx.BaseTransport | None = None) -> SyncResult:
    """Run the full sync for one OAS file.

    Errors propagate to the caller unchanged. Loading and normalizing happen
    before the uploader is created, so a bad file never reaches the network.
    """
    logger.info("Starting Brainfish OAS sync process")
    logger.info(f"Base URL: {config.base_url}")
    logger.info(f"Catalog ID: {config.catalog_id}")
    logger.info(f"OAS file path: {config.oas_file_path}")

    record = read_oas_file(config.oas_file_path)
    payload = normalize(record)

    with CatalogUploader(config.api_token, config.catalog_id, config.base_url, transport=transport) as uploader:
        result = uploader.upload(payload)

    logger.info(f"✅ Success! Uploaded {result.file_name} to Brainfish catalog {config.catalog_id}")

    return SyncResult(
        status=SUCCESS_STATUS,
        uploaded_file=result.file_name,
        catalog_id=config.catalog_id,
        status_code=result.status_code,
        response_body=result.response_body,
    )
