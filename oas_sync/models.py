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
OAS Sync Data Models

Pydantic models passed between the pipeline stages. All of them are frozen;
each one lives only for the duration of a single invocation.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FileRecord(BaseModel):
    """An OAS file read from disk."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Path the file was read from")
    content: str = Field(..., description="Full file content decoded as UTF-8")
    extension: str = Field(..., description="Lower-cased file extension including the dot")
    file_name: str = Field(..., description="Base name of the file")
    size: int = Field(..., ge=0, description="File size in bytes")

    @field_validator("extension")
    @classmethod
    def validate_extension(cls, v):
        return v.lower()


class NormalizedPayload(BaseModel):
    """JSON content ready for upload."""

    model_config = ConfigDict(frozen=True)

    content: str = Field(..., description="Valid JSON text")
    file_name: str = Field(..., description="File name sent with the upload")

    def as_bytes(self) -> bytes:
        return self.content.encode("utf-8")


class UploadResult(BaseModel):
    """Outcome of a successful catalog upload."""

    model_config = ConfigDict(frozen=True)

    success: bool = Field(True, description="Whether the upload returned a 2xx status")
    status_code: int = Field(..., description="HTTP status code returned by the catalog service")
    file_name: str = Field(..., description="Name of the uploaded file")
    response_body: str = Field("", description="Raw response body text")


class SyncResult(BaseModel):
    """Caller-visible result of a full sync run."""

    model_config = ConfigDict(frozen=True)

    status: str = Field(..., description="Human-readable status message")
    uploaded_file: str = Field(..., description="Final uploaded file name")
    catalog_id: str = Field(..., description="Catalog the file was uploaded to")
    status_code: Optional[int] = Field(None, description="HTTP status code of the upload")
    response_body: Optional[str] = Field(None, description="Raw response body text")
