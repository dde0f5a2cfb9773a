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

"""Multipart/form-data encoding for single-file uploads."""

import httpx

# Only used to drive httpx's request encoder; nothing is sent to it.
_ENCODER_URL = "http://localhost/"


def build_multipart_body(
    field_name: str,
    filename: str,
    content_type: str,
    data: bytes,
    boundary: str | None = None,
) -> tuple[bytes, dict[str, str]]:
    """Encode one file part as a multipart/form-data body.

    The body is produced by httpx's own multipart encoder, so it is byte for
    byte what ``httpx.Client.post(files=...)`` would transmit. The encoder is
    only reachable through ``httpx.Request``; the request built here is read
    into memory and discarded, never sent.

    Args:
        field_name: Form field name of the file part
        filename: File name reported in Content-Disposition
        content_type: Content type of the file part
        data: File content
        boundary: Fixed boundary; a random one is generated when omitted

    Returns:
        The encoded body and the Content-Type/Content-Length headers for it
    """
    headers = {}
    if boundary:
        headers["Content-Type"] = f"multipart/form-data; boundary={boundary}"

    request = httpx.Request(
        "POST",
        _ENCODER_URL,
        files={field_name: (filename, data, content_type)},
        headers=headers,
    )
    body = request.read()

    return body, {
        "Content-Type": request.headers["Content-Type"],
        "Content-Length": str(len(body)),
    }
