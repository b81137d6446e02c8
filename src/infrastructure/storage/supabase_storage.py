"""Supabase Storage implementation of the blob store.

Talks to the Storage REST API directly:

    POST {supabase_url}/storage/v1/object/{bucket}/{path}         upload
    GET  {supabase_url}/storage/v1/object/public/{bucket}/{path}  public read
"""

import logging
from urllib.parse import quote

import httpx

from core.exceptions import BackendError
from domain.repositories.blob_store import BlobHandle

logger = logging.getLogger(__name__)


class SupabaseBlobStore:
    """IBlobStore backed by a public Supabase Storage bucket."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        storage_url: str,
        bucket: str,
        service_key: str,
    ) -> None:
        self._client = client
        self._storage_url = storage_url.rstrip("/")
        self._bucket = bucket
        self._service_key = service_key

    async def upload(self, path: str, payload: bytes, content_type: str) -> BlobHandle:
        """Upload ``payload`` to ``path``. Existing objects are not overwritten."""
        if not self._storage_url:
            raise BackendError("Blob storage is not configured", operation="upload")

        url = f"{self._storage_url}/object/{self._bucket}/{quote(path)}"
        headers = {
            "Authorization": f"Bearer {self._service_key}",
            "apikey": self._service_key,
            "Content-Type": content_type,
            "x-upsert": "false",
        }
        try:
            response = await self._client.post(url, content=payload, headers=headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "Storage upload rejected: %s %s", exc.response.status_code, exc.response.text
            )
            raise BackendError(
                f"Storage upload rejected with status {exc.response.status_code}",
                operation="upload",
            ) from exc
        except httpx.HTTPError as exc:
            logger.warning("Storage upload failed for %s: %s", path, exc)
            raise BackendError("Storage upload failed", operation="upload") from exc

        logger.info("Uploaded %d bytes to %s/%s", len(payload), self._bucket, path)
        return BlobHandle(bucket=self._bucket, path=path)

    async def public_url(self, handle: BlobHandle) -> str:
        """Public URL of an object in a public bucket."""
        if not self._storage_url:
            raise BackendError("Blob storage is not configured", operation="public_url")
        return f"{self._storage_url}/object/public/{handle.bucket}/{quote(handle.path)}"
