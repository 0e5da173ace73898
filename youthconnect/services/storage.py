"""
Resume object storage.

Two interchangeable backends expose upload-by-path:
- LocalResumeStorage writes under RESUME_DIR (dev and tests)
- SupabaseResumeStorage uploads into a hosted storage bucket over REST
"""
import asyncio
import logging
from pathlib import Path
from typing import Optional

import aiohttp

from youthconnect.config import settings

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when the object store refuses or fails an upload."""
    pass


class ResumeStorage:
    """Upload-by-path interface for resume files."""

    async def upload(self, path: str, content: bytes, content_type: str) -> str:
        """Store content at path and return the stored object's path."""
        raise NotImplementedError


class LocalResumeStorage(ResumeStorage):
    """Stores resumes on the local filesystem."""

    def __init__(self, root: Optional[Path] = None):
        self.root = Path(root) if root else None

    def _root(self) -> Path:
        return self.root or settings.resume_dir

    async def upload(self, path: str, content: bytes, content_type: str) -> str:
        root = self._root().resolve()
        target = (root / path).resolve()
        if root not in target.parents:
            raise StorageError(f"Refusing to write outside storage root: {path}")
        if target.exists():
            raise StorageError(f"Object already exists: {path}")

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(content)
        except OSError as e:
            logger.error(f"Failed to write resume {path}: {str(e)}", exc_info=True)
            raise StorageError(f"Failed to store {path}") from e

        logger.info(f"Stored resume {path} ({len(content)} bytes, {content_type})")
        return path


class SupabaseResumeStorage(ResumeStorage):
    """Uploads resumes into a hosted storage bucket."""

    def __init__(self, base_url: str, bucket: str, api_key: str, timeout_s: int = 30):
        self.base_url = base_url.rstrip("/")
        self.bucket = bucket
        self.api_key = api_key
        self.timeout_s = timeout_s

    def object_url(self, path: str) -> str:
        return f"{self.base_url}/object/{self.bucket}/{path}"

    def headers(self, content_type: str) -> dict:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "apikey": self.api_key,
            "Content-Type": content_type,
            "x-upsert": "false",
        }

    async def upload(self, path: str, content: bytes, content_type: str) -> str:
        timeout = aiohttp.ClientTimeout(total=self.timeout_s)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.post(
                    self.object_url(path),
                    data=content,
                    headers=self.headers(content_type),
                ) as resp:
                    body_text = await resp.text(errors="ignore")
                    if resp.status >= 400:
                        logger.error(f"Storage upload of {path} failed: {resp.status} {body_text[:200]}")
                        raise StorageError(f"Upload rejected with status {resp.status}")
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Storage upload of {path} failed: {str(e)}", exc_info=True)
            raise StorageError(f"Failed to upload {path}") from e

        logger.info(f"Uploaded resume {path} to bucket {self.bucket}")
        return path


def get_resume_storage() -> ResumeStorage:
    """FastAPI dependency selecting the configured storage backend."""
    if settings.storage_backend == "supabase":
        return SupabaseResumeStorage(
            settings.storage_url,
            settings.storage_bucket,
            settings.storage_api_key,
        )
    return LocalResumeStorage()
