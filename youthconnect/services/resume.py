"""Resume file validation and naming."""
import logging
import mimetypes
from datetime import datetime, timedelta
from enum import Enum
from pathlib import PurePosixPath
from typing import Optional

from youthconnect.config import settings

logger = logging.getLogger(__name__)

# Declared MIME types accepted for resumes
ALLOWED_CONTENT_TYPES = {
    "application/pdf": ".pdf",
    "application/msword": ".doc",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": ".docx",
}
MAX_RESUME_SIZE_MB = settings.resume_max_size_mb


class ResumeRejection(str, Enum):
    """Why a resume was refused."""
    WRONG_TYPE = "wrong_type"
    TOO_LARGE = "too_large"


REJECTION_MESSAGES = {
    ResumeRejection.WRONG_TYPE: ("Invalid file type", "Please upload a PDF or Word document."),
    ResumeRejection.TOO_LARGE: ("File too large", f"Please upload a file smaller than {MAX_RESUME_SIZE_MB}MB."),
}


class ResumeValidationError(Exception):
    """Raised when a resume fails type or size validation."""

    def __init__(self, reason: ResumeRejection):
        self.reason = reason
        self.title, self.message = REJECTION_MESSAGES[reason]
        super().__init__(self.message)


def max_resume_bytes() -> int:
    return MAX_RESUME_SIZE_MB * 1024 * 1024


def check_resume(content_type: Optional[str], size: int) -> Optional[ResumeRejection]:
    """
    Return the rejection reason for a candidate file, or None if acceptable.

    Type is checked first, so a large file of the wrong type is WRONG_TYPE.
    """
    declared = (content_type or "").split(";")[0].strip().lower()
    if declared not in ALLOWED_CONTENT_TYPES:
        return ResumeRejection.WRONG_TYPE
    if size > max_resume_bytes():
        return ResumeRejection.TOO_LARGE
    return None


def validate_resume(filename: Optional[str], content_type: Optional[str], size: int) -> None:
    """
    Validate a resume before any upload is attempted.

    Raises:
        ResumeValidationError: With reason WRONG_TYPE or TOO_LARGE
    """
    reason = check_resume(content_type, size)
    if reason is not None:
        logger.warning(
            f"Rejected resume {filename!r} ({content_type}, {size} bytes): {reason.value}"
        )
        raise ResumeValidationError(reason)


def resume_extension(filename: Optional[str], content_type: Optional[str]) -> str:
    """File extension for the stored object, without the leading dot."""
    suffix = PurePosixPath(filename or "").suffix.lower()
    if not suffix:
        declared = (content_type or "").split(";")[0].strip().lower()
        suffix = ALLOWED_CONTENT_TYPES.get(declared) or mimetypes.guess_extension(declared) or ""
    return suffix.lstrip(".")


def build_resume_path(
    applicant_id: str,
    filename: Optional[str],
    content_type: Optional[str],
    now: Optional[datetime] = None,
) -> str:
    """
    Storage path for an applicant's resume: <applicant_id>/<epoch_millis>.<ext>

    The timestamp keeps repeated uploads by the same applicant apart.
    """
    now = now or datetime.utcnow()
    millis = (now - datetime(1970, 1, 1)) // timedelta(milliseconds=1)
    extension = resume_extension(filename, content_type)
    name = f"{millis}.{extension}" if extension else str(millis)
    return f"{applicant_id}/{name}"
