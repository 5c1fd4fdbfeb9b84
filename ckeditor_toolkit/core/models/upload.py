"""Upload policy models.

Data structures describing what the editor may upload: size limits and
allowed MIME types, plus the per-file context and result objects passed to
an upload handler. The transport itself lives outside this package.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

__all__ = [
    "UploadConfig",
    "UploadContext",
    "UploadResult",
    "DEFAULT_MIME_TYPES",
    "DEFAULT_MAX_FILE_SIZE",
    "MIN_FILE_SIZE",
    "MAX_FILE_SIZE_LIMIT",
]

MIN_FILE_SIZE = 1
MAX_FILE_SIZE_LIMIT = 1024 * 1024 * 1024
DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024
DEFAULT_MIME_TYPES = ("image/jpeg", "image/png", "image/gif", "image/webp")


@dataclass(frozen=True)
class UploadContext:
    """Metadata of a file about to be uploaded."""

    file_name: str
    mime_type: Optional[str]
    file_size: int

    @property
    def is_image(self) -> bool:
        return bool(self.mime_type) and self.mime_type.startswith("image/")


@dataclass(frozen=True)
class UploadResult:
    """Outcome of an upload: the stored file URL or an error message."""

    url: Optional[str] = None
    success: bool = True
    error_message: Optional[str] = None

    @classmethod
    def failure(cls, error_message: str) -> "UploadResult":
        return cls(url=None, success=False, error_message=error_message)


def _clean_mime_types(mime_types: Iterable[Optional[str]]) -> List[str]:
    cleaned: List[str] = []
    for mime_type in mime_types:
        if mime_type is None or not mime_type.strip():
            raise ValueError("MIME type cannot be None or empty")
        if mime_type.strip() not in cleaned:
            cleaned.append(mime_type.strip())
    return cleaned


@dataclass
class UploadConfig:
    """Upload limits.

    An empty MIME type list allows every type.
    """

    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    allowed_mime_types: List[str] = field(default_factory=lambda: list(DEFAULT_MIME_TYPES))

    def __post_init__(self):
        """Validate limits after initialization."""
        self.set_max_file_size(self.max_file_size)
        self.set_allowed_mime_types(self.allowed_mime_types)

    def set_max_file_size(self, size: int) -> "UploadConfig":
        """Set the size limit in bytes.

        Raises:
            ValueError: If *size* is outside 1 byte .. 1 GiB.
        """
        if size < MIN_FILE_SIZE or size > MAX_FILE_SIZE_LIMIT:
            raise ValueError(
                f"max_file_size must be between {MIN_FILE_SIZE} and "
                f"{MAX_FILE_SIZE_LIMIT} bytes, got {size}"
            )
        self.max_file_size = size
        return self

    def set_allowed_mime_types(self, mime_types: Optional[Iterable[Optional[str]]]) -> "UploadConfig":
        """Replace the allowed MIME types; entries are stripped.

        Raises:
            ValueError: If *mime_types* is None or contains a blank entry.
        """
        if mime_types is None:
            raise ValueError("allowed_mime_types cannot be None")
        self.allowed_mime_types = _clean_mime_types(mime_types)
        return self

    def add_allowed_mime_types(self, *mime_types: Optional[str]) -> "UploadConfig":
        """Append MIME types, silently skipping blank entries."""
        for mime_type in mime_types:
            if mime_type and mime_type.strip() and mime_type.strip() not in self.allowed_mime_types:
                self.allowed_mime_types.append(mime_type.strip())
        return self

    def reset_allowed_mime_types(self) -> "UploadConfig":
        self.allowed_mime_types = list(DEFAULT_MIME_TYPES)
        return self

    def validate(self, context: Optional[UploadContext]) -> Optional[str]:
        """Check *context* against the limits.

        Returns:
            An error message, or None if the upload is acceptable.
        """
        if context is None:
            return "Upload context cannot be null"
        if context.file_size > self.max_file_size:
            return (
                f"File size {context.file_size} exceeds maximum allowed "
                f"{self.max_file_size} bytes"
            )
        if self.allowed_mime_types and context.mime_type not in self.allowed_mime_types:
            return (
                f"MIME type '{context.mime_type}' is not allowed. "
                f"Allowed types: {', '.join(self.allowed_mime_types)}"
            )
        return None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UploadConfig":
        return cls(
            max_file_size=int(data.get("max_file_size", DEFAULT_MAX_FILE_SIZE)),
            allowed_mime_types=list(data.get("allowed_mime_types", DEFAULT_MIME_TYPES)),
        )
