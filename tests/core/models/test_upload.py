import pytest

from ckeditor_toolkit.core.models import UploadConfig, UploadContext, UploadResult
from ckeditor_toolkit.core.models.upload import (
    DEFAULT_MAX_FILE_SIZE,
    DEFAULT_MIME_TYPES,
    MAX_FILE_SIZE_LIMIT,
)


class TestUploadConfigLimits:
    """Test file size limits."""

    def test_defaults(self):
        config = UploadConfig()
        assert config.max_file_size == DEFAULT_MAX_FILE_SIZE == 10 * 1024 * 1024
        assert config.allowed_mime_types == list(DEFAULT_MIME_TYPES)

    @pytest.mark.parametrize("size", [1, 1024, MAX_FILE_SIZE_LIMIT])
    def test_accepts_sizes_in_range(self, size):
        assert UploadConfig().set_max_file_size(size).max_file_size == size

    @pytest.mark.parametrize("size", [0, -1, MAX_FILE_SIZE_LIMIT + 1])
    def test_rejects_sizes_out_of_range(self, size):
        with pytest.raises(ValueError):
            UploadConfig().set_max_file_size(size)

    def test_constructor_validates(self):
        with pytest.raises(ValueError):
            UploadConfig(max_file_size=0)


class TestUploadConfigMimeTypes:
    """Test MIME type lists."""

    def test_set_strips_entries(self):
        config = UploadConfig().set_allowed_mime_types([" image/png ", "application/pdf"])
        assert config.allowed_mime_types == ["image/png", "application/pdf"]

    def test_set_none_rejected(self):
        with pytest.raises(ValueError):
            UploadConfig().set_allowed_mime_types(None)

    @pytest.mark.parametrize("entry", ["", "  ", None])
    def test_set_blank_entry_rejected(self, entry):
        with pytest.raises(ValueError):
            UploadConfig().set_allowed_mime_types(["image/png", entry])

    def test_add_skips_blank_and_duplicates(self):
        config = UploadConfig().add_allowed_mime_types("application/pdf", "", None, "image/png")
        assert config.allowed_mime_types == list(DEFAULT_MIME_TYPES) + ["application/pdf"]

    def test_reset(self):
        config = UploadConfig().set_allowed_mime_types(["text/plain"]).reset_allowed_mime_types()
        assert config.allowed_mime_types == list(DEFAULT_MIME_TYPES)

    def test_from_dict(self):
        config = UploadConfig.from_dict({"max_file_size": 2048, "allowed_mime_types": ["image/png"]})
        assert config.max_file_size == 2048
        assert config.allowed_mime_types == ["image/png"]
        assert UploadConfig.from_dict({}) == UploadConfig()


class TestUploadValidation:
    """Test validating an upload against the limits."""

    def test_accepts(self):
        assert UploadConfig().validate(UploadContext("a.png", "image/png", 1000)) is None

    def test_none_context(self):
        assert UploadConfig().validate(None) == "Upload context cannot be null"

    def test_too_large(self):
        config = UploadConfig(max_file_size=100)
        message = config.validate(UploadContext("a.png", "image/png", 101))
        assert message == "File size 101 exceeds maximum allowed 100 bytes"

    def test_wrong_type(self):
        message = UploadConfig().validate(UploadContext("a.pdf", "application/pdf", 10))
        assert message.startswith("MIME type 'application/pdf' is not allowed. Allowed types: image/jpeg")

    def test_empty_list_allows_everything(self):
        config = UploadConfig().set_allowed_mime_types([])
        assert config.validate(UploadContext("a.bin", "application/octet-stream", 10)) is None


class TestUploadContextAndResult:

    def test_is_image(self):
        assert UploadContext("a.png", "image/png", 1).is_image
        assert not UploadContext("a.pdf", "application/pdf", 1).is_image
        assert not UploadContext("a", None, 1).is_image

    def test_failure(self):
        result = UploadResult.failure("disk full")
        assert not result.success
        assert result.url is None
        assert result.error_message == "disk full"
        assert UploadResult("https://cdn.example.com/a.png").success
