import pytest

from ckeditor_toolkit import version


@pytest.fixture(autouse=True)
def reset_version_cache(monkeypatch):
    monkeypatch.setattr(version, "_CACHED_VERSION", None)


class TestGetAppVersion:

    def test_from_metadata(self, monkeypatch):
        monkeypatch.setattr(version.metadata, "version", lambda name: "2.1.0")
        assert version.get_app_version() == "v2.1.0"

    def test_dev_fallback(self, monkeypatch):
        def missing(name):
            raise version.metadata.PackageNotFoundError(name)

        monkeypatch.setattr(version.metadata, "version", missing)
        assert version.get_app_version() == "vdev"

    def test_cached(self, monkeypatch):
        monkeypatch.setattr(version.metadata, "version", lambda name: "1.0.0")
        first = version.get_app_version()
        monkeypatch.setattr(version.metadata, "version", lambda name: "9.9.9")
        assert version.get_app_version() == first
