"""Smoke tests for package import and version."""

import pdfpipe


def test_import_package() -> None:
    assert isinstance(pdfpipe, object)


def test_version() -> None:
    assert pdfpipe.__version__ == "0.1.0"


def test_public_api() -> None:
    for name in ("Configuration", "acquire_content", "build_document", "DocumentBuilder"):
        assert hasattr(pdfpipe, name)
