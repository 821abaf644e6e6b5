import re

import pytest

import formurlcodec


def test_version_exists():
    """
    Test that __version__ attribute exists and is accessible.
    """
    assert hasattr(formurlcodec, '__version__')
    assert formurlcodec.__version__ is not None


def test_version_is_non_empty_string():
    assert isinstance(formurlcodec.__version__, str)
    assert len(formurlcodec.__version__) > 0


def test_version_follows_semantic_versioning():
    """
    Test that __version__ follows semantic versioning format (X.Y.Z).
    """
    semver_pattern = r'^\d+\.\d+\.\d+(?:[-.]?(?:a|alpha|b|beta|rc|dev)\d*)?$'
    assert re.match(semver_pattern, formurlcodec.__version__)


def test_version_matches_metadata():
    from importlib import metadata

    try:
        metadata_version = metadata.version("formurlcodec")
    except metadata.PackageNotFoundError as e:
        pytest.fail(f"Could not retrieve version from metadata: {e}")
    assert formurlcodec.__version__ == metadata_version


def test_version_in_all():
    assert '__version__' in formurlcodec.__all__
