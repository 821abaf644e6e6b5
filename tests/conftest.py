from __future__ import annotations

from pathlib import Path

import pytest

TESTS_DIR = Path(__file__).resolve().parent

SMOKE_DIRS = (
    TESTS_DIR / "version",
    TESTS_DIR / "safe_chars",
    TESTS_DIR / "decoding",
    TESTS_DIR / "encoding",
)

SLOW_FILES = (
    TESTS_DIR / "decoding" / "test_exhaustive_code_points.py",
)


def _is_in_dir(path: Path, directory: Path) -> bool:
    try:
        path.relative_to(directory)
    except ValueError:
        return False
    return True


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    for item in items:
        path = Path(str(item.fspath)).resolve()

        if path in SLOW_FILES:
            item.add_marker(pytest.mark.slow)
        elif any(_is_in_dir(path, directory) for directory in SMOKE_DIRS):
            item.add_marker(pytest.mark.smoke)
