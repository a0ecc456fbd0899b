import os
import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'profilekit' and tests/ importable for helpers.
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


from profilekit.core.config.settings import ProfileSettings
from profilekit.core.stdlib_logging import reset_logging_for_tests
from helpers.profiles import ProfileTree


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Keep the developer's config file and PROFILEKIT_* variables out of tests."""
    for key in list(os.environ):
        if key.startswith("PROFILEKIT_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("PROFILEKIT_USER_CONFIG_DIR", str(tmp_path / "user-config"))
    yield
    reset_logging_for_tests()


@pytest.fixture
def profile_tree(tmp_path: Path) -> ProfileTree:
    return ProfileTree(tmp_path / "appdata")


@pytest.fixture
def settings(profile_tree: ProfileTree) -> ProfileSettings:
    return profile_tree.settings()
