"""Feature-level fixtures for i18n system tests.

Provides translation instances and locale directories for resolution and
locale switching scenarios.
"""

import json

import pytest
import yaml

from tests.factories.i18n import EN_DATA, TR_DATA, make_i18n


@pytest.fixture
def i18n():
    """I18n with "en" (default) and "tr" locales."""
    return make_i18n()


@pytest.fixture
def debug_i18n():
    """I18n with debug tracing enabled."""
    return make_i18n(debug=True)


@pytest.fixture
def temp_locales_dir(tmp_path):
    """Create a temporary directory with locale documents.

    Returns a directory structure like:
    - en.json
    - tr.yml
    - notes.txt (ignored)
    """
    with open(tmp_path / "en.json", "w", encoding="utf-8") as f:
        json.dump(EN_DATA, f, ensure_ascii=False)

    with open(tmp_path / "tr.yml", "w", encoding="utf-8") as f:
        yaml.safe_dump(TR_DATA, f, allow_unicode=True)

    (tmp_path / "notes.txt").write_text("not a locale", encoding="utf-8")

    return tmp_path
