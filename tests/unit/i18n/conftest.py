"""Feature-level fixtures for i18n tests."""

import pytest
import yaml


@pytest.fixture
def temp_messages_dir(tmp_path):
    """Create temporary directory with sample YAML message files.

    Returns a directory structure like:
    - base.en.yml
    - base.fr.yml
    - overrides/en.yml (loaded after base.en.yml)
    """
    en_base = {
        "en": {
            "greeting": "Hello, %{name}!",
            "farewell": "Goodbye",
            "nav": {"home": "Home", "about": "About"},
        }
    }
    with open(tmp_path / "base.en.yml", "w") as f:
        yaml.dump(en_base, f)

    fr_base = {
        "fr": {
            "greeting": "Bonjour, %{name} !",
            "nav": {"home": "Accueil"},
        }
    }
    with open(tmp_path / "base.fr.yml", "w") as f:
        yaml.dump(fr_base, f)

    (tmp_path / "overrides").mkdir()
    en_overrides = {
        "en": {
            "farewell": "See you",
            "nav": {"contact": "Contact"},
        }
    }
    with open(tmp_path / "overrides" / "en.yml", "w") as f:
        yaml.dump(en_overrides, f)

    return tmp_path


@pytest.fixture
def sample_messages():
    """Sample in-memory message tree."""
    return {
        "en": {
            "title": "Title",
            "deep": {"key": "Deeper"},
            "list": ["one", "two"],
        },
        "fr": {"title": "Titre"},
    }
