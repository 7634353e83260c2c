"""Tests for tater.i18n.loader module."""

import pytest
import yaml

from tater.i18n import DirectoryMessageLoader, PythonMessageLoader, YAMLMessageLoader


class TestYAMLMessageLoader:
    """Tests for YAMLMessageLoader."""

    def test_yields_one_mapping_per_file(self, temp_messages_dir):
        """iter_sources() yields each YAML file, recursively."""
        sources = list(YAMLMessageLoader().iter_sources(temp_messages_dir))
        assert len(sources) == 3

    def test_sorted_discovery_order(self, temp_messages_dir):
        """iter_sources() yields files in sorted path order."""
        sources = list(YAMLMessageLoader().iter_sources(temp_messages_dir))
        assert "en" in sources[0]
        assert "fr" in sources[1]
        assert sources[2]["en"]["farewell"] == "See you"

    def test_accepts_yaml_extension(self, tmp_path):
        """iter_sources() picks up *.yaml as well as *.yml."""
        (tmp_path / "messages.yaml").write_text("en:\n  hi: Hi\n", encoding="utf-8")
        assert list(YAMLMessageLoader().iter_sources(tmp_path)) == [{"en": {"hi": "Hi"}}]

    def test_skips_empty_files(self, tmp_path):
        """iter_sources() skips empty documents."""
        (tmp_path / "empty.yml").write_text("", encoding="utf-8")
        assert list(YAMLMessageLoader().iter_sources(tmp_path)) == []

    def test_skips_non_mapping_files(self, tmp_path):
        """iter_sources() skips documents that are not mappings."""
        with open(tmp_path / "list.yml", "w") as f:
            yaml.dump(["not", "a", "mapping"], f)
        assert list(YAMLMessageLoader().iter_sources(tmp_path)) == []

    def test_parse_error_propagates(self, tmp_path):
        """iter_sources() lets YAML parse errors reach the caller."""
        (tmp_path / "broken.yml").write_text("en: [unclosed\n", encoding="utf-8")
        with pytest.raises(yaml.YAMLError):
            list(YAMLMessageLoader().iter_sources(tmp_path))

    def test_missing_directory_raises(self, tmp_path):
        """iter_sources() raises FileNotFoundError for a missing directory."""
        with pytest.raises(FileNotFoundError):
            list(YAMLMessageLoader().iter_sources(tmp_path / "nonexistent"))


class TestPythonMessageLoader:
    """Tests for PythonMessageLoader."""

    def test_loads_messages_attribute(self, tmp_path):
        """iter_sources() reads MESSAGES from Python modules."""
        (tmp_path / "messages.py").write_text(
            'MESSAGES = {"en": {"hi": lambda key, options: "Hi " + key}}\n',
            encoding="utf-8",
        )
        sources = list(PythonMessageLoader().iter_sources(tmp_path))

        assert len(sources) == 1
        assert sources[0]["en"]["hi"]("there", {}) == "Hi there"

    def test_skips_modules_without_messages(self, tmp_path):
        """iter_sources() skips modules that define no MESSAGES."""
        (tmp_path / "helpers.py").write_text("VALUE = 1\n", encoding="utf-8")
        assert list(PythonMessageLoader().iter_sources(tmp_path)) == []

    def test_module_errors_propagate(self, tmp_path):
        """iter_sources() lets errors raised by a module reach the caller."""
        (tmp_path / "broken.py").write_text("raise RuntimeError('boom')\n", encoding="utf-8")
        with pytest.raises(RuntimeError):
            list(PythonMessageLoader().iter_sources(tmp_path))


class TestDirectoryMessageLoader:
    """Tests for DirectoryMessageLoader."""

    def test_yaml_before_python(self, tmp_path):
        """iter_sources() yields YAML sources before Python sources."""
        (tmp_path / "z.yml").write_text("en:\n  hi: yaml\n", encoding="utf-8")
        (tmp_path / "a.py").write_text('MESSAGES = {"en": {"hi": "python"}}\n', encoding="utf-8")

        sources = list(DirectoryMessageLoader().iter_sources(tmp_path))

        assert [source["en"]["hi"] for source in sources] == ["yaml", "python"]

    def test_custom_loaders(self, tmp_path):
        """DirectoryMessageLoader only uses the loaders it was given."""
        (tmp_path / "a.py").write_text('MESSAGES = {"en": {"hi": "python"}}\n', encoding="utf-8")
        loader = DirectoryMessageLoader(loaders=[YAMLMessageLoader()])
        assert list(loader.iter_sources(tmp_path)) == []
