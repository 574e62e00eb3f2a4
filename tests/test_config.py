"""Unit tests for import options.

WHY: ImportOptions replaces the constants that used to sit at the top of
the host script. Bad values must be coerced, not crash an import run.
"""

import pytest

from srt_layers.config import DEFAULT_ENCODING, DEFAULT_GROUP_SIZE, ImportOptions


class TestImportOptions:
    def test_defaults_come_from_config(self):
        options = ImportOptions()
        assert options.group_size == DEFAULT_GROUP_SIZE
        assert options.encoding == DEFAULT_ENCODING

    def test_group_size_is_coerced(self):
        assert ImportOptions(group_size=0).group_size == 1
        assert ImportOptions(group_size="4").group_size == 4
        assert ImportOptions(group_size=2.6).group_size == 2

    def test_empty_font_name_becomes_none(self):
        assert ImportOptions(font_name="").font_name is None
        assert ImportOptions(font_name="Inter").font_name == "Inter"

    def test_from_env_applies_overrides(self):
        options = ImportOptions.from_env(group_size=5, font_name=None, encoding="cp1252")
        assert options.group_size == 5
        assert options.encoding == "cp1252"

    def test_from_env_ignores_none(self):
        assert ImportOptions.from_env(group_size=None).group_size == DEFAULT_GROUP_SIZE

    def test_from_env_rejects_unknown_option(self):
        with pytest.raises(TypeError):
            ImportOptions.from_env(font_size=12)

    def test_instances_are_independent(self):
        first = ImportOptions(group_size=1)
        second = ImportOptions(group_size=7)
        assert (first.group_size, second.group_size) == (1, 7)
