"""
Tests for ExtractorConfig
"""

from pathlib import Path

import pytest

from spr_extractor.config import ExtractorConfig
from spr_extractor.constants import MAX_OUTPUT_NAME_LENGTH


@pytest.mark.unit
class TestExtractorConfig:
    """Test defaults, environment and overrides"""

    def test_defaults(self):
        config = ExtractorConfig()

        assert config.output_dir is None
        assert config.planar is False
        assert config.max_name_length == MAX_OUTPUT_NAME_LENGTH == 31
        assert config.log_level == "INFO"

    def test_from_env_empty(self):
        assert ExtractorConfig.from_env({}) == ExtractorConfig()

    @pytest.mark.parametrize("value", ["1", "true", "YES"])
    def test_from_env_debug(self, value):
        assert ExtractorConfig.from_env({"SPR_EXTRACTOR_DEBUG": value}).log_level == "DEBUG"

    def test_from_env_output_dir(self):
        config = ExtractorConfig.from_env({"SPR_EXTRACTOR_OUTPUT_DIR": "/tmp/sprites"})
        assert config.output_dir == Path("/tmp/sprites")

    def test_merged_skips_none(self):
        base = ExtractorConfig(planar=True, max_name_length=50)
        merged = base.merged(planar=None, max_name_length=None, log_level="WARNING")

        assert merged.planar is True
        assert merged.max_name_length == 50
        assert merged.log_level == "WARNING"
        assert base.log_level == "INFO"

    @pytest.mark.parametrize("length", [0, -5])
    def test_rejects_non_positive_name_length(self, length):
        with pytest.raises(ValueError, match="max_name_length"):
            ExtractorConfig(max_name_length=length)

    def test_output_dir_defaults_to_archive_directory(self):
        assert ExtractorConfig().output_dir_for("data/sprites/QUAR.SPR") == Path("data/sprites")

    def test_output_dir_override(self):
        config = ExtractorConfig(output_dir=Path("out"))
        assert config.output_dir_for("data/QUAR.SPR") == Path("out")
