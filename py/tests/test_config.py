"""Tests for I/O configuration."""

import logging

import pytest

import sys
sys.path.insert(0, str(__file__).rsplit('/', 2)[0])

from gbln import Config, ValidationError, io_default, source_default


class TestConfig:

    def test_defaults(self):
        config = Config()
        assert config.mini_mode is True
        assert config.compress is True
        assert config.compression_level == 6
        assert config.indent == 2
        assert config.strip_comments is True

    def test_custom_values(self):
        config = Config(mini_mode=False, compress=False, compression_level=9,
                        indent=4, strip_comments=False)
        assert config.mini_mode is False
        assert config.compression_level == 9
        assert config.indent == 4

    @pytest.mark.parametrize("level", [-1, 10, 99])
    def test_compression_level_range(self, level):
        with pytest.raises(ValidationError) as exc:
            Config(compression_level=level)
        assert exc.value.field == "compression_level"

    @pytest.mark.parametrize("level", [0, 9])
    def test_compression_level_bounds_accepted(self, level):
        assert Config(compression_level=level).compression_level == level

    @pytest.mark.parametrize("indent", [0, -1, 2.0, True])
    def test_indent_must_be_positive_int(self, indent):
        with pytest.raises(ValidationError) as exc:
            Config(indent=indent)
        assert exc.value.field == "indent"

    def test_large_indent_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="gbln.config"):
            config = Config(indent=12)
        assert config.indent == 12
        assert "recommended maximum" in caplog.text

    @pytest.mark.parametrize("name", ["mini_mode", "compress", "strip_comments"])
    def test_boolean_fields(self, name):
        with pytest.raises(ValidationError) as exc:
            Config(**{name: 1})
        assert exc.value.field == name

    def test_validation_order(self):
        config = Config()
        config.compress = "yes"
        config.compression_level = 10
        config.indent = 0
        with pytest.raises(ValidationError) as exc:
            config.validate()
        assert exc.value.field == "compress"

        config.compress = True
        with pytest.raises(ValidationError) as exc:
            config.validate()
        assert exc.value.field == "compression_level"

        config.compression_level = 3
        with pytest.raises(ValidationError) as exc:
            config.validate()
        assert exc.value.field == "indent"

    def test_validate_after_mutation(self):
        config = Config(compression_level=5)
        config.compression_level = 99
        with pytest.raises(ValidationError) as exc:
            config.validate()
        assert "0-9" in exc.value.reason

    def test_replace(self):
        config = io_default().replace(compression_level=9)
        assert config.compression_level == 9
        assert config.compress is True
        with pytest.raises(ValidationError):
            io_default().replace(indent=0)


class TestPresets:

    def test_io_default(self):
        config = io_default()
        config.validate()
        assert config == Config(mini_mode=True, compress=True, compression_level=6,
                                indent=2, strip_comments=True)

    def test_source_default(self):
        config = source_default()
        config.validate()
        assert config.mini_mode is False
        assert config.compress is False
        assert config.compression_level == 0
        assert config.indent == 2
        assert config.strip_comments is False

    def test_presets_are_independent(self):
        a = io_default()
        a.indent = 4
        assert io_default().indent == 2


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
