"""Tests for config and result models."""

import dataclasses

import pytest

from doremid.codec.models import Config, ParseResult, RenderResult


class TestConfigDefaults:
    def test_default(self):
        config = Config.default()
        assert config == Config(melody_digits=4, pitch_digits=5, separator="-")

    def test_frozen(self):
        config = Config.default()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.melody_digits = 2


class TestConfigValidate:
    def test_valid(self):
        assert Config(1, 1, "").validate() == []
        assert Config(3, 4, "_").validate() == []

    @pytest.mark.parametrize("digits", [0, -1])
    def test_non_positive_melody_digits(self, digits):
        errors = Config(melody_digits=digits).validate()
        assert len(errors) == 1
        assert "melody_digits must be >= 1" in errors[0]

    def test_non_integer_pitch_digits(self):
        errors = Config(pitch_digits=2.5).validate()
        assert "pitch_digits must be an integer" in errors[0]

    def test_bool_rejected(self):
        errors = Config(pitch_digits=True).validate()
        assert "pitch_digits must be an integer" in errors[0]

    def test_separator_not_string(self):
        errors = Config(separator=None).validate()
        assert "separator must be a string" in errors[0]

    @pytest.mark.parametrize("separator", ["a", "o", "5", "x-o"])
    def test_separator_clashes_with_alphabet(self, separator):
        errors = Config(separator=separator).validate()
        assert len(errors) == 1
        assert "shares characters" in errors[0]

    def test_multiple_errors(self):
        errors = Config(melody_digits=0, pitch_digits=0, separator="do").validate()
        assert len(errors) == 3


class TestConfigSerialization:
    def test_to_dict(self):
        assert Config(2, 3, "_").to_dict() == {
            "melodyDigits": 2,
            "pitchDigits": 3,
            "separator": "_",
        }

    def test_from_dict(self):
        config = Config.from_dict({"melodyDigits": 2, "pitchDigits": 3, "separator": ""})
        assert config == Config(2, 3, "")

    def test_from_dict_defaults(self):
        assert Config.from_dict({"pitchDigits": 2}) == Config(4, 2, "-")

    def test_dict_round_trip(self):
        config = Config(6, 1, ".")
        assert Config.from_dict(config.to_dict()) == config


class TestConfigFromEnv:
    def test_empty_env_gives_defaults(self):
        assert Config.from_env({}) == Config.default()

    def test_reads_variables(self):
        env = {
            "DOREMID_MELODY_DIGITS": "2",
            "DOREMID_PITCH_DIGITS": "3",
            "DOREMID_SEPARATOR": "_",
        }
        assert Config.from_env(env) == Config(2, 3, "_")

    def test_empty_separator_kept(self):
        assert Config.from_env({"DOREMID_SEPARATOR": ""}).separator == ""

    def test_blank_digits_use_default(self):
        assert Config.from_env({"DOREMID_PITCH_DIGITS": " "}).pitch_digits == 5

    def test_non_integer_raises(self):
        with pytest.raises(ValueError, match="DOREMID_MELODY_DIGITS"):
            Config.from_env({"DOREMID_MELODY_DIGITS": "four"})

    def test_process_environment(self, clean_env):
        clean_env.setenv("DOREMID_MELODY_DIGITS", "3")
        assert Config.from_env().melody_digits == 3


class TestResults:
    def test_parse_result_defaults_to_sentinel(self):
        result = ParseResult(success=False, error="bad")
        assert result.position == -1

    def test_render_result_defaults_to_sentinel(self):
        result = RenderResult(success=False, error="bad")
        assert result.identifier == ""
