"""Tests for configuration loading and validation."""

import pytest
from pydantic import ValidationError

from samazama.config import SamazamaConfig, config_from_env, load_config
from samazama.errors import ConfigurationError, ErrorCategory
from samazama.phonetic import DigraphResponse, encode


class TestSamazamaConfig:
    """Tests for SamazamaConfig model."""

    def test_defaults(self):
        """Test default configuration."""
        config = SamazamaConfig()

        assert config.sound_groups["5"] == "mn"
        assert config.noncode == "0"
        assert config.code_length == 4
        assert config.digraphs == {"gh": DigraphResponse.REMOVE}
        assert config.keep_initial == ["gh"]
        assert config.recursion_ceiling == 362880
        assert config.lowercase is True

    def test_frozen(self):
        """Test settings cannot change after creation."""
        config = SamazamaConfig()
        with pytest.raises(ValidationError):
            config.lowercase = False

    def test_digraph_from_string(self):
        """Test responses parse from their string values."""
        config = SamazamaConfig(digraphs={"gh": "remove", "ph": "keep_second"}, keep_initial=[])
        assert config.digraphs["ph"] is DigraphResponse.KEEP_SECOND

    def test_letter_in_two_groups(self):
        """Test a letter may only belong to one group."""
        with pytest.raises(ValidationError):
            SamazamaConfig(sound_groups={"0": "aeiou", "1": "ba", "2": "c"})

    def test_missing_noncode_group(self):
        """Test the no-code group must exist."""
        with pytest.raises(ValidationError):
            SamazamaConfig(sound_groups={"1": "b"})

    def test_bad_digraph_length(self):
        """Test digraph keys must be two characters."""
        with pytest.raises(ValidationError):
            SamazamaConfig(digraphs={"tch": "remove"}, keep_initial=[])

    def test_unknown_keep_initial(self):
        """Test keep_initial entries must be digraphs."""
        with pytest.raises(ValidationError):
            SamazamaConfig(keep_initial=["ph"])

    def test_noncode_single_character(self):
        """Test the no-code digit must be one character."""
        with pytest.raises(ValidationError):
            SamazamaConfig(noncode="00", sound_groups={"00": "aeiou", "1": "b"})
        with pytest.raises(ValidationError):
            SamazamaConfig(noncode="")

    def test_negative_ceiling(self):
        """Test the ceiling cannot be negative."""
        with pytest.raises(ValidationError):
            SamazamaConfig(recursion_ceiling=-1)

    def test_tables(self):
        """Test tables built from the config drive encoding."""
        config = SamazamaConfig(digraphs={"gh": "remove", "xt": "keep_second"})

        groups = config.sound_group_table()
        digraphs = config.digraph_table()

        assert groups.group_of("x") == "2"
        assert digraphs.response_for("XT") is DigraphResponse.KEEP_SECOND
        assert digraphs.keep_initial == frozenset({"gh"})
        assert encode("next", groups, digraphs) == "n300"


class TestLoadConfig:
    """Tests for load_config."""

    def test_empty(self):
        """Test missing data gives defaults."""
        assert load_config() == SamazamaConfig()

    def test_values(self):
        """Test values are applied."""
        config = load_config({"recursion_ceiling": 100, "lowercase": False})

        assert config.recursion_ceiling == 100
        assert config.lowercase is False

    def test_invalid(self):
        """Test invalid data raises ConfigurationError."""
        with pytest.raises(ConfigurationError) as exc_info:
            load_config({"code_length": 0})

        assert exc_info.value.category == ErrorCategory.CONFIGURATION
        assert exc_info.value.recoverable is False
        assert exc_info.value.context["errors"] == 1


class TestConfigFromEnv:
    """Tests for environment configuration."""

    def test_no_variables(self):
        """Test defaults without variables."""
        assert config_from_env({}) == SamazamaConfig()

    def test_variables(self):
        """Test recognized variables."""
        config = config_from_env(
            {
                "SAMAZAMA_RECURSION_CEILING": "5000",
                "SAMAZAMA_CODE_LENGTH": "6",
                "SAMAZAMA_LOWERCASE": "no",
            }
        )

        assert config.recursion_ceiling == 5000
        assert config.code_length == 6
        assert config.lowercase is False

    def test_not_an_integer(self):
        """Test a non-numeric ceiling is rejected."""
        with pytest.raises(ConfigurationError):
            config_from_env({"SAMAZAMA_RECURSION_CEILING": "lots"})

    def test_reads_os_environ(self, monkeypatch):
        """Test os.environ is used by default."""
        monkeypatch.setenv("SAMAZAMA_RECURSION_CEILING", "42")
        assert config_from_env().recursion_ceiling == 42
