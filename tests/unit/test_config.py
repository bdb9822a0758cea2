"""Unit tests for config.py"""

import pytest

from mdmatter.config import load_config


def test_load_config_defaults():
    """Settings defaults apply when no mdmatter.yaml, env var, or override exists."""
    settings = load_config()
    assert settings.language == "yaml"
    assert settings.delimiters == "---"
    assert settings.excerpt is False
    assert settings.unsafe_eval is False


def test_load_config_reads_yaml_file(tmp_path):
    (tmp_path / "mdmatter.yaml").write_text("language: json\nexcerpt: true\n")
    settings = load_config()
    assert settings.language == "json"
    assert settings.excerpt is True


def test_load_config_env_overrides_yaml_file(tmp_path, monkeypatch):
    """MDMATTER_LANGUAGE takes precedence over mdmatter.yaml."""
    (tmp_path / "mdmatter.yaml").write_text("language: json\n")
    monkeypatch.setenv("MDMATTER_LANGUAGE", "yaml")
    assert load_config().language == "yaml"


def test_load_config_cli_overrides_env(monkeypatch):
    """A non-None CLI override beats the env var; None overrides are ignored."""
    monkeypatch.setenv("MDMATTER_DELIMITERS", "~~~")
    assert load_config(overrides={"delimiters": "+++"}).delimiters == "+++"
    assert load_config(overrides={"delimiters": None}).delimiters == "~~~"


def test_load_config_env_bool_coercion(monkeypatch):
    monkeypatch.setenv("MDMATTER_EXCERPT", "true")
    monkeypatch.setenv("MDMATTER_UNSAFE_EVAL", "1")
    settings = load_config()
    assert settings.excerpt is True
    assert settings.unsafe_eval is True


def test_load_config_invalid_yaml(tmp_path):
    """load_config raises ValueError when mdmatter.yaml contains invalid YAML."""
    (tmp_path / "mdmatter.yaml").write_text("key: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid mdmatter.yaml"):
        load_config()


def test_load_config_non_mapping_yaml(tmp_path):
    (tmp_path / "mdmatter.yaml").write_text("- a\n- b\n")
    with pytest.raises(ValueError, match="expected a mapping"):
        load_config()


def test_load_config_invalid_log_level(monkeypatch):
    monkeypatch.setenv("MDMATTER_LOG_LEVEL", "loud")
    with pytest.raises(ValueError):
        load_config()


def test_to_options_maps_settings():
    settings = load_config(overrides={
        "language": "JSON", "delimiters": "<!--", "close_delimiter": "-->",
        "excerpt": True, "excerpt_separator": "<!-- more -->",
    })
    options = settings.to_options()
    assert options.language is None
    assert options.default_language == "json"
    assert options.delimiters == ("<!--", "-->")
    assert options.excerpt is True
    assert options.excerpt_separator == "<!-- more -->"


def test_to_options_explicit_language():
    assert load_config().to_options("yml").language == "yml"
