"""Tests for config.py."""

import pytest

from choco_diff.config import (
    CONFIG_PATH_ENV_VAR,
    DEFAULT_RULES,
    ConfigError,
    ExclusionRules,
    Settings,
    load_settings,
)


def test_defaults_without_file(monkeypatch) -> None:
    monkeypatch.delenv(CONFIG_PATH_ENV_VAR, raising=False)

    settings = load_settings()

    assert settings == Settings()
    assert settings.exclusions == DEFAULT_RULES
    assert (settings.left_label, settings.right_label) == ("left", "right")


def test_default_rules_match_banner_and_summary() -> None:
    assert DEFAULT_RULES.matches("Chocolatey v0.10.15")
    assert DEFAULT_RULES.matches("  97 packages installed.  ")
    assert not DEFAULT_RULES.matches("chocolatey 0.10.15")


def test_yaml_file(tmp_path) -> None:
    path = tmp_path / "settings.yaml"
    path.write_text(
        "exclude:\n"
        "  prefixes: ['Chocolatey v', 'Did you know']\n"
        "labels:\n"
        "  left: build-01\n"
        "  right: build-02\n",
        encoding="utf-8",
    )

    settings = load_settings(path)

    assert settings.exclusions == ExclusionRules(
        prefixes=("Chocolatey v", "Did you know"),
        suffixes=DEFAULT_RULES.suffixes,
    )
    assert settings.left_label == "build-01"
    assert settings.right_label == "build-02"


def test_json_file_from_env(tmp_path, monkeypatch) -> None:
    path = tmp_path / "settings.json"
    path.write_text('{"exclude": {"suffixes": ["installed."]}}', encoding="utf-8")
    monkeypatch.setenv(CONFIG_PATH_ENV_VAR, str(path))

    settings = load_settings()

    assert settings.exclusions.suffixes == ("installed.",)
    assert settings.exclusions.prefixes == DEFAULT_RULES.prefixes


def test_empty_file_is_defaults(tmp_path) -> None:
    path = tmp_path / "settings.yaml"
    path.write_text("", encoding="utf-8")

    assert load_settings(path) == Settings()


def test_missing_file(tmp_path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_settings(tmp_path / "nope.yaml")


@pytest.mark.parametrize(
    ("content", "message"),
    [
        ("- just\n- a list\n", "must be a mapping"),
        ("exclude: [1, 2]\n", "'exclude' must be a mapping"),
        ("exclude:\n  prefixes: Chocolatey v\n", "exclude.prefixes"),
        ("exclude:\n  suffixes: ['']\n", "exclude.suffixes"),
        ("labels: left\n", "'labels' must be a mapping"),
        ("labels:\n  right: 3\n", "labels.right"),
        ("exclude: {prefixes: [\n", "Invalid YAML"),
    ],
)
def test_invalid_content(tmp_path, content: str, message: str) -> None:
    path = tmp_path / "settings.yaml"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError, match=message):
        load_settings(path)


def test_with_labels_overrides_only_given() -> None:
    settings = Settings(left_label="a", right_label="b").with_labels(right="c")

    assert (settings.left_label, settings.right_label) == ("a", "c")
