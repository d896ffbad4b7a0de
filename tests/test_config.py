from __future__ import annotations

import pydantic
import pytest

from fontfetch.core.config import DEFAULT_TEMPLATE, DownloadConfig, filter_options


def test_defaults_are_well_typed() -> None:
    config = DownloadConfig()

    assert config.output_dir == "./fonts"
    assert config.path == "./"
    assert config.template == DEFAULT_TEMPLATE
    assert config.css_file == "fonts.css"
    assert "Mozilla/5.0" in config.user_agent
    assert config.base64 is False
    assert config.overwriting is False
    assert config.strict_ssl is True
    assert config.verbose is False
    assert config.simulate is False
    assert config.timeout == 30.0


def test_unknown_and_mistyped_values_fall_back_to_defaults() -> None:
    config = DownloadConfig.model_validate(
        {
            "output_dir": 12,
            "verbose": "yes",
            "simulate": True,
            "timeout": True,
            "unknown": "value",
        }
    )

    assert config.output_dir == "./fonts"
    assert config.verbose is False
    assert config.simulate is True
    assert config.timeout == 30.0
    assert not hasattr(config, "unknown")


def test_camel_case_aliases_are_accepted() -> None:
    config = DownloadConfig.model_validate(
        {"outputDir": "out", "cssFile": "x.css", "userAgent": "UA", "strictSSL": False}
    )

    assert config.output_dir == "out"
    assert config.css_file == "x.css"
    assert config.user_agent == "UA"
    assert config.strict_ssl is False


def test_non_mapping_input_yields_defaults() -> None:
    assert DownloadConfig.model_validate(None) == DownloadConfig()
    assert DownloadConfig.model_validate(["verbose"]) == DownloadConfig()


def test_integer_timeout_is_coerced_to_float() -> None:
    assert filter_options({"timeout": 5}) == {"timeout": 5.0}


def test_config_is_immutable() -> None:
    config = DownloadConfig()

    with pytest.raises(pydantic.ValidationError):
        config.verbose = True


def test_merged_applies_overrides_in_order() -> None:
    base = DownloadConfig.model_validate({"output_dir": "a", "verbose": True})

    merged = base.merged({"output_dir": "b", "base64": 1}, None, {"cssFile": "c.css"})

    assert merged.output_dir == "b"
    assert merged.verbose is True
    assert merged.base64 is False
    assert merged.css_file == "c.css"
    assert base.output_dir == "a"


def test_merged_accepts_config_instances() -> None:
    other = DownloadConfig.model_validate({"simulate": True})

    assert DownloadConfig().merged(other).simulate is True
