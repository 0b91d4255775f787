"""Tests for ComponentConfig."""

from __future__ import annotations

import dataclasses

import pytest

from uri_components._config import ComponentConfig


class TestComponentConfigDefaults:
    """CFG-001: defaults and immutability."""

    @pytest.mark.contract("CFG-001")
    def test_defaults(self) -> None:
        cfg = ComponentConfig()
        assert cfg.query_separator == "&"
        assert cfg.encode_output is True

    @pytest.mark.contract("CFG-001")
    def test_frozen(self) -> None:
        cfg = ComponentConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            cfg.query_separator = ";"  # type: ignore[misc]


class TestComponentConfigValidation:
    """CFG-002: validate()."""

    @pytest.mark.contract("CFG-002")
    def test_valid(self) -> None:
        ComponentConfig(query_separator=";").validate()

    @pytest.mark.contract("CFG-002")
    @pytest.mark.parametrize("separator", ["", "&&", "/", "?", "#", "="])
    def test_invalid_separator(self, separator: str) -> None:
        with pytest.raises(ValueError, match="separator"):
            ComponentConfig(query_separator=separator).validate()


class TestComponentConfigFromDict:
    """CFG-003: from_dict()."""

    @pytest.mark.contract("CFG-003")
    def test_from_dict(self) -> None:
        cfg = ComponentConfig.from_dict({"query_separator": ";", "encode_output": False})
        assert cfg == ComponentConfig(query_separator=";", encode_output=False)

    @pytest.mark.contract("CFG-003")
    def test_from_empty_dict(self) -> None:
        assert ComponentConfig.from_dict({}) == ComponentConfig()

    @pytest.mark.contract("CFG-003")
    def test_not_a_dict(self) -> None:
        with pytest.raises(TypeError):
            ComponentConfig.from_dict(["&"])  # type: ignore[arg-type]

    @pytest.mark.contract("CFG-003")
    def test_unknown_key(self) -> None:
        with pytest.raises(ValueError, match="Unknown config keys"):
            ComponentConfig.from_dict({"separator": ";"})

    @pytest.mark.contract("CFG-003")
    def test_invalid_values_rejected(self) -> None:
        with pytest.raises(ValueError):
            ComponentConfig.from_dict({"query_separator": "#"})

    @pytest.mark.contract("CFG-003")
    @pytest.mark.parametrize("value", ["false", "true", 0, 1, None])
    def test_encode_output_must_be_bool(self, value: object) -> None:
        with pytest.raises(TypeError, match="encode_output"):
            ComponentConfig.from_dict({"encode_output": value})

    @pytest.mark.contract("CFG-003")
    def test_query_separator_must_be_string(self) -> None:
        with pytest.raises(TypeError, match="query_separator"):
            ComponentConfig.from_dict({"query_separator": 1})
