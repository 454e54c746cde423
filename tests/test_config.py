"""Tests for mailattr.config: AttributeConfig frozen dataclass."""

import pytest

from mailattr.config import AttributeConfig


class TestAttributeConfig:
    def test_defaults(self) -> None:
        cfg = AttributeConfig()

        assert cfg.separator == ", "
        assert cfg.case_sensitive is False
        assert cfg.strict is False

    def test_override(self) -> None:
        cfg = AttributeConfig(separator="; ", case_sensitive=True, strict=True)

        assert cfg.separator == "; "
        assert cfg.case_sensitive is True
        assert cfg.strict is True

    def test_frozen(self) -> None:
        cfg = AttributeConfig()

        with pytest.raises(AttributeError):
            cfg.strict = True  # type: ignore[misc]
