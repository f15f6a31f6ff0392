"""Tests for config schema validation."""

import pytest
from pydantic import ValidationError

from heatpanel.config.schema import ApiConfig, EditorConfig, PanelConfig


class TestPanelConfig:
    def test_defaults(self):
        config = PanelConfig()
        assert config.editor.min_band_width == 1.0
        assert config.editor.default_low_temp == 18.0
        assert config.auth.token_env_var == "HEATPANEL_TOKEN"
        assert config.api.status_url.endswith("/FrontPageAPIv2")

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            PanelConfig(unknown_field="bad")

    def test_nested_extra_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            EditorConfig(min_band_width=1.0, bogus=True)


class TestEditorConfig:
    def test_band_width_must_be_positive(self):
        with pytest.raises(ValidationError):
            EditorConfig(min_band_width=0.0)

    def test_default_band_must_fit_min_width(self):
        with pytest.raises(ValidationError, match="narrower"):
            EditorConfig(min_band_width=2.0, default_low_temp=18, default_high_temp=19)


class TestApiConfig:
    def test_timeout_positive(self):
        with pytest.raises(ValidationError):
            ApiConfig(timeout_seconds=0)

    def test_retries_non_negative(self):
        with pytest.raises(ValidationError):
            ApiConfig(max_retries=-1)
