"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field, model_validator

from heatpanel.config import defaults


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    status_url: str = defaults.STATUS_URL
    boost_url: str = defaults.BOOST_URL
    profile_list_url: str = defaults.PROFILE_LIST_URL
    profile_save_url: str = defaults.PROFILE_SAVE_URL
    profile_delete_url: str = defaults.PROFILE_DELETE_URL
    priority_update_url: str = defaults.PRIORITY_UPDATE_URL
    timeout_seconds: float = Field(default=30.0, gt=0.0)
    max_retries: int = Field(default=2, ge=0)
    retry_base_delay: float = Field(default=1.0, ge=0.0)


class AuthConfig(BaseModel):
    model_config = {"extra": "forbid"}

    token_env_var: str = "HEATPANEL_TOKEN"


class EditorConfig(BaseModel):
    model_config = {"extra": "forbid"}

    min_band_width: float = Field(default=1.0, gt=0.0)
    default_low_temp: float = 18.0
    default_high_temp: float = 21.0

    @model_validator(mode="after")
    def _default_band_is_valid(self) -> "EditorConfig":
        if self.default_high_temp - self.default_low_temp < self.min_band_width:
            raise ValueError("default band is narrower than min_band_width")
        return self


class AddressConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = defaults.ADDRESS_BASE_URL
    api_key_env_var: str = "GETADDRESS_API_KEY"
    min_term_length: int = Field(default=3, ge=1)


class PanelConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    auth: AuthConfig = AuthConfig()
    editor: EditorConfig = EditorConfig()
    address: AddressConfig = AddressConfig()
