"""
Configuration
=============
Credentials and defaults for the http2sms API.

Values come from keyword arguments or ``OVH_SMS_*`` environment
variables. A Settings instance is frozen; overrides produce a new
snapshot via ``with_overrides``.
"""

import threading
from typing import List, Optional

from pydantic import Field, ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError
from .hooks import LifecycleHooks

ENV_PREFIX = "OVH_SMS_"
DEFAULT_API_ENDPOINT = "https://www.ovh.com/cgi-bin/sms/http2sms.cgi"

REQUIRED_CREDENTIALS = ("account", "login", "password")


class Settings(BaseSettings):
    account: Optional[str] = None
    login: Optional[str] = None
    password: Optional[str] = None

    default_sender: Optional[str] = None
    default_country_code: str = "33"
    default_content_type: str = "application/json"
    timeout: float = Field(15.0, gt=0)
    raise_on_length_error: bool = True
    api_endpoint: str = DEFAULT_API_ENDPOINT

    hooks: LifecycleHooks = Field(default_factory=LifecycleHooks, exclude=True, repr=False)

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        frozen=True,
        extra="ignore",
        arbitrary_types_allowed=True,
    )

    def missing_credentials(self) -> List[str]:
        return [name for name in REQUIRED_CREDENTIALS if not getattr(self, name)]

    def is_valid(self) -> bool:
        return not self.missing_credentials()

    def validate_credentials(self) -> None:
        """Raise ConfigurationError when account, login or password is blank."""
        missing = self.missing_credentials()
        if not missing:
            return
        env_vars = ", ".join(f"{ENV_PREFIX}{name.upper()}" for name in missing)
        raise ConfigurationError(
            f"Missing required configuration: {', '.join(missing)}. "
            f"Set via http2sms.configure() or environment variables ({env_vars})"
        )

    def with_overrides(self, **overrides) -> "Settings":
        """
        Return a copy with the given values replaced.

        None values are ignored, so callers can pass optional arguments
        straight through. The hook registry is shared with this instance.
        """
        unknown = sorted(key for key in overrides if key not in type(self).model_fields)
        if unknown:
            raise ConfigurationError(f"Unknown configuration option(s): {', '.join(unknown)}")

        update = {key: value for key, value in overrides.items() if value is not None}
        if not update:
            return self

        data = {name: getattr(self, name) for name in type(self).model_fields}
        data.update(update)
        # model_validate skips __init__, so the environment is not read again
        try:
            return type(self).model_validate(data)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e


def _load_settings() -> Settings:
    """Build settings from defaults and the environment."""
    try:
        return Settings()
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid configuration in {ENV_PREFIX}* environment variables: {e}") from e


# Process-wide snapshot
_settings: Optional[Settings] = None
_settings_lock = threading.RLock()


def get_settings() -> Settings:
    """Get or create the process-wide settings snapshot."""
    global _settings
    if _settings is None:
        with _settings_lock:
            if _settings is None:
                _settings = _load_settings()
    return _settings


def configure(**options) -> Settings:
    """Replace the process-wide settings with an updated snapshot."""
    global _settings
    with _settings_lock:
        _settings = get_settings().with_overrides(**options)
        return _settings


def reset_settings() -> Settings:
    """Reload settings from defaults and the environment, dropping hooks."""
    global _settings
    with _settings_lock:
        _settings = _load_settings()
        return _settings
