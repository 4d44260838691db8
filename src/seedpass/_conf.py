from typing import Annotated

import annotated_types
import pydantic
from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from .policy import DEFAULT_POLICY, Policy


class LengthRange(BaseModel):
    model_config = ConfigDict(extra="forbid")

    min: Annotated[int, annotated_types.Ge(1)] = 8
    max: Annotated[int, annotated_types.Ge(1)] = 15

    @pydantic.model_validator(mode="after")
    def ordered(self) -> "LengthRange":
        if self.min > self.max:
            raise ValueError("min must not be greater than max")
        return self


class Settings(BaseSettings):
    """
    Example::

        # seedpass.yaml
        length:
          min: 12
          max: 16
        policy:
          excluded: ["*admin*"]
          rules:
            - charset: a-z
              minChars: 2
              frequency: 10
            - charset: 0-9
              minChars: 2
              frequency: 4

    Every field may also be set through the environment, e.g.
    ``SEEDPASS_LENGTH__MIN=12`` or ``SEEDPASS_POLICY='{"rules": [...]}'``.
    """

    model_config = SettingsConfigDict(
        env_prefix="SEEDPASS_",
        env_nested_delimiter="__",
        extra="forbid",
        validate_default=False,
    )

    policy: Policy = DEFAULT_POLICY
    length: LengthRange = Field(default_factory=LengthRange)

    @classmethod
    def settings_customise_sources(
        cls,
        _: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return env_settings, file_secret_settings, init_settings
