from typing import Any

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from .dto import AnalysisCriteria, GenerationDefaults


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PASSWORD_ZEN_",
        env_nested_delimiter="__",
        extra="forbid",
    )

    color: bool = True
    animation: bool = True
    generate: GenerationDefaults = Field(default_factory=GenerationDefaults)
    analyze: AnalysisCriteria = Field(default_factory=AnalysisCriteria)

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

    def as_default_map(self) -> dict[str, dict[str, Any]]:
        """Maps settings onto the parameters of each CLI subcommand."""
        generate = self.generate.model_dump(exclude={"charset"})
        generate["custom_charset"] = self.generate.charset or None

        return {
            "generate": generate,
            "analyze": {
                **self.analyze.model_dump(),
                "color": self.color,
                "animation": self.animation,
            },
        }
