"""Tool configuration (environment / .env)."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from ts_type_graph.core.errors import ConfigurationError


class TypeGraphSettings(BaseSettings):
    """Settings for the type graph CLI. CLI flags take precedence."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    MAX_DECOMPOSITION_DEPTH: int = Field(
        default=64,
        description="Nesting depth at which type decomposition stops and emits the current type as a leaf.",
        ge=1,
        le=10000,
    )

    LOG_LEVEL: str = Field(default="INFO", description="Diagnostic log level.")

    LOG_FORMAT: Literal["json", "console"] = Field(
        default="json",
        description="Diagnostic rendering on stderr.",
    )

    DOT_RANKDIR: Literal["LR", "TB", "RL", "BT"] = Field(
        default="LR",
        description="Graphviz layout direction written into the DOT header.",
    )

    SKIP_TSCONFIG_FILES: bool = Field(
        default=False,
        description="Only analyze files matched by the CLI patterns, ignoring tsconfig files/include.",
    )


@lru_cache()
def get_type_graph_settings() -> TypeGraphSettings:
    """Return cached settings instance."""

    try:
        return TypeGraphSettings()
    except ValidationError as e:
        problems = "; ".join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors())
        raise ConfigurationError(f"Invalid settings: {problems}") from e
