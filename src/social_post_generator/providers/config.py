"""Generator configuration loading and validation."""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from ..constants import (
    GenerationKind,
    IMAGE_API_KEY_ENV,
    IMAGE_DEFAULT_BASE_URL,
    IMAGE_DEFAULT_MODEL,
    IMAGE_SIZE,
    TEXT_DEFAULT_BASE_URL,
    TEXT_DEFAULT_MODEL,
    TEXT_MAX_TOKENS,
    TEXT_SYSTEM_PROMPT,
    TEXT_TEMPERATURE,
    TIMEOUT_HTTP_CONNECT,
    TIMEOUT_IMAGE_SECONDS,
    TIMEOUT_TEXT_SECONDS,
)

# Load .env file
load_dotenv()


class ProviderSettings(BaseModel):
    """Global transport settings."""

    connect_timeout_seconds: float = TIMEOUT_HTTP_CONNECT


class TextBackendConfig(BaseModel):
    """Configuration for the text rewrite backend."""

    model: str = TEXT_DEFAULT_MODEL
    base_url: str = TEXT_DEFAULT_BASE_URL
    base_url_env: str | None = "TEXT_BASE_URL"
    api_key: str | None = None
    api_key_env: str | None = "TEXT_API_KEY"
    timeout: float = TIMEOUT_TEXT_SECONDS
    system_prompt: str = TEXT_SYSTEM_PROMPT
    temperature: float = TEXT_TEMPERATURE
    max_tokens: int = TEXT_MAX_TOKENS

    def get_api_key(self) -> str | None:
        """Get API key from config or environment."""
        if self.api_key:
            return self.api_key
        if self.api_key_env:
            return os.getenv(self.api_key_env) or None
        return None

    def get_base_url(self) -> str:
        """Get base URL from environment or config."""
        if self.base_url_env and os.getenv(self.base_url_env):
            return os.getenv(self.base_url_env)
        return self.base_url


class ImageBackendConfig(BaseModel):
    """Configuration for the image synthesis backend."""

    model: str = IMAGE_DEFAULT_MODEL
    base_url: str = IMAGE_DEFAULT_BASE_URL
    base_url_env: str | None = "IMAGE_BASE_URL"
    api_key: str | None = None
    api_key_env: str | None = IMAGE_API_KEY_ENV
    timeout: float = TIMEOUT_IMAGE_SECONDS
    size: str = IMAGE_SIZE
    caption_from_prompt: bool = True

    def get_api_key(self) -> str | None:
        """Get API key from config or environment."""
        if self.api_key:
            return self.api_key
        if self.api_key_env:
            return os.getenv(self.api_key_env) or None
        return None

    def get_base_url(self) -> str:
        """Get base URL from environment or config."""
        if self.base_url_env and os.getenv(self.base_url_env):
            return os.getenv(self.base_url_env)
        return self.base_url


class SharingConfig(BaseModel):
    """Share link settings."""

    page_url: str | None = None


class BackendConfig(BaseModel):
    """Resolved, per-request backend settings.

    Built fresh for every GenerationRequest so credentials are read once per
    submit and never mutated afterwards.
    """

    model_config = {"frozen": True}

    model: str
    base_url: str
    api_key: str | None = None
    timeout: float
    connect_timeout: float = TIMEOUT_HTTP_CONNECT
    system_prompt: str | None = None
    temperature: float | None = None
    max_tokens: int | None = None
    size: str | None = None
    caption_from_prompt: bool = True


class GeneratorConfig(BaseModel):
    """Full generator configuration."""

    provider_settings: ProviderSettings = Field(default_factory=ProviderSettings)
    default_kind: GenerationKind = GenerationKind.TEXT_REWRITE
    text: TextBackendConfig = Field(default_factory=TextBackendConfig)
    image: ImageBackendConfig = Field(default_factory=ImageBackendConfig)
    sharing: SharingConfig = Field(default_factory=SharingConfig)

    def to_backend_config(self, kind: GenerationKind) -> BackendConfig:
        """Resolve the settings a single request of ``kind`` needs."""
        connect_timeout = self.provider_settings.connect_timeout_seconds
        if kind == GenerationKind.IMAGE_SYNTHESIS:
            return BackendConfig(
                model=self.image.model,
                base_url=self.image.get_base_url(),
                api_key=self.image.get_api_key(),
                timeout=self.image.timeout,
                connect_timeout=connect_timeout,
                size=self.image.size,
                caption_from_prompt=self.image.caption_from_prompt,
            )
        return BackendConfig(
            model=self.text.model,
            base_url=self.text.get_base_url(),
            api_key=self.text.get_api_key(),
            timeout=self.text.timeout,
            connect_timeout=connect_timeout,
            system_prompt=self.text.system_prompt,
            temperature=self.text.temperature,
            max_tokens=self.text.max_tokens,
        )


def load_generator_config(config_path: Path | None = None) -> GeneratorConfig:
    """Load generator configuration from YAML file."""
    if config_path is None:
        # Default to config/generator.yaml relative to project root
        config_path = Path(__file__).parent.parent.parent.parent / "config" / "generator.yaml"

    if not config_path.exists():
        # Return default config if file doesn't exist
        return GeneratorConfig()

    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    return GeneratorConfig(**(data or {}))
