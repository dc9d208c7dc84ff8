"""Configuration management for trunic.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- RenderConfig: Stroke color, size, kerning and scale of runes
- OutputConfig: Padding and background of the composed image
- SpriteSheetConfig: Layout of the legacy bitmap glyph source
- TranscriberConfig: Text-to-IPA transcription backend
- LoggingConfig: Logging settings
- TrunicSettings: Main application settings
"""

from trunic.config.settings import (
    LoggingConfig,
    OutputConfig,
    RenderConfig,
    SpriteSheetConfig,
    TranscriberConfig,
    TrunicSettings,
    get_default_settings,
)

__all__ = [
    "LoggingConfig",
    "OutputConfig",
    "RenderConfig",
    "SpriteSheetConfig",
    "TranscriberConfig",
    "TrunicSettings",
    "get_default_settings",
]
