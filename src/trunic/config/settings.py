"""Configuration settings for Trunic."""

import logging
from pathlib import Path

from PIL import ImageColor
from pydantic import BaseModel, Field, field_validator


def _check_color(value: str) -> str:
    try:
        ImageColor.getrgb(value)
    except ValueError as e:
        raise ValueError(f"unrecognized color {value!r}") from e
    return value


def _check_level(value: str) -> str:
    if not isinstance(logging.getLevelName(value.upper()), int):
        raise ValueError(f"unknown log level {value!r}")
    return value.upper()


class RenderConfig(BaseModel):
    """Presentation settings for a rendered line of runes.

    Lengths are in output pixels at ``scale == 1``.
    """

    color: str = Field(
        default="black",
        description="Stroke color (any Pillow color string)",
    )
    text_height: float = Field(
        default=72.0,
        gt=0.0,
        description="Height of one rune cell",
    )
    thickness: float = Field(
        default=5.0,
        gt=0.0,
        description="Stroke thickness",
    )
    kerning: float = Field(
        default=0.0,
        description="Extra space between cells (negative tightens)",
    )
    scale: float = Field(
        default=1.0,
        gt=0.0,
        le=16.0,
        description="Output resolution multiplier",
    )
    supersample: int = Field(
        default=4,
        ge=1,
        le=8,
        description="Anti-aliasing factor used while stroking",
    )
    flatten_tolerance: float = Field(
        default=0.25,
        ge=0.01,
        le=2.0,
        description="Maximum curve flattening error in output pixels",
    )

    @field_validator("color")
    @classmethod
    def validate_color(cls, value: str) -> str:
        return _check_color(value)


class OutputConfig(BaseModel):
    """Settings for the composed output image."""

    padding: float | None = Field(
        default=None,
        ge=0.0,
        description="Margin around each line (None = 4x stroke thickness)",
    )
    background: str = Field(
        default="white",
        description="Background color of line surfaces",
    )

    @field_validator("background")
    @classmethod
    def validate_background(cls, value: str) -> str:
        return _check_color(value)


class SpriteSheetConfig(BaseModel):
    """Layout of a legacy bitmap sprite sheet.

    The sheet is a grid of fixed-size cells separated by fixed gaps. Each
    cell holds one glyph surrounded by ``padding`` pixels of blank space.
    """

    path: Path | None = Field(
        default=None,
        description="Sprite sheet image (None = use vector glyphs)",
    )
    columns: int = Field(
        default=6,
        ge=1,
        le=64,
        description="Cells per sheet row",
    )
    cell_width: int = Field(
        default=64,
        ge=4,
        description="Width of one sprite cell in pixels",
    )
    cell_height: int = Field(
        default=92,
        ge=4,
        description="Height of one sprite cell in pixels",
    )
    gap: int = Field(
        default=4,
        ge=0,
        description="Pixels between neighbouring cells",
    )
    margin: int = Field(
        default=0,
        ge=0,
        description="Pixels between the sheet edge and the first cell",
    )
    padding: int = Field(
        default=10,
        ge=0,
        description="Blank pixels around the glyph inside each cell",
    )


class TranscriberConfig(BaseModel):
    """Settings for turning ordinary text into IPA."""

    name: str = Field(
        default="",
        description="Transcriber backend ('' or 'none' = input is already IPA)",
    )
    model: str = Field(
        default="gemini-2.5-flash-lite",
        description="Model used by LLM-backed transcribers",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )

    @field_validator("log_level", "file_log_level")
    @classmethod
    def validate_level(cls, value: str) -> str:
        return _check_level(value)


class TrunicSettings(BaseModel):
    """Main application settings."""

    render: RenderConfig = Field(default_factory=RenderConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    sprites: SpriteSheetConfig = Field(default_factory=SpriteSheetConfig)
    transcriber: TranscriberConfig = Field(default_factory=TranscriberConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> TrunicSettings:
    """Get default application settings."""
    return TrunicSettings()
