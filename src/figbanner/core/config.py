"""Configuration models used by the banner renderer.

ImageMetrics

`char_width` (`int`)
: Horizontal advance of one monospace cell in the SVG preview, in pixels.

`line_height` (`int`)
: Vertical advance between two banner rows, in pixels.

`padding` (`int`)
: Extra space added once to both canvas dimensions.

`font_size` (`int`)
: CSS font size of the preview text.

`light_color` / `dark_color` (`str`)
: Glyph colours of the light and dark theme variants.

RenderSettings

`chunk_size` (`int`)
: Number of fonts rendered concurrently before results are published.

`debounce` (`float`)
: Seconds a text change must stay stable before a render starts.

`yield_delay` (`float`)
: Pause inserted between two chunks so the event loop stays responsive.

`placeholder` (`str`)
: Text rendered when the input is empty or whitespace only.

`font_timeout` (`float | None`)
: Optional upper bound for a single font render. A timeout counts as a
  failure of that font.

`width` (`int`)
: Maximum banner width handed to the FIGlet layout engine.

`fonts_dir` (`Path | None`)
: Directory of `.flf`/`.tlf` descriptors. When omitted the fonts bundled
  with pyfiglet are used.

`images` (`ImageMetrics`)
: Nested preview metrics.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
import yaml

from figbanner.core.exceptions import ConfigError


__all__ = ["ImageMetrics", "RenderSettings", "load_settings"]


class ImageMetrics(BaseModel):
    """Fixed per-character metrics used to size preview canvases."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    char_width: int = Field(default=10, gt=0)
    line_height: int = Field(default=18, gt=0)
    padding: int = Field(default=20, ge=0)
    font_size: int = Field(default=14, gt=0)
    light_color: str = "#000000"
    dark_color: str = "#FFFFFF"


class RenderSettings(BaseModel):
    """Tuning knobs for the incremental rendering session."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    chunk_size: int = Field(default=20, ge=1)
    debounce: float = Field(default=0.5, ge=0)
    yield_delay: float = Field(default=0.01, ge=0)
    placeholder: str = "Sample"
    font_timeout: float | None = Field(default=None, gt=0)
    width: int = Field(default=1000, gt=0)
    fonts_dir: Path | None = None
    images: ImageMetrics = Field(default_factory=ImageMetrics)

    @field_validator("placeholder")
    @classmethod
    def _check_placeholder(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("placeholder must contain visible characters")
        return value.strip()


def load_settings(path: Path | None = None, **overrides: Any) -> RenderSettings:
    """Load settings from a YAML file, applying keyword overrides on top.

    The file may hold the settings at the top level or nested under a
    ``figbanner`` key. Relative ``fonts_dir`` values resolve against the file.
    """
    data: dict[str, Any] = {}
    if path is not None:
        try:
            loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"Unable to read settings from '{path}': {exc}") from exc
        if isinstance(loaded, dict) and isinstance(loaded.get("figbanner"), dict):
            loaded = loaded["figbanner"]
        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ConfigError(f"Settings file '{path}' must contain a mapping.")
        data.update(loaded)
        fonts_dir = data.get("fonts_dir")
        if isinstance(fonts_dir, str) and not Path(fonts_dir).expanduser().is_absolute():
            data["fonts_dir"] = (path.parent / fonts_dir).resolve()

    data.update({key: value for key, value in overrides.items() if value is not None})
    try:
        return RenderSettings.model_validate(data)
    except ValidationError as exc:
        origin = f" in '{path}'" if path is not None else ""
        raise ConfigError(f"Invalid settings{origin}: {exc}") from exc
