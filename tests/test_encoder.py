from __future__ import annotations

import base64

import pytest

from figbanner.core.config import ImageMetrics
from figbanner.core.exceptions import EncodeError
from figbanner.fonts.renderer import RawRendering
from figbanner.preview.encoder import SVG_KIND, ImageEncoder, encode


RAW = RawRendering(font="block", lines=("abc", "abcdef"))


def test_dimensions_follow_metrics() -> None:
    assert ImageEncoder().dimensions(RAW) == (6 * 10 + 20, 2 * 18 + 20)
    metrics = ImageMetrics(char_width=8, line_height=16, padding=0)
    assert ImageEncoder(metrics).dimensions(RAW) == (48, 32)


def test_light_and_dark_differ_only_in_fill() -> None:
    images = encode(RAW)
    light = images.light.decode()
    dark = images.dark.decode()
    assert "fill: #000000" in light
    assert "fill: #FFFFFF" in dark
    assert light.replace("#000000", "#FFFFFF") == dark
    assert images.light.kind == images.dark.kind == SVG_KIND


def test_svg_declares_canvas_size() -> None:
    svg = encode(RAW).light.decode()
    assert 'width="80"' in svg
    assert 'height="56"' in svg
    assert svg.count("<tspan") == 2


def test_markup_characters_are_escaped() -> None:
    raw = RawRendering(font="x", lines=("<a & 'b'>", '"q"'))
    svg = encode(raw).light.decode()
    assert "&lt;a &amp; &apos;b&apos;&gt;" in svg
    assert "&quot;q&quot;" in svg
    assert "<a &" not in svg


def test_data_uri_embeds_payload() -> None:
    payload = encode(RAW).light
    prefix = f"data:{SVG_KIND};base64,"
    assert payload.data_uri.startswith(prefix)
    assert base64.b64decode(payload.data_uri[len(prefix) :]) == payload.data


def test_empty_rendering_raises_encode_error() -> None:
    with pytest.raises(EncodeError) as excinfo:
        encode(RawRendering(font="blank", lines=()))
    assert excinfo.value.font == "blank"


def test_encoding_is_deterministic() -> None:
    assert encode(RAW) == encode(RAW)
