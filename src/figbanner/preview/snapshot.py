"""Value types and pure helpers behind the incremental preview pipeline."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from figbanner.fonts.renderer import RawRendering
from figbanner.preview.encoder import ImagePayload


DEFAULT_PLACEHOLDER = "Sample"
_INLINE_WHITESPACE = str.maketrans({"\t": " ", "\v": " ", "\f": " ", "\r": None})


class GenerationState(str, Enum):
    """Lifecycle of one render request."""

    IDLE = "idle"
    DEBOUNCING = "debouncing"
    RENDERING = "rendering"
    SETTLED = "settled"
    CANCELLED = "cancelled"

    @property
    def loading(self) -> bool:
        return self in (GenerationState.DEBOUNCING, GenerationState.RENDERING)


@dataclass(frozen=True, slots=True)
class RenderStatus:
    """Loading signal delivered to status subscribers."""

    generation: int
    state: GenerationState

    @property
    def loading(self) -> bool:
        return self.state.loading


@dataclass(frozen=True, slots=True)
class RenderRequest:
    """Normalised text plus the order in which fonts are rendered."""

    generation: int
    text: str
    font_order: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class PreviewEntry:
    """Fully rendered and encoded preview of one font."""

    font: str
    raw: RawRendering
    light_image: ImagePayload
    dark_image: ImagePayload


def _freeze(mapping: Mapping) -> Mapping:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True, slots=True)
class PreviewSnapshot:
    """Immutable view of the previews published for one generation."""

    generation: int = 0
    entries: Mapping[str, PreviewEntry] = field(default_factory=lambda: _freeze({}))
    failures: Mapping[str, str] = field(default_factory=lambda: _freeze({}))
    settled: bool = False

    @classmethod
    def empty(cls, generation: int = 0) -> PreviewSnapshot:
        return cls(generation=generation)

    def __contains__(self, font: object) -> bool:
        return font in self.entries

    def __getitem__(self, font: str) -> PreviewEntry:
        return self.entries[font]

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def get(self, font: str) -> PreviewEntry | None:
        return self.entries.get(font)

    @property
    def fonts(self) -> tuple[str, ...]:
        return tuple(self.entries)


def normalize_text(text: str | None, placeholder: str = DEFAULT_PLACEHOLDER) -> str:
    """Strip ``text`` and substitute ``placeholder`` when nothing is left.

    Tabs and other inline whitespace become plain spaces, as in figlet;
    carriage returns are dropped so CRLF input keeps its line breaks.
    """
    stripped = (text or "").translate(_INLINE_WHITESPACE).strip()
    return stripped or placeholder


def order_fonts(catalog: Sequence[str], pins: Iterable[str]) -> tuple[str, ...]:
    """Return pinned catalog fonts first, then the rest, both in catalog order."""
    pinned = set(pins)
    unique = tuple(dict.fromkeys(catalog))
    first = [font for font in unique if font in pinned]
    rest = [font for font in unique if font not in pinned]
    return (*first, *rest)


def iter_chunks(fonts: Sequence[str], size: int) -> Iterator[tuple[str, ...]]:
    """Yield consecutive slices of at most ``size`` fonts."""
    if size < 1:
        raise ValueError("chunk size must be positive")
    for start in range(0, len(fonts), size):
        yield tuple(fonts[start : start + size])


def merge_snapshot(
    snapshot: PreviewSnapshot,
    entries: Iterable[PreviewEntry] = (),
    failures: Mapping[str, str] | None = None,
    *,
    settled: bool | None = None,
) -> PreviewSnapshot:
    """Return a new snapshot with ``entries`` added or replaced.

    Entries already present are never dropped; a font that renders again
    replaces its previous entry in place.
    """
    merged = dict(snapshot.entries)
    for entry in entries:
        merged[entry.font] = entry
    merged_failures = dict(snapshot.failures)
    merged_failures.update(failures or {})
    return PreviewSnapshot(
        generation=snapshot.generation,
        entries=_freeze(merged),
        failures=_freeze(merged_failures),
        settled=snapshot.settled if settled is None else settled,
    )


__all__ = [
    "DEFAULT_PLACEHOLDER",
    "GenerationState",
    "PreviewEntry",
    "PreviewSnapshot",
    "RenderRequest",
    "RenderStatus",
    "iter_chunks",
    "merge_snapshot",
    "normalize_text",
    "order_fonts",
]
