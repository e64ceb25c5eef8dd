from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Iterable, Optional, Tuple

NO_SELECTION = -1

ImageSet = Tuple[str, ...]


# --- Data Classes ---


@dataclass(frozen=True)
class ViewerState:
    """The active image set and the cursor into it."""
    images: ImageSet = ()
    cursor: int = NO_SELECTION

    def __post_init__(self):
        if self.images and not 0 <= self.cursor < len(self.images) and self.cursor != NO_SELECTION:
            raise ValueError(f"cursor {self.cursor} out of range for {len(self.images)} images")
        if not self.images and self.cursor != NO_SELECTION:
            raise ValueError("an empty image set has no selection")

    @property
    def count(self) -> int:
        return len(self.images)

    @property
    def has_selection(self) -> bool:
        return 0 <= self.cursor < len(self.images)

    @property
    def current_path(self) -> Optional[str]:
        if self.has_selection:
            return self.images[self.cursor]
        return None


# --- Navigation ---


def state_from_scan(paths: Iterable[str]) -> ViewerState:
    """Builds the state for a completed scan: first image selected, or none."""
    images = tuple(paths)
    return ViewerState(images=images, cursor=0 if images else NO_SELECTION)


def move_next(state: ViewerState) -> ViewerState:
    """Advances the cursor, wrapping from the last image to the first."""
    if not state.images:
        return state
    if state.cursor >= len(state.images) - 1:
        return replace(state, cursor=0)
    return replace(state, cursor=state.cursor + 1)


def move_previous(state: ViewerState) -> ViewerState:
    """Steps the cursor back, wrapping from the first image (or no selection) to the last."""
    if not state.images:
        return state
    if state.cursor < 1:
        return replace(state, cursor=len(state.images) - 1)
    return replace(state, cursor=state.cursor - 1)
