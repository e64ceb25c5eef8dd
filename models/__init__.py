"""
models package
~~~~~~~~~~~~~~
Exposes ViewerState and the navigation helpers for easy import:
    from models import ViewerState, move_next
"""
from .viewer_model import (  # noqa: F401
    NO_SELECTION,
    ImageSet,
    ViewerState,
    move_next,
    move_previous,
    state_from_scan,
)
