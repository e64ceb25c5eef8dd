"""
views package
~~~~~~~~~~~~~
Convenience re-exports so other modules can write:

    from views import ApplicationWindow
"""
from .application_window import ApplicationWindow  # noqa: F401
from .loading_overlay import LoadingOverlay  # noqa: F401
