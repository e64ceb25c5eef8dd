"""
controllers package
~~~~~~~~~~~~~~~~~~~
    from controllers import ViewerController
"""
from .viewer_controller import ViewerController  # noqa: F401
