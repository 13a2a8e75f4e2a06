# dispatchcore/core/executor/__init__.py
from .process import ProcessInvoker
from .dispatcher import Dispatcher, render_error

__all__ = ["ProcessInvoker", "Dispatcher", "render_error"]
