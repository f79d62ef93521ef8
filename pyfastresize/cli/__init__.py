"""
Command Line Interface for PyFastResize

This module provides command line utilities for PyFastResize, enabling
image resizing from the terminal without writing Python scripts.

Available Commands:
- image_resize: Resize an image file (console script ``pfr-resize``)
"""

_CLI_SUBMODULES = {
    "image_resize": (".resize_commands", "image_resize"),
}

__all__ = list(_CLI_SUBMODULES.keys())


def __getattr__(name):
    info = _CLI_SUBMODULES.get(name)
    if info is None:
        raise AttributeError(name)
    pkg, attr = info
    import importlib
    mod = importlib.import_module(pkg, __package__)
    obj = getattr(mod, attr)
    globals()[name] = obj
    return obj
