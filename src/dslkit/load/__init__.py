"""dslkit load — screen documents from JSON.

Public API::

    from dslkit.load import load_screens
    screens = load_screens(Path("dsl_screens.json"))
"""

from ._documents import ScreenLoadError, load_screens

__all__ = ["ScreenLoadError", "load_screens"]
