"""Mini README: Interactive interface for Cash Wave.

Exports the FastAPI application factory that serves the single tracker
screen in a browser.
"""

from .web_app import ScreenState, create_application

__all__ = ["ScreenState", "create_application"]
