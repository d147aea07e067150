from .browser import BrowserRenderer, RenderOptions

__all__ = ["BrowserRenderer", "RenderOptions"]
