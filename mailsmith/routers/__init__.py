"""API Routers."""
from mailsmith.routers import drafts

__all__ = ["drafts"]
