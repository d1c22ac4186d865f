"""API routers."""

from ledgerkeeper.web.routes import finance, health

__all__ = ["finance", "health"]
