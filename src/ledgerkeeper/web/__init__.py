"""HTTP API for ledgerkeeper."""

from ledgerkeeper.web.app import create_app

__all__ = ["create_app"]
