"""Utility functions for ledgerkeeper."""

from ledgerkeeper.utils.date_parser import parse_date
from ledgerkeeper.utils.amount_parser import parse_amount

__all__ = ["parse_date", "parse_amount"]
