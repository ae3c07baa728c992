"""Durable storage adapters."""

from .storage import FraudRecordStore

__all__ = ["FraudRecordStore"]
