"""Adapter for the external backend REST API."""

from .backend import BackendAPI
from .client import BackendAPIClient

__all__ = ["BackendAPI", "BackendAPIClient"]
