"""Formatting utilities shared by data fetchers and routes."""

from . import formatting

__all__ = ["formatting"]
