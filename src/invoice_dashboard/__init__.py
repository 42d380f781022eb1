"""Invoice dashboard: data access, server actions and sessions over an external backend API."""

__version__ = "0.1.0"
