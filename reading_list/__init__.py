"""Reading list service: article storage, HTTP API and client."""

__version__ = "0.1.0"
