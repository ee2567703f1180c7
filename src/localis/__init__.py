"""Localis - persisted display language selection for applications."""

__version__ = "0.1.0"
