"""Clients for the League of Legends game API and the Data Dragon service."""

__version__ = "0.1.0"

__all__ = ["__version__"]