"""Viber client package."""

from .viber_client import API_ENDPOINTS, ViberClient, ViberUrlBuilder

__all__ = ["API_ENDPOINTS", "ViberClient", "ViberUrlBuilder"]
