"""Static quotes lookup service."""
