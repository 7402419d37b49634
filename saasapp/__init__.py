"""SaaS Starter: a small desktop dashboard for a projects REST API."""

__version__ = "0.1.0"
