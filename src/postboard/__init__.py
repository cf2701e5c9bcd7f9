"""Postboard: analytics summary dashboard for a social-media post scheduler."""

__version__ = "0.1.0"
