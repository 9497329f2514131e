"""
Core Utilities Package

Modules:
    - time: Timestamp conversion and ISO-8601 parsing utilities
"""

from melonbar.utils.time import to_utc_datetime, parse_iso8601, is_iso8601

__all__ = ["to_utc_datetime", "parse_iso8601", "is_iso8601"]
