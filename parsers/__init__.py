"""
Provider payload parsers.

One adapter per upstream provider; both produce CanonicalContainerRecord.
"""

from parsers.live_api_parser import parse_live_api_record
from parsers.internal_db_parser import parse_internal_db_record

__all__ = [
    "parse_live_api_record",
    "parse_internal_db_record",
]
