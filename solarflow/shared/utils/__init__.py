"""Shared utilities: datetime helpers and ID generators."""

from solarflow.shared.utils.datetime import ensure_utc, parse_iso_utc, utc_now
from solarflow.shared.utils.generators import generate_cuid

__all__ = [
    "ensure_utc",
    "generate_cuid",
    "parse_iso_utc",
    "utc_now",
]
