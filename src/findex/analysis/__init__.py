"""
Content analysis for indexed files.

- Content type sniffing from a leading byte sample
"""

from .content_sniffing import OCTET_STREAM, SNIFF_LEN, TEXT_PLAIN, sniff

__all__ = [
    "sniff",
    "SNIFF_LEN",
    "OCTET_STREAM",
    "TEXT_PLAIN",
]
