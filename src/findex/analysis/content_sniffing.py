"""
Content type sniffing for findex.

This module infers a MIME type from the leading bytes of a file. It never looks
at the file name or extension: a ``.json`` file holding plain ASCII is reported
as ``text/plain; charset=utf-8``, exactly like any other text.

The signature table follows the WHATWG MIME sniffing standard in the same
order and with the same results as the widely used ``DetectContentType``
algorithm, so indexes produced by findex agree with other tools built on it.

Functions:
    sniff: Detect the content type of a byte sample

Example:
    >>> from findex.analysis.content_sniffing import sniff
    >>> sniff(b"%PDF-1.7 ...")
    'application/pdf'
    >>> sniff(b"hello world")
    'text/plain; charset=utf-8'
    >>> sniff(b"\\x00\\x01\\x02")
    'application/octet-stream'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

# Only this many leading bytes take part in detection.
SNIFF_LEN = 512

OCTET_STREAM = "application/octet-stream"
TEXT_PLAIN = "text/plain; charset=utf-8"
TEXT_HTML = "text/html; charset=utf-8"

_WHITESPACE = frozenset(b"\t\n\x0c\r ")
_TAG_TERMINATORS = frozenset(b" >")


class Signature(Protocol):
    def match(self, data: bytes, first_non_ws: int) -> str | None: ...


@dataclass(frozen=True, slots=True)
class ExactSig:
    """Matches when the sample starts with ``prefix``."""

    prefix: bytes
    content_type: str

    def match(self, data: bytes, first_non_ws: int) -> str | None:
        if data.startswith(self.prefix):
            return self.content_type
        return None


@dataclass(frozen=True, slots=True)
class MaskedSig:
    """Matches ``pattern`` against the sample after AND-ing each byte with ``mask``."""

    mask: bytes
    pattern: bytes
    content_type: str
    skip_ws: bool = False

    def match(self, data: bytes, first_non_ws: int) -> str | None:
        if self.skip_ws:
            data = data[first_non_ws:]
        if len(self.pattern) != len(self.mask) or len(data) < len(self.pattern):
            return None
        for i, expected in enumerate(self.pattern):
            if data[i] & self.mask[i] != expected:
                return None
        return self.content_type


@dataclass(frozen=True, slots=True)
class HtmlSig:
    """Case-insensitive tag prefix, which must be followed by a space or ``>``."""

    tag: bytes

    def match(self, data: bytes, first_non_ws: int) -> str | None:
        data = data[first_non_ws:]
        if len(data) < len(self.tag) + 1:
            return None
        for i, expected in enumerate(self.tag):
            actual = data[i]
            if 0x41 <= expected <= 0x5A:
                actual &= 0xDF
            if actual != expected:
                return None
        if data[len(self.tag)] not in _TAG_TERMINATORS:
            return None
        return TEXT_HTML


@dataclass(frozen=True, slots=True)
class Mp4Sig:
    """ISO base media ``ftyp`` box listing an ``mp4`` brand."""

    def match(self, data: bytes, first_non_ws: int) -> str | None:
        if len(data) < 12:
            return None
        box_size = int.from_bytes(data[:4], "big")
        if len(data) < box_size or box_size % 4 != 0:
            return None
        if data[4:8] != b"ftyp":
            return None
        for start in range(8, box_size, 4):
            if start == 12:
                # bytes 12-15 hold the major brand version
                continue
            if data[start : start + 3] == b"mp4":
                return "video/mp4"
        return None


@dataclass(frozen=True, slots=True)
class TextSig:
    """Anything without binary control bytes is plain text. Must be tried last."""

    def match(self, data: bytes, first_non_ws: int) -> str | None:
        for b in data[first_non_ws:]:
            if b <= 0x08 or b == 0x0B or 0x0E <= b <= 0x1A or 0x1C <= b <= 0x1F:
                return None
        return TEXT_PLAIN


SIGNATURES: tuple[Signature, ...] = (
    HtmlSig(b"<!DOCTYPE HTML"),
    HtmlSig(b"<HTML"),
    HtmlSig(b"<HEAD"),
    HtmlSig(b"<SCRIPT"),
    HtmlSig(b"<IFRAME"),
    HtmlSig(b"<H1"),
    HtmlSig(b"<DIV"),
    HtmlSig(b"<FONT"),
    HtmlSig(b"<TABLE"),
    HtmlSig(b"<A"),
    HtmlSig(b"<STYLE"),
    HtmlSig(b"<TITLE"),
    HtmlSig(b"<B"),
    HtmlSig(b"<BODY"),
    HtmlSig(b"<BR"),
    HtmlSig(b"<P"),
    HtmlSig(b"<!--"),
    MaskedSig(b"\xff\xff\xff\xff\xff", b"<?xml", "text/xml; charset=utf-8", skip_ws=True),
    ExactSig(b"%PDF-", "application/pdf"),
    ExactSig(b"%!PS-Adobe-", "application/postscript"),
    # Byte order marks
    MaskedSig(b"\xff\xff\x00\x00", b"\xfe\xff\x00\x00", "text/plain; charset=utf-16be"),
    MaskedSig(b"\xff\xff\x00\x00", b"\xff\xfe\x00\x00", "text/plain; charset=utf-16le"),
    MaskedSig(b"\xff\xff\xff\x00", b"\xef\xbb\xbf\x00", TEXT_PLAIN),
    # Images
    ExactSig(b"\x00\x00\x01\x00", "image/x-icon"),
    ExactSig(b"\x00\x00\x02\x00", "image/x-icon"),
    ExactSig(b"BM", "image/bmp"),
    ExactSig(b"GIF87a", "image/gif"),
    ExactSig(b"GIF89a", "image/gif"),
    MaskedSig(
        b"\xff\xff\xff\xff\x00\x00\x00\x00\xff\xff\xff\xff\xff\xff",
        b"RIFF\x00\x00\x00\x00WEBPVP",
        "image/webp",
    ),
    ExactSig(b"\x89PNG\r\n\x1a\n", "image/png"),
    ExactSig(b"\xff\xd8\xff", "image/jpeg"),
    # Audio and video, in the order the standard prescribes
    MaskedSig(b"\xff\xff\xff\xff", b".snd", "audio/basic"),
    MaskedSig(b"\xff\xff\xff\xff\x00\x00\x00\x00\xff\xff\xff\xff", b"FORM\x00\x00\x00\x00AIFF", "audio/aiff"),
    MaskedSig(b"\xff\xff\xff", b"ID3", "audio/mpeg"),
    MaskedSig(b"\xff\xff\xff\xff\xff", b"OggS\x00", "application/ogg"),
    MaskedSig(b"\xff" * 8, b"MThd\x00\x00\x00\x06", "audio/midi"),
    MaskedSig(b"\xff\xff\xff\xff\x00\x00\x00\x00\xff\xff\xff\xff", b"RIFF\x00\x00\x00\x00AVI ", "video/avi"),
    MaskedSig(b"\xff\xff\xff\xff\x00\x00\x00\x00\xff\xff\xff\xff", b"RIFF\x00\x00\x00\x00WAVE", "audio/wave"),
    Mp4Sig(),
    ExactSig(b"\x1a\x45\xdf\xa3", "video/webm"),
    # Fonts
    MaskedSig(b"\x00" * 34 + b"\xff\xff", b"\x00" * 34 + b"LP", "application/vnd.ms-fontobject"),
    ExactSig(b"\x00\x01\x00\x00", "font/ttf"),
    ExactSig(b"OTTO", "font/otf"),
    ExactSig(b"ttcf", "font/collection"),
    ExactSig(b"wOFF", "font/woff"),
    ExactSig(b"wOF2", "font/woff2"),
    # Archives
    ExactSig(b"\x1f\x8b\x08", "application/x-gzip"),
    ExactSig(b"PK\x03\x04", "application/zip"),
    ExactSig(b"Rar!\x1a\x07\x00", "application/x-rar-compressed"),
    ExactSig(b"Rar!\x1a\x07\x01\x00", "application/x-rar-compressed"),
    ExactSig(b"\x00asm", "application/wasm"),
    TextSig(),
)


def sniff(sample: bytes) -> str:
    """
    Detect the content type of a byte sample.

    Args:
        sample: Leading bytes of a file. Anything past ``SNIFF_LEN`` is ignored.

    Returns:
        A MIME type string; ``application/octet-stream`` when no signature
        matches. An empty sample is plain text.
    """
    data = bytes(sample[:SNIFF_LEN])

    first_non_ws = 0
    while first_non_ws < len(data) and data[first_non_ws] in _WHITESPACE:
        first_non_ws += 1

    for sig in SIGNATURES:
        content_type = sig.match(data, first_non_ws)
        if content_type:
            return content_type
    return OCTET_STREAM
