"""Digit schemes — named bidirectional digit <-> glyph tables.

A scheme maps the ten ASCII digits onto ten Unicode glyphs. Encoding
replaces digits with glyphs; decoding replaces *this scheme's* glyphs with
digits. Everything else passes through untouched.

INVARIANT: the table is a total bijection over 0-9 and no glyph is itself
an ASCII digit, so ``decode(encode(text)) == text`` for any text whose
non-digit characters are not glyphs of the same scheme.
"""

from __future__ import annotations

from dataclasses import dataclass, field

ASCII_DIGITS = "0123456789"

# Decoding raw input bytes with this handler maps every undecodable byte to a
# lone surrogate, and encoding maps it back. Malformed input survives a
# translate() round trip byte-for-byte.
_BYTE_ERRORS = "surrogateescape"


@dataclass(frozen=True)
class Scheme:
    """A named, immutable digit transliteration table.

    Attributes:
        name: Unique lowercase identifier (e.g. ``"fullwidth"``).
        glyphs: Ten glyphs; ``glyphs[d]`` represents digit ``d``.
        description: One-line summary shown by ``zenkaku schemes``.
    """

    name: str
    glyphs: tuple[str, ...]
    description: str = ""
    _forward: dict[int, str] = field(init=False, repr=False, compare=False)
    _reverse: dict[int, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # Accept any sequence (lists come straight out of TOML).
        object.__setattr__(self, "glyphs", tuple(self.glyphs))
        _validate(self.name, self.glyphs)
        object.__setattr__(
            self, "_forward", {ord(d): g for d, g in zip(ASCII_DIGITS, self.glyphs)}
        )
        object.__setattr__(
            self, "_reverse", {ord(g): d for d, g in zip(ASCII_DIGITS, self.glyphs)}
        )

    def encode(self, text: str) -> str:
        """Replace every ASCII digit in *text* with this scheme's glyph."""
        return text.translate(self._forward)

    def decode(self, text: str) -> str:
        """Replace every glyph of this scheme in *text* with its ASCII digit.

        Glyphs of other schemes are left as they are.
        """
        return text.translate(self._reverse)

    def encode_bytes(self, data: bytes) -> bytes:
        """Byte-level :meth:`encode` over UTF-8 input.

        Bytes that are not valid UTF-8 are copied through unchanged.
        """
        return self.encode(data.decode("utf-8", _BYTE_ERRORS)).encode("utf-8", _BYTE_ERRORS)

    def decode_bytes(self, data: bytes) -> bytes:
        """Byte-level :meth:`decode` over UTF-8 input.

        A truncated or malformed trailing sequence is never a glyph, so it
        is copied through unchanged.
        """
        return self.decode(data.decode("utf-8", _BYTE_ERRORS)).encode("utf-8", _BYTE_ERRORS)


def _validate(name: str, glyphs: tuple[str, ...]) -> None:
    if not name or name != name.strip() or name != name.lower():
        msg = f"Scheme name must be a non-empty lowercase identifier, got {name!r}"
        raise ValueError(msg)
    if len(glyphs) != 10:
        msg = f"Scheme {name!r} needs exactly 10 glyphs, got {len(glyphs)}"
        raise ValueError(msg)
    for digit, glyph in enumerate(glyphs):
        if not isinstance(glyph, str) or len(glyph) != 1:
            msg = f"Scheme {name!r}: glyph for {digit} must be a single character, got {glyph!r}"
            raise ValueError(msg)
        if glyph in ASCII_DIGITS:
            msg = f"Scheme {name!r}: glyph for {digit} is an ASCII digit ({glyph!r})"
            raise ValueError(msg)
    if len(set(glyphs)) != len(glyphs):
        msg = f"Scheme {name!r}: glyphs must be distinct"
        raise ValueError(msg)


def _run(start: int) -> tuple[str, ...]:
    """Ten consecutive codepoints starting at *start*."""
    return tuple(chr(start + i) for i in range(10))


# ---------------------------------------------------------------------------
# Built-in schemes
# ---------------------------------------------------------------------------

FULLWIDTH = Scheme(
    name="fullwidth",
    glyphs=_run(0xFF10),
    description="Full-width forms (U+FF10-U+FF19)",
)

CIRCLE = Scheme(
    name="circle",
    # Circled zero lives apart from the 1-9 run.
    glyphs=("\u24ea", *_run(0x2460)[:9]),
    description="Circled digits (U+24EA, U+2460-U+2468)",
)

ROMAN = Scheme(
    name="roman",
    # Roman numerals have no zero; it borrows the full-width one, so
    # ``roman`` and ``fullwidth`` share U+FF10.
    glyphs=("\uff10", *_run(0x2160)[:9]),
    description="Roman numeral glyphs (U+2160-U+2168, full-width zero)",
)

CHINESE = Scheme(
    name="chinese",
    glyphs=tuple("〇一二三四五六七八九"),
    description="CJK numerals",
)

THAI = Scheme(
    name="thai",
    glyphs=_run(0x0E50),
    description="Thai digits (U+0E50-U+0E59)",
)

BUILTIN_SCHEMES: tuple[Scheme, ...] = (FULLWIDTH, CIRCLE, ROMAN, CHINESE, THAI)
