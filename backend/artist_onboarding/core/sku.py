"""SKU Composer: deterministic product identifiers from ordered, optional segments.

Invariants:
    - compose_sku is pure and deterministic (no counters, no randomness)
    - Segment order is fixed: prefix, artist initials, product, size, media, frame
    - A segment is emitted only when its flag is on AND its source value is non-empty;
      absent data never leaves an empty slot
    - Never raises: unmapped values fall back to a derived code
    - With prefix <= 10, initials <= MAX_INITIALS and size <= 50 chars, a
      composed SKU fits the 100-char sku column

Design Decisions:
    - Plain dict lookups plus a fallback function per segment, no dispatch classes
    - No collision detection against stored SKUs (ADR: SKU is a readable label,
      the variant UUID is the identity)
"""

import re
from dataclasses import dataclass
from typing import Callable

_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")

MAX_INITIALS = 10


# ─── Lookup tables ───────────────────────────────────────────────

PRODUCT_TYPE_CODES: dict[str, str] = {
    "unframed_print": "PRNT",
    "framed_print": "FRMD",
    "canvas_wrap": "CANV",
    "metal_print": "METL",
    "acrylic_print": "ACRL",
    "greeting_card": "CARD",
    "postcard": "POST",
    "poster": "PSTR",
    "sticker": "STKR",
    "custom": "CSTM",
}

SIZE_CODES: dict[str, str] = {
    "5x7": "5X7",
    "8x10": "8X10",
    "11x14": "11X14",
    "12x16": "12X16",
    "16x20": "16X20",
    "18x24": "18X24",
    "24x30": "24X30",
    "24x36": "24X36",
}

MEDIA_CODES: dict[str, str] = {
    "Fine Art Rag": "RAG",
    "Photo Satin": "SAT",
    "Canvas": "CNV",
    "Metallic Paper": "MET",
    "Photo Glossy": "GLS",
    "Photo Matte": "MAT",
}

FRAME_COLOR_CODES: dict[str, str] = {
    "Black": "BLK",
    "White": "WHT",
    "Natural Wood": "NAT",
    "Dark Wood": "DRK",
    "Silver": "SLV",
    "Gold": "GLD",
}


# ─── Fallback derivations ────────────────────────────────────────

def alnum_upper(value: str) -> str:
    """Strip non-alphanumerics and uppercase: 'Custom-99x99' -> 'CUSTOM99X99'."""
    return _NON_ALNUM.sub("", value).upper()


def abbreviate(value: str) -> str:
    """First 3 characters, uppercased: 'Hahnemuhle' -> 'HAH'."""
    return value[:3].upper()


def _product_fallback(value: str) -> str:
    return alnum_upper(value)[:4]


def lookup_code(
    value: str, table: dict[str, str], fallback: Callable[[str], str],
) -> str:
    """Map a value through its table, deriving a code when it is unmapped."""
    code = table.get(value)
    return code if code is not None else fallback(value)


def product_code(product_type: str) -> str:
    return lookup_code(product_type, PRODUCT_TYPE_CODES, _product_fallback)


def size_code(size: str) -> str:
    return lookup_code(size, SIZE_CODES, alnum_upper)


def media_code(media: str) -> str:
    return lookup_code(media, MEDIA_CODES, abbreviate)


def frame_code(frame_color: str) -> str:
    return lookup_code(frame_color, FRAME_COLOR_CODES, abbreviate)


# ─── Composition ─────────────────────────────────────────────────

@dataclass(frozen=True)
class SkuInputs:
    """Source values and per-segment switches for one SKU."""
    artist_initials: str
    product_type: str
    size: str
    media: str
    frame_color: str | None = None
    prefix: str = "ALN"
    separator: str = "-"
    include_artist_initials: bool = True
    include_product_code: bool = True
    include_size_code: bool = True
    include_media_code: bool = True
    include_frame_code: bool = True


def compose_sku(inputs: SkuInputs) -> str:
    """Join prefix and enabled, non-empty segments with the separator."""
    parts = [inputs.prefix]

    if inputs.include_artist_initials and inputs.artist_initials:
        parts.append(inputs.artist_initials.upper())

    if inputs.include_product_code and inputs.product_type:
        parts.append(product_code(inputs.product_type))

    if inputs.include_size_code and inputs.size:
        parts.append(size_code(inputs.size))

    if inputs.include_media_code and inputs.media:
        parts.append(media_code(inputs.media))

    if inputs.include_frame_code and inputs.frame_color:
        parts.append(frame_code(inputs.frame_color))

    return inputs.separator.join(parts)


def derive_initials(full_name: str) -> str:
    """First letter of each word, uppercased: 'Sarah Jones' -> 'SJ'.

    Capped at MAX_INITIALS letters.
    """
    return "".join(word[0] for word in full_name.split())[:MAX_INITIALS].upper()
