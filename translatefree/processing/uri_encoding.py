from __future__ import annotations

from urllib.parse import quote

from translatefree.errors import EncodingError

# Left unescaped by the browser encodeURI() built-in on top of letters, digits
# and "_.-~", which quote() never escapes.
URI_SAFE = ";,/?:@&=+$#!*'()"


def _normalize_surrogates(text: str) -> str:
    """
    Joins valid surrogate pairs into one code point and replaces
    any lone surrogate with U+FFFD.
    """
    return text.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "replace")


def encode_uri(text: str) -> str:
    if not isinstance(text, str):
        raise EncodingError(f"Cannot encode {type(text).__name__}, expected str")

    try:
        return quote(_normalize_surrogates(text), safe=URI_SAFE, encoding="utf-8")
    except (UnicodeError, TypeError) as e:
        raise EncodingError(f"Could not URI-encode text: {e}") from e
