"""ShareLink — кодирование входных данных калькулятора в ссылку и обратно.

- codec: версионированный токен "v1:" (zig-zag + base-36)
- legacy: fallback на плоскую query string a/b/c/d/major/minor
- resolver: порядок разбора (токен, затем legacy)
"""

from .codec import (
    SHARE_TOKEN_FIELD_COUNT,
    SHARE_TOKEN_VERSION,
    decode_share_token,
    encode_share_token,
    from_base36,
    to_base36,
    unzigzag,
    zigzag,
)
from .legacy import LEGACY_QUERY_KEYS, decode_legacy_query
from .resolver import resolve_share_link, share_fragment

__all__ = [
    "SHARE_TOKEN_FIELD_COUNT",
    "SHARE_TOKEN_VERSION",
    "LEGACY_QUERY_KEYS",
    "decode_share_token",
    "encode_share_token",
    "from_base36",
    "to_base36",
    "unzigzag",
    "zigzag",
    "decode_legacy_query",
    "resolve_share_link",
    "share_fragment",
]
