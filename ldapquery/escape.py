"""RFC 4515 value escaping.

Usage::

    from ldapquery.escape import escape

    escape("a*(b)")  # 'a\\2a\\28b\\29'
    escape("Jöhn")   # 'J\\c3\\b6hn'
"""

from __future__ import annotations

# Characters that must be hex-escaped inside a filter assertion value.
FILTER_SPECIALS = ("\\", "*", "(", ")", "\x00")


def _hex(ch: str) -> str:
    return "".join(f"\\{byte:02x}" for byte in ch.encode("utf-8"))


def escape(value: object, ignore: str = "") -> str:
    """Escape ``value`` for use inside an LDAP filter.

    Each special character becomes a backslash followed by its two-digit hex
    code. Non-ASCII characters become the escaped bytes of their UTF-8
    encoding, so the result is always ASCII. Characters in ``ignore`` are left
    untouched. ``None`` escapes to an empty string.
    """
    if value is None:
        return ""
    text = str(value)
    return "".join(
        _hex(ch) if (ch in FILTER_SPECIALS or not ch.isascii()) and ch not in ignore else ch
        for ch in text
    )
