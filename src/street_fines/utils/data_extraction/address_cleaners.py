"""
Street Name Resolution Utility

This module turns free-text parking ticket addresses ("123 FAKE ST W") into the
bare street name ("FAKE") used to total fines per street. The address column is
OCR'd and hand-entered, so nothing here assumes a well-formed address: the
street number is stripped with a tolerant regex rather than a full grammar, and
trailing directions/designations are trimmed with two fixed vocabularies.

Key Features:
- Pattern matching of the street number / street name split.
- Regex-free cache key guessing, so most lookups skip the regex entirely.
- Thread-safe memoization shared by all tabulation workers.

"""

import logging
import re
import threading
from dataclasses import dataclass
from typing import Dict, Optional

from street_fines.config.mappings.street_types import DESIGNATIONS, DIRECTIONS

logger = logging.getLogger(__name__)

# ─────────────────────────────────────────────────────────────────────────────
# Pre-compiled regexes
# ─────────────────────────────────────────────────────────────────────────────

# Leading junk: anything that is neither a letter nor a digit ("!33", "-33").
_JUNK = r"[\W_]*"

# Street numbers are digits and punctuation ("123/345", "12451&2412", "33-44",
# "22, 77"), optionally ending in an apartment letter ("235-a"). Lowercase o's
# and l's are OCR'd 0's and 1's ("1o2", "l22"); street names are all uppercase.
_STREET_NUM = r"(?P<number>[\dol\-&/, ]*(?:\d(?:-[^\W\d_])?)?)"

# Street names keep digits so ordinals like "12TH" survive.
_STREET_NAME = r"(?P<street>(?:[^\W_]|[ .'\-])*)"

ADDRESS_RE = re.compile(
    rf"{_JUNK}(?:{_STREET_NUM}\s+)?{_STREET_NAME}.*",
    re.DOTALL,
)

# Non-digit characters a bare street number token may contain.
_NUMBER_TOKEN_CHARS = frozenset("ol-&/,")

# ─────────────────────────────────────────────────────────────────────────────
# Dataclass for matched addresses
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(slots=True, frozen=True)
class AddressMatch:
    number: Optional[str] = None
    street: str = ""


# ─────────────────────────────────────────────────────────────────────────────
# Matching + trimming
# ─────────────────────────────────────────────────────────────────────────────


def match_address(addr: str) -> Optional[AddressMatch]:
    """
    Split an address into its street number and street parts.

    Leading and trailing junk is ignored. Returns None when nothing that looks
    like a street is left, e.g. '!!!' or '123 ???'. That includes a valid street
    number followed only by junk ('12 !FOO ST'): it is reported as unresolved
    rather than as an empty street name.
    """
    if not isinstance(addr, str):
        return None

    m = ADDRESS_RE.fullmatch(addr)
    if not m:
        return None

    street = m.group("street").strip()
    if not street:
        return None

    number = m.group("number")
    if number is not None:
        number = number.strip() or None

    return AddressMatch(number=number, street=street)


def isolate_street_name(street: str) -> str:
    """
    Get *just* the street name from a street, e.g. 'QUEEN ST W' -> 'QUEEN'.

    Tokens are scanned from the end. Directions may repeat ('N E') and are
    dropped; the first designation is dropped along with everything after it;
    the first token that is neither ends the scan and is kept.

    A street actually named after a designation ('HILL') with no designation of
    its own comes back empty. Junk in, junk out.
    """
    tokens = street.split()

    cut = 0
    for i in range(len(tokens) - 1, -1, -1):
        tok = tokens[i]
        # Directions never come before a designation, so stop at the first
        # designation or we'd mangle names like "HILL ST".
        if tok in DESIGNATIONS:
            cut = i
            break
        if tok not in DIRECTIONS:
            cut = i + 1
            break

    return " ".join(tokens[:cut])


def street_cache_key(addr: str) -> str:
    """
    Return a cache-friendly version of an address by lopping off the street
    number, so '123 FAKE ST' and '456 FAKE ST' share a cache entry.

    Only strips when the first token is unambiguously a street number and the
    rest starts with a letter or digit. Anything else (e.g. '12TH AVE',
    '1234-A FAKE ST') is returned unchanged, which only costs a cache miss.
    """
    if not addr or not addr[0].isdecimal():
        return addr

    space_idx = addr.find(" ")
    if space_idx == -1:
        return addr

    rest = addr[space_idx + 1:]
    if not rest or not rest[0].isalnum():
        return addr

    # "12TH", "2412A" and friends are part of the street name.
    if not all(c.isdecimal() or c in _NUMBER_TOKEN_CHARS for c in addr[:space_idx]):
        return addr

    return rest


# ─────────────────────────────────────────────────────────────────────────────
# Memoized resolver
# ─────────────────────────────────────────────────────────────────────────────


class StreetNameResolver:
    """
    Resolves addresses to street names, caching results by street cache key.

    Safe to share between threads. Two threads missing on the same key may both
    compute the name; they always store the same value, so the last write wins.
    """

    def __init__(self) -> None:
        self._cache: Dict[str, str] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._cache)

    def resolve(self, addr: str) -> Optional[str]:
        """
        Get a street name (ex: FAKE) from an address (ex: 123 FAKE ST W).

        Returns None if the address doesn't look like an address at all.
        """
        if not isinstance(addr, str) or not addr:
            return None

        key = street_cache_key(addr)

        name = self._cache.get(key)
        if name is not None:
            return name

        # Always match the original address, never the cache key.
        parsed = match_address(addr)
        if parsed is None:
            logger.debug("Unparseable address: %r", addr)
            return None

        name = isolate_street_name(parsed.street.upper())

        with self._lock:
            self._cache[key] = name

        return name


_default_resolver = StreetNameResolver()


def resolve_street_name(addr: str) -> Optional[str]:
    """Resolve an address with the process-wide shared resolver."""
    return _default_resolver.resolve(addr)
