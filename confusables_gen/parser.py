"""Extraction of Basic Latin confusables from the Unicode confusables.txt data.

Upstream lines look like::

    0430 ;    0061 ;    MA    # ( а → a ) CYRILLIC SMALL LETTER A → LATIN SMALL LETTER A    #
    1D6A4 ;    0069 ;    MA    #* ( 𝚤 → ı → i ) MATHEMATICAL ITALIC SMALL DOTLESS I → ...

Fields are separated by `` ;<TAB>`` (shown as spaces above). The first two
are space separated code point IDs. The comment renders
the confusable character and, after zero or more intermediate steps, the
character it is confused with.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, Iterable, Optional

from confusables_gen.telemetry.logging import bind

log = bind(logging.getLogger(__name__), stage="parser")

# Printable ASCII without space
BASIC_LATIN = range(0x21, 0x7E + 1)

CONFUSABLE_LINE_RE = re.compile(
    r"^(?P<confusable_ids>[0-9a-f]+(?: [0-9a-f]+)*) ;\t"
    r"(?P<target_ids>[0-9a-f]+(?: [0-9a-f]+)*) ;\t"
    r"[a-z]{2,}\t"
    r"#\*? \( (?P<confusable_char>.+?) →(?: .+? →)* (?P<target_char>.+) \) "
    r".+ → .+",
    re.IGNORECASE,
)


def is_allowed(confusable: str, target: str) -> bool:
    """Return True when ``confusable`` can pass for Basic Latin text.

    The confusable must be a single character outside Basic Latin, and the
    target must contain at least one Basic Latin or whitespace character.
    """
    if len(confusable) > 1:
        return False
    if any(ord(ch) in BASIC_LATIN for ch in confusable):
        return False
    return any(ord(ch) in BASIC_LATIN or ch.isspace() for ch in target)


def format_code_points(ids: str) -> str:
    """Turn ``"41 42"`` into the escaped literal text ``\\U00000041\\U00000042``."""
    return "".join("\\U" + token.rjust(8, "0") for token in ids.split())


def parse_confusables(
    lines: Iterable[str], confusables: Optional[Dict[str, str]] = None
) -> Dict[str, str]:
    """Add every allowed confusable found in ``lines`` to ``confusables``.

    Lines that do not look like a mapping are skipped. Entries already in
    the mapping are overwritten by later lines with the same key.
    """
    result: Dict[str, str] = {} if confusables is None else confusables
    scanned = 0
    accepted = 0

    for line in lines:
        scanned += 1
        m = CONFUSABLE_LINE_RE.match(line)
        if not m:
            continue

        if not is_allowed(m.group("confusable_char"), m.group("target_char")):
            continue

        key = format_code_points(m.group("confusable_ids"))
        result[key] = format_code_points(m.group("target_ids"))
        accepted += 1

    log.info("parsed upstream confusables", extra={"lines": scanned, "accepted": accepted})
    return result
