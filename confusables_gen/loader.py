"""Supplemental confusables kept by hand next to the generator."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Optional

from confusables_gen.telemetry.logging import bind

log = bind(logging.getLogger(__name__), stage="loader")


def load_extra_confusables(
    path: str | Path, confusables: Optional[Dict[str, str]] = None
) -> Dict[str, str]:
    """Merge the JSON object stored at ``path`` into ``confusables``.

    The file is created empty when missing. Problems with it are logged and
    never abort the run: whatever was loaded before the problem is kept.
    Keys and values are taken verbatim, they are expected to already be
    escaped source text such as ``\\U00000100``.
    """
    result: Dict[str, str] = {} if confusables is None else confusables
    target = Path(path)

    try:
        if not target.exists():
            target.touch()
        raw = target.read_text(encoding="utf-8")
    except OSError as exc:
        log.warning("cannot open supplemental confusables: %s", exc, extra={"path": str(target)})
        return result

    try:
        decoded = json.loads(raw)
    except json.JSONDecodeError as exc:
        log.warning(
            "cannot decode supplemental confusables: %s", exc, extra={"path": str(target)}
        )
        return result

    if not isinstance(decoded, dict):
        log.warning(
            "supplemental confusables must be a JSON object, got %s",
            type(decoded).__name__,
            extra={"path": str(target)},
        )
        return result

    for key, value in decoded.items():
        if not isinstance(value, str):
            log.warning("skipping non-string supplemental entry %r", key)
            continue
        result[key] = value

    log.info("loaded supplemental confusables", extra={"path": str(target), "count": len(result)})
    return result
