from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from confusables_gen.config import get_settings
from confusables_gen.errors import GeneratorError
from confusables_gen.pipeline import generate
from confusables_gen.telemetry.logging import configure_root_logging

log = logging.getLogger("confusables_gen")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="confusables-gen",
        description="Regenerate the Basic Latin confusables table from unicode.org.",
    )
    parser.add_argument("--log-level", help="override CONFUSABLES_GEN_LOG_LEVEL")
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_root_logging(args.log_level or settings.log_level)

    try:
        generate(settings)
    except GeneratorError as exc:
        log.error("generation failed: %s", exc, exc_info=exc)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
