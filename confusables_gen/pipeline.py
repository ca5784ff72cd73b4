from __future__ import annotations

import logging
from typing import Dict, Optional

import httpx

from confusables_gen.config import GeneratorSettings, get_settings
from confusables_gen.fetcher import iter_confusables_lines
from confusables_gen.loader import load_extra_confusables
from confusables_gen.parser import parse_confusables
from confusables_gen.renderer import render_table, write_source_file

log = logging.getLogger(__name__)


def generate(
    settings: Optional[GeneratorSettings] = None,
    client: Optional[httpx.Client] = None,
) -> Dict[str, str]:
    """Load, fetch, parse, render and write the confusables table once."""
    cfg = settings or get_settings()

    confusables = load_extra_confusables(cfg.extra_confusables_file)
    supplemental = len(confusables)

    lines = iter_confusables_lines(cfg.confusables_url, client=client, timeout=cfg.http_timeout_s)
    parse_confusables(lines, confusables)

    write_source_file(cfg.output_file, cfg.package_name, render_table(confusables))
    log.info(
        "confusables table generated",
        extra={
            "supplemental": supplemental,
            "total": len(confusables),
            "output": cfg.output_file,
        },
    )
    return confusables
