from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

import httpx

from confusables_gen.config import GeneratorSettings
from confusables_gen.errors import FetchError
from confusables_gen.telemetry.logging import bind

log = bind(logging.getLogger(__name__), stage="fetcher")

DEFAULT_TIMEOUT_S: float = GeneratorSettings.model_fields["http_timeout_s"].default


def _split_lines(chunks: Iterable[str]) -> Iterator[str]:
    # Only "\n" ends a line. The data renders U+2028, U+2029 and U+0085
    # inside its comments, which str.splitlines() would break on.
    pending = ""
    for chunk in chunks:
        pending += chunk
        *lines, pending = pending.split("\n")
        for line in lines:
            yield line.removesuffix("\r")
    if pending:
        yield pending.removesuffix("\r")


def iter_confusables_lines(
    url: str,
    client: Optional[httpx.Client] = None,
    timeout: float = DEFAULT_TIMEOUT_S,
) -> Iterator[str]:
    """Stream the upstream confusables document line by line.

    A single GET, no retries. Any transport failure, a non-2xx status or a
    read error part way through the body raises FetchError. The response, and
    the client when it was created here, are closed once the iterator is
    exhausted, closed or fails.
    """
    owns_client = client is None
    http = client if client is not None else httpx.Client(timeout=timeout)
    try:
        log.info("fetching confusables", extra={"url": url})
        with http.stream("GET", url, follow_redirects=True) as resp:
            resp.raise_for_status()
            yield from _split_lines(resp.iter_text())
    except httpx.HTTPStatusError as exc:
        raise FetchError(f"GET {url} returned HTTP {exc.response.status_code}") from exc
    except httpx.HTTPError as exc:
        raise FetchError(f"GET {url} failed: {exc}") from exc
    finally:
        if owns_client:
            http.close()
