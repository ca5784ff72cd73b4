# tests/conftest.py
from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Iterable, Iterator, List

import httpx
import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from confusables_gen.config import GeneratorSettings  # noqa: E402
from tests.testlib.upstream import UPSTREAM_URL  # noqa: E402

ClientFactory = Callable[..., httpx.Client]


@pytest.fixture()
def make_client() -> Iterator[ClientFactory]:
    """Build httpx clients whose transport serves the given lines for any GET."""
    clients: List[httpx.Client] = []

    def _make(lines: Iterable[str], status_code: int = 200) -> httpx.Client:
        body = "\n".join(lines) + "\n"

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                status_code,
                content=body.encode("utf-8"),
                headers={"Content-Type": "text/plain; charset=utf-8"},
            )

        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield _make
    for c in clients:
        c.close()


@pytest.fixture()
def settings(tmp_path: Path) -> GeneratorSettings:
    return GeneratorSettings(
        confusables_url=UPSTREAM_URL,
        extra_confusables_file=str(tmp_path / "extra_confusables.json"),
        output_file=str(tmp_path / "confusables_table.py"),
        package_name="confusables",
    )
