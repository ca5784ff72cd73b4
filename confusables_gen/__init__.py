"""Generator for the Basic Latin confusables table."""

from __future__ import annotations

from confusables_gen.pipeline import generate

__all__ = ["generate"]
