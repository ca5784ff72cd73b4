from __future__ import annotations


class GeneratorError(Exception):
    """Base class for failures that abort a generator run."""


class FetchError(GeneratorError):
    """The upstream confusables document could not be retrieved or read."""


class RenderError(GeneratorError):
    """The generated module could not be formatted."""


class WriteError(GeneratorError):
    """The generated module could not be written to disk."""
