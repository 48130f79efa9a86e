"""Errors raised by external service adapters."""


class AdapterError(Exception):
    """An external service call failed."""


class GenerationError(AdapterError):
    """The text generation backend is unconfigured, unreachable or returned junk.

    Insight services catch this and fall back to rule-based output.
    """
