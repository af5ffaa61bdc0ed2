"""
errors.py — Exceptions raised when case data breaks its contract.

The case views are pure functions over data supplied by the persistence
layer.  When that data is malformed (e.g. a contact with no occurred_at)
we raise instead of guessing a default: treating a missing timestamp as
"now" or as the epoch would silently skew the weekly contact counts.

Empty collections are NOT errors; they produce 0 / [] / None.
"""


class CaseDataError(Exception):
    """Base class for malformed case or contact data."""


class MissingOccurredAtError(CaseDataError, ValueError):
    """A contact event reached the case views without an occurred_at."""

    def __init__(self, case_number: str | None = None):
        self.case_number = case_number
        where = f" on case {case_number}" if case_number else ""
        super().__init__(f"Contact event{where} has no occurred_at timestamp")


class UnknownDateStyleError(CaseDataError, KeyError):
    """A date formatter was asked for a style it does not define."""

    def __init__(self, style: str):
        self.style = style
        super().__init__(style)

    def __str__(self) -> str:
        return f"Unknown date style: {self.style!r}"
