"""Exceptions raised by the spec engine."""


class SpecbenchError(Exception):
    """Base class for all specbench errors."""


class SpecUsageError(SpecbenchError):
    """The declarative API was used outside of its contract.

    Examples: an expectation issued outside an ``it`` body, ``describe``
    called with no running spec, or two specs registered under one name.
    """


class RequirementAborted(BaseException):
    """Raised by a failed ``require_*`` call to end the enclosing ``it`` body.

    Not an Exception subclass: ``except Exception`` in a body lets it pass.
    Only ``it`` catches this; it never reaches the enclosing describe or spec.
    """

    def __init__(self, label: str | None = None):
        self.label = label
        super().__init__(f"requirement failed in '{label}'" if label else "requirement failed")
