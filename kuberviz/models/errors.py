"""Exception types raised by the layout engine and its collaborators."""


class KubervizError(Exception):
    """Base exception for kuberviz errors."""


class ResourceParseError(KubervizError, ValueError):
    """Raised when a resource quantity is not a valid integer with a known suffix."""

    def __init__(self, value: object, kind: str) -> None:
        self.value = value
        self.kind = kind
        super().__init__(f"failed to parse {kind} quantity {value!r}")


class NodeReferenceError(KubervizError):
    """Raised when a pod references a missing or unknown node."""


class PatternError(KubervizError, ValueError):
    """Raised when a user supplied regular expression does not compile."""

    def __init__(self, field: str, pattern: str, reason: str) -> None:
        self.field = field
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"invalid pattern for {field} {pattern!r}: {reason}")


class ListFormatError(KubervizError, ValueError):
    """Raised when a Node/Pod list document has an unexpected shape."""
