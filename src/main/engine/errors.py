"""Exceptions raised by the metrics engine."""

from typing import Dict, Optional


class MetricsError(Exception):
    """Base exception for every input the engine refuses to measure."""

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message

    def __reduce__(self):
        # subclasses take their own constructor arguments; args holds only the message
        return _restore, (type(self), self.message, self.details)


def _restore(cls, message: str, details: Dict[str, str]) -> "MetricsError":
    error = cls.__new__(cls)
    MetricsError.__init__(error, message, details)
    return error


class MalformedInputError(MetricsError):
    """The syntax tree uses a construct the engine cannot measure."""


class UnsupportedAssignmentTarget(MalformedInputError):
    def __init__(self, target: str, node_type: str):
        super().__init__(
            "Assignment target must be a plain identifier",
            {"target": target, "node_type": node_type},
        )


class TypeArgumentsNotSupported(MalformedInputError):
    def __init__(self, call: str):
        super().__init__("Calls with explicit type arguments are not supported", {"call": call})


class SourceSyntaxError(MalformedInputError):
    """The parser produced error nodes for the given source."""


class SourceEncodingError(MalformedInputError):
    def __init__(self, path: str, reason: str):
        super().__init__("Source file is not valid UTF-8", {"path": path, "reason": reason})


class TreeTooLargeError(MetricsError):
    def __init__(self, nodes: int, limit: int):
        super().__init__(
            "Syntax tree exceeds the configured size bound",
            {"nodes": str(nodes), "limit": str(limit)},
        )


class ContractViolation(RuntimeError):
    """An invariant of the walker itself was broken. Front ends let it propagate."""
