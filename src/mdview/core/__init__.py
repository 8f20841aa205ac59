"""Document session logic for mdview."""

from mdview.core.session import DocumentSession, OperationStatus

__all__ = [
    "DocumentSession",
    "OperationStatus",
]
