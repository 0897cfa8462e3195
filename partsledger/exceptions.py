"""
Exceptions for PartsLedger.

Operation errors are LedgerError subclasses with a structured code for
programmatic handling. Problems with the persisted files are OSError
subclasses, so callers can treat them like any other I/O failure.
"""

from typing import Any


class LedgerError(Exception):
    """
    Structured exception for inventory operations.

    Usage:
        try:
            inventory.outbound('X1', 'P1', 20)
        except NegativeStockError as e:
            print(f"Would leave {e.would_be} in stock")

    Attributes:
        code: Error code for programmatic handling
        message: Human-readable message
        data: Additional context data
    """

    _default_messages: dict[str, str] = {}

    def __init__(self, code: str, message: str | None = None, **data: Any):
        self.code = code
        self.message = message or self._default_messages.get(code, code)
        self.data = data
        super().__init__(self.message)

    def __str__(self) -> str:
        if not self.data:
            return self.message
        details = ', '.join(f'{k}={v}' for k, v in self.data.items())
        return f"{self.message} ({details})"

    def as_dict(self) -> dict[str, Any]:
        """Serialize to dict (useful for machine-readable output)."""
        return {
            'code': self.code,
            'message': self.message,
            'data': dict(self.data),
        }


class ValidationError(LedgerError):
    """Missing or invalid operation input. Nothing was persisted."""

    _default_messages = {
        'MODEL_REQUIRED': 'Model is required',
        'PART_REQUIRED': 'Part is required',
        'INVALID_QUANTITY': 'Invalid quantity',
        'INVALID_IMPORT_HEADER': 'Import file is missing required columns',
        'INVALID_IMPORT_ENCODING': 'Import file is not in the expected encoding',
        'INVALID_IMPORT_FILE': 'Import file is not valid CSV',
        'UNENCODABLE_TEXT': 'Text cannot be stored in the configured file encoding',
    }


class NegativeStockError(LedgerError):
    """Outbound would leave a negative quantity and was not allowed to."""

    _default_messages = {
        'NEGATIVE_STOCK': 'Insufficient stock: outbound would leave a negative quantity',
    }

    def __init__(self, message: str | None = None, **data: Any):
        super().__init__('NEGATIVE_STOCK', message, **data)

    @property
    def would_be(self) -> int:
        """Shortcut for data['would_be']."""
        return self.data.get('would_be', 0)

    @property
    def available(self) -> int:
        """Shortcut for data['available']."""
        return self.data.get('available', 0)

    @property
    def requested(self) -> int:
        """Shortcut for data['requested']."""
        return self.data.get('requested', 0)


class MalformedFileError(OSError):
    """A persisted inventory or transaction file cannot be parsed or encoded."""

    def __init__(self, path, reason: str, line: int | None = None):
        self.path = path
        self.reason = reason
        self.line = line
        location = f"{path}:{line}" if line is not None else str(path)
        super().__init__(f"{location}: {reason}")
