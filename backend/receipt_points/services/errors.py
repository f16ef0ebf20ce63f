# receipt_points/services/errors.py
"""Error kinds raised by the service layer and mapped to HTTP responses by the API."""


class InvalidReceipt(ValueError):
    """A submitted receipt failed a validation rule. `reason` names the offending field."""

    def __init__(self, reason: str):
        super().__init__(f"invalid receipt: {reason}")
        self.reason = reason


class ReceiptNotFound(LookupError):
    """No stored receipt has the requested identifier."""

    def __init__(self, receipt_id: str):
        super().__init__(f"receipt not found: {receipt_id}")
        self.receipt_id = receipt_id


class StoreError(RuntimeError):
    """The persistence layer failed while saving or loading a receipt."""
