"""
Domain errors raised by the pricing, tax and stock modules.

All of them are recoverable: routers turn them into HTTP 4xx/5xx responses
and the caller corrects the input and retries.
"""


class TileTrackerError(Exception):
    """Base class for every error raised by the billing and stock core."""


class InvalidDimension(TileTrackerError):
    """Non-positive tile width/height/tiles-per-box, or an unknown unit."""


class InvalidQuantity(TileTrackerError):
    """Non-positive number of boxes, box price or subtotal on an order or stock-in line."""


class DivisionByZero(TileTrackerError):
    """Box price could not be converted to a per-sqft rate because the box area is zero."""


class EmptyCart(TileTrackerError):
    def __init__(self, message: str = "Order must contain at least one item."):
        super().__init__(message)


class ProductNotFound(TileTrackerError):
    def __init__(self, product_id):
        self.product_id = product_id
        super().__init__(f"Product with ID {product_id} not found.")


class InsufficientStock(TileTrackerError):
    def __init__(self, product_id, product_label, available, requested):
        self.product_id = product_id
        self.available = available
        self.requested = requested
        super().__init__(
            f"Insufficient stock for product '{product_label}' (ID {product_id}). "
            f"Available: {available}, Requested: {requested}"
        )


class ProductInUse(TileTrackerError):
    def __init__(self, product_id):
        self.product_id = product_id
        super().__init__(
            f"Product with ID {product_id} is referenced by a tax invoice and cannot be deleted."
        )


class TransactionFailure(TileTrackerError):
    """The order could not be stored; everything written so far was rolled back."""

    def __init__(self, message: str, cause: Exception):
        self.cause = cause
        super().__init__(f"{message}: {cause}")


class PaymentExceedsBalance(TileTrackerError):
    def __init__(self, entry_id, amount, pending):
        self.entry_id = entry_id
        self.amount = amount
        self.pending = pending
        super().__init__(
            f"Payment amount ({amount}) exceeds pending amount ({pending}) for ledger entry {entry_id}."
        )
