# gst_invoice/domain/errors.py
"""
Error and warning taxonomy for the invoice engine.

Errors are raised at the input boundary, before any tax math runs.
Warnings are non-fatal: the engine clamps to a safe value, emits the
warning via ``warnings.warn`` and records a message on the draft invoice.
"""

from __future__ import annotations

from typing import Optional


class GSTInvoiceError(Exception):
    """Base class for invoice engine errors."""
    pass


class InvalidLineItemError(GSTInvoiceError, ValueError):
    """Raised when a line item fails validation (negative quantity/rate,
    discount outside 0–100, negative or missing GST rate, bad HSN code)."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        index: Optional[int] = None,
    ):
        self.field = field
        self.index = index
        if index is not None:
            message = f"Line {index + 1}: {message}"
        super().__init__(message)


class InvalidDiscountError(InvalidLineItemError):
    """Raised when a document-level discount is negative or not a number."""
    pass


class InvalidJurisdictionInputError(UserWarning):
    """A seller or buyer state code is missing; treated as inter-state (IGST)."""
    pass


class DiscountExceedsTotalWarning(UserWarning):
    """Document discount was larger than the gross total and got clamped."""
    pass


class InvalidPartyError(GSTInvoiceError, ValueError):
    """Raised when seller or buyer details are malformed (e.g. a bad GSTIN)."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)
