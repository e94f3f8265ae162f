# gst_invoice/domain/services/jurisdiction.py
"""
Tax-type selection: intra-state supplies pay CGST + SGST, everything else
pays IGST.

A missing state code on either side is not an error. Drafts and manual
entries often lack one, so the supply is treated as inter-state (IGST only,
never double-split) and an InvalidJurisdictionInputError warning is raised
so the UI can ask for the code.
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass

from gst_invoice.domain.errors import InvalidJurisdictionInputError
from gst_invoice.domain.services.state_codes import normalize_state_code

logger = logging.getLogger("jurisdiction")


@dataclass(frozen=True)
class Jurisdiction:
    """Outcome of comparing seller and buyer state codes."""
    is_intra_state: bool
    seller_state_code: str = ""
    buyer_state_code: str = ""
    is_resolved: bool = True  # False when a code was missing

    @property
    def tax_type(self) -> str:
        return "CGST+SGST" if self.is_intra_state else "IGST"


def resolve_jurisdiction(
    seller_state_code: str | None,
    buyer_state_code: str | None,
) -> Jurisdiction:
    """Compare normalized state codes. Two blanks are NOT a match."""
    seller = normalize_state_code(seller_state_code)
    buyer = normalize_state_code(buyer_state_code)

    if not seller or not buyer:
        missing = "seller" if not seller else "buyer"
        if not seller and not buyer:
            missing = "seller and buyer"
        message = f"Missing {missing} state code; treating supply as inter-state (IGST)"
        logger.warning(message)
        warnings.warn(message, InvalidJurisdictionInputError, stacklevel=2)
        return Jurisdiction(
            is_intra_state=False,
            seller_state_code=seller,
            buyer_state_code=buyer,
            is_resolved=False,
        )

    return Jurisdiction(
        is_intra_state=seller == buyer,
        seller_state_code=seller,
        buyer_state_code=buyer,
    )
