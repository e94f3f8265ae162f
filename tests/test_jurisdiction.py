"""Tests for seller/buyer jurisdiction resolution."""

import pytest

from gst_invoice.domain.errors import InvalidJurisdictionInputError
from gst_invoice.domain.services.jurisdiction import resolve_jurisdiction


class TestResolveJurisdiction:

    def test_same_state_is_intra_state(self):
        result = resolve_jurisdiction("KA", "KA")
        assert result.is_intra_state is True
        assert result.is_resolved is True
        assert result.tax_type == "CGST+SGST"

    def test_different_state_is_inter_state(self):
        result = resolve_jurisdiction("KA", "MH")
        assert result.is_intra_state is False
        assert result.tax_type == "IGST"

    def test_codes_are_trimmed_and_case_folded(self):
        result = resolve_jurisdiction("  ka ", "KA")
        assert result.is_intra_state is True
        assert result.seller_state_code == "KA"

    def test_both_empty_is_not_a_match(self):
        with pytest.warns(InvalidJurisdictionInputError):
            result = resolve_jurisdiction("", "")
        assert result.is_intra_state is False
        assert result.is_resolved is False

    def test_missing_buyer_code_defaults_to_igst(self):
        with pytest.warns(InvalidJurisdictionInputError, match="buyer"):
            result = resolve_jurisdiction("KA", None)
        assert result.is_intra_state is False

    def test_whitespace_only_code_counts_as_missing(self):
        with pytest.warns(InvalidJurisdictionInputError, match="seller"):
            result = resolve_jurisdiction("   ", "KA")
        assert result.is_intra_state is False
