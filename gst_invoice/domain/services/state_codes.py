# gst_invoice/domain/services/state_codes.py
"""
Indian state codes, place-of-supply labels and GSTIN helpers.

Two code systems show up in invoice data:
  - two-letter province codes (Shopify exports, seller profiles): "KA"
  - two-digit GST state codes (first two characters of a GSTIN): "29"

Jurisdiction resolution compares whatever codes the caller supplies and
never derives them from a GSTIN. The builder only checks that a GSTIN,
when one is given, is well formed.
"""

from __future__ import annotations

import re

_GSTIN = re.compile(
    r"(?P<state>[0-9]{2})"
    r"(?P<pan>[A-Z]{3}[ABCEFGHJKLPT][A-Z][0-9]{4}[A-Z])"
    r"(?P<entity>[1-9A-Z])Z(?P<check>[0-9A-Z])"
)

PROVINCE_CODES: dict[str, str] = {
    "AN": "Andaman and Nicobar Islands",
    "AP": "Andhra Pradesh",
    "AR": "Arunachal Pradesh",
    "AS": "Assam",
    "BR": "Bihar",
    "CH": "Chandigarh",
    "CG": "Chhattisgarh",
    "DN": "Dadra and Nagar Haveli",
    "DD": "Daman and Diu",
    "DL": "Delhi",
    "GA": "Goa",
    "GJ": "Gujarat",
    "HR": "Haryana",
    "HP": "Himachal Pradesh",
    "JK": "Jammu and Kashmir",
    "JH": "Jharkhand",
    "KA": "Karnataka",
    "KL": "Kerala",
    "LA": "Ladakh",
    "LD": "Lakshadweep",
    "MP": "Madhya Pradesh",
    "MH": "Maharashtra",
    "MN": "Manipur",
    "ML": "Meghalaya",
    "MZ": "Mizoram",
    "NL": "Nagaland",
    "OR": "Odisha",
    "PY": "Puducherry",
    "PB": "Punjab",
    "RJ": "Rajasthan",
    "SK": "Sikkim",
    "TN": "Tamil Nadu",
    "TS": "Telangana",
    "TR": "Tripura",
    "UP": "Uttar Pradesh",
    "UK": "Uttarakhand",
    "WB": "West Bengal",
}

GST_STATE_CODES: dict[str, str] = {
    "01": "Jammu and Kashmir", "02": "Himachal Pradesh", "03": "Punjab",
    "04": "Chandigarh", "05": "Uttarakhand", "06": "Haryana",
    "07": "Delhi", "08": "Rajasthan", "09": "Uttar Pradesh",
    "10": "Bihar", "11": "Sikkim", "12": "Arunachal Pradesh",
    "13": "Nagaland", "14": "Manipur", "15": "Mizoram",
    "16": "Tripura", "17": "Meghalaya", "18": "Assam",
    "19": "West Bengal", "20": "Jharkhand", "21": "Odisha",
    "22": "Chhattisgarh", "23": "Madhya Pradesh", "24": "Gujarat",
    "26": "Dadra and Nagar Haveli and Daman and Diu", "27": "Maharashtra",
    "29": "Karnataka", "30": "Goa", "31": "Lakshadweep",
    "32": "Kerala", "33": "Tamil Nadu", "34": "Puducherry",
    "35": "Andaman and Nicobar Islands", "36": "Telangana", "37": "Andhra Pradesh",
    "38": "Ladakh", "97": "Other Territory",
}


def normalize_state_code(code: str | None) -> str:
    return (code or "").strip().upper()


def state_name(code: str | None) -> str:
    """Map a province or GST state code to its state name.

    Unknown codes come back unchanged so free-text states survive imports.
    """
    normalized = normalize_state_code(code)
    if normalized in PROVINCE_CODES:
        return PROVINCE_CODES[normalized]
    if normalized in GST_STATE_CODES:
        return GST_STATE_CODES[normalized]
    return (code or "").strip()


def place_of_supply(code: str | None, state: str | None = None) -> str | None:
    """Render the place-of-supply label, e.g. ``"KA-Karnataka"``."""
    normalized = normalize_state_code(code)
    name = (state or "").strip() or (state_name(normalized) if normalized else "")
    if not normalized and not name:
        return None
    if not normalized:
        return name
    return f"{normalized}-{name}"


def parse_place_of_supply(label: str | None) -> tuple[str, str]:
    """Split ``"29-Karnataka"`` into ``("29", "Karnataka")``.

    A bare code ("KA") is returned with its looked-up state name; anything
    else is treated as a state name with no code.
    """
    text = (label or "").strip()
    if not text:
        return "", ""
    code, sep, name = text.partition("-")
    if sep:
        return normalize_state_code(code), name.strip()
    normalized = normalize_state_code(text)
    if normalized in PROVINCE_CODES or normalized in GST_STATE_CODES:
        return normalized, state_name(normalized)
    return "", text


def is_valid_gstin(gstin: str | None) -> bool:
    """Format check for a 15-character GSTIN.

    The embedded PAN must carry a known holder-type letter (P, C, F...) in
    its fourth position and the prefix must be an issued GST state code.
    The trailing check character is not verified.
    """
    match = _GSTIN.fullmatch(normalize_state_code(gstin))
    if match is None:
        return False
    return match.group("state") in GST_STATE_CODES
