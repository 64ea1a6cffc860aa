"""Text report of a conversion.

The two-line format is the program's stdout contract. ``parse_report``
reads it back from captured output; runtimes that track uncertainty
append a ``Ux...`` distribution token after each value, which is ignored.
"""
from __future__ import annotations

import re

from .converter import ConversionResult
from .errors import ReportFormatError

RATE_LABEL = "Uncertain conversion rate"
AMOUNT_LABEL = "Converted Amount"

_UX_TOKEN = re.compile(r"Ux\S*")
_RATE_RE = re.compile(rf"{RATE_LABEL}: (-?\d+\.\d+)")
_AMOUNT_RE = re.compile(rf"{AMOUNT_LABEL}: (-?\d+\.\d+)")


def format_report(result: ConversionResult) -> str:
    return (
        f"{RATE_LABEL}: {result.sampled_rate:.6f}\n"
        f"{AMOUNT_LABEL}: {result.converted_amount:.6f}"
    )


def parse_report(text: str) -> ConversionResult:
    clean = _UX_TOKEN.sub("", text)
    rate = _RATE_RE.search(clean)
    amount = _AMOUNT_RE.search(clean)
    if rate is None or amount is None:
        raise ReportFormatError("Failed to extract conversion rate or converted amount")
    return ConversionResult(sampled_rate=float(rate.group(1)), converted_amount=float(amount.group(1)))
