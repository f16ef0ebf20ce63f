# receipt_points/services/scoring.py
"""Reward points for an accepted receipt.

Seven independent rules, summed. Currency strings are read as integer
cents so no rule compares floats. A field that cannot be parsed makes
only its own rule contribute 0; that can only happen when a receipt
skipped validation, so it is logged as a warning.
"""
import re
import logging
from datetime import datetime
from typing import Dict, Optional

from receipt_points.schemas.receipt import Receipt

logger = logging.getLogger(__name__)

_CENTS_RE = re.compile(r"(\d+)\.(\d{2})", re.ASCII)


def to_cents(value: str) -> Optional[int]:
    """'12.34' -> 1234.

    Returns None unless the value is ASCII digits, a dot and exactly two
    fraction digits. Numeric strings such as '5.0' or '5' therefore count
    as unparseable; validation already rejects them.
    """
    m = _CENTS_RE.fullmatch(value or "")
    if not m:
        return None
    return int(m.group(1)) * 100 + int(m.group(2))


def _retailer_points(receipt: Receipt) -> int:
    return sum(1 for c in receipt.retailer if c.isalpha() or c.isdecimal())


def _round_total_points(receipt: Receipt) -> int:
    cents = to_cents(receipt.total)
    if cents is None:
        logger.warning("Unparseable total %r, round-dollar rule skipped", receipt.total)
        return 0
    return 50 if cents % 100 == 0 else 0


def _quarter_total_points(receipt: Receipt) -> int:
    cents = to_cents(receipt.total)
    if cents is None:
        logger.warning("Unparseable total %r, quarter rule skipped", receipt.total)
        return 0
    return 25 if cents % 25 == 0 else 0


def _item_pair_points(receipt: Receipt) -> int:
    return (len(receipt.items) // 2) * 5


def _description_points(receipt: Receipt) -> int:
    points = 0
    for item in receipt.items:
        if len(item.shortDescription.strip()) % 3 != 0:
            continue
        cents = to_cents(item.price)
        if cents is None:
            logger.warning("Unparseable item price %r, item skipped", item.price)
            continue
        # price * 0.2 rounded half up == (cents / 500 + 0.5) truncated
        points += (cents + 250) // 500
    return points


def _odd_day_points(receipt: Receipt) -> int:
    try:
        day = datetime.strptime(receipt.purchaseDate, "%Y-%m-%d").day
    except ValueError:
        logger.warning("Unparseable purchaseDate %r, odd-day rule skipped", receipt.purchaseDate)
        return 0
    return 6 if day % 2 == 1 else 0


def _afternoon_points(receipt: Receipt) -> int:
    try:
        hour = datetime.strptime(receipt.purchaseTime, "%H:%M").hour
    except ValueError:
        logger.warning("Unparseable purchaseTime %r, afternoon rule skipped", receipt.purchaseTime)
        return 0
    return 10 if 14 <= hour < 16 else 0


RULES = (
    ("retailer_name", _retailer_points),
    ("round_dollar_total", _round_total_points),
    ("quarter_multiple_total", _quarter_total_points),
    ("item_pairs", _item_pair_points),
    ("item_descriptions", _description_points),
    ("odd_purchase_day", _odd_day_points),
    ("afternoon_purchase", _afternoon_points),
)


def score_breakdown(receipt: Receipt) -> Dict[str, int]:
    """Points contributed by each rule, in rule order."""
    return {name: rule(receipt) for name, rule in RULES}


def score(receipt: Receipt) -> int:
    return sum(score_breakdown(receipt).values())


__all__ = ["score", "score_breakdown", "to_cents", "RULES"]
