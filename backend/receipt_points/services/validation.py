# receipt_points/services/validation.py
"""Acceptance rules for submitted receipts.

`check_receipt` raises InvalidReceipt on the first rule that fails;
`validate` is the boolean form used where only accept/reject matters.
Both are pure: no I/O and no state.
"""
import re
import logging
from datetime import datetime

from receipt_points.schemas.receipt import Receipt
from receipt_points.services.errors import InvalidReceipt

logger = logging.getLogger(__name__)

_MONEY_RE = re.compile(r"\d+\.\d{2}", re.ASCII)
_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
_TIME_RE = re.compile(r"\d{2}:\d{2}", re.ASCII)


# Unicode letters, decimal digits, whitespace and the punctuation in `extra`
def _is_name(value: str, extra: str) -> bool:
    return bool(value) and all(c.isalpha() or c.isdecimal() or c.isspace() or c in extra for c in value)


def _is_date(value: str) -> bool:
    if not _DATE_RE.fullmatch(value):
        return False
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        return False
    return True


def _is_time(value: str) -> bool:
    if not _TIME_RE.fullmatch(value):
        return False
    try:
        datetime.strptime(value, "%H:%M")
    except ValueError:
        return False
    return True


def is_money(value: str) -> bool:
    """True for plain currency strings like '12.34': no sign, no separators, two decimals."""
    return _MONEY_RE.fullmatch(value) is not None


def check_receipt(receipt: Receipt) -> None:
    """Raise InvalidReceipt naming the first field that breaks a rule."""
    if not _is_name(receipt.retailer, "-_&"):
        raise InvalidReceipt("retailer")
    if not _is_date(receipt.purchaseDate):
        raise InvalidReceipt("purchaseDate")
    if not _is_time(receipt.purchaseTime):
        raise InvalidReceipt("purchaseTime")
    if not is_money(receipt.total):
        raise InvalidReceipt("total")
    if not receipt.items:
        raise InvalidReceipt("items")
    for i, item in enumerate(receipt.items):
        if not _is_name(item.shortDescription, "-_"):
            raise InvalidReceipt(f"items[{i}].shortDescription")
        if not is_money(item.price):
            raise InvalidReceipt(f"items[{i}].price")


def validate(receipt: Receipt) -> bool:
    try:
        check_receipt(receipt)
    except InvalidReceipt as exc:
        logger.debug("Receipt rejected: %s", exc.reason)
        return False
    return True


__all__ = ["validate", "check_receipt", "is_money"]
