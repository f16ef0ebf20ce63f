"""Acceptance rules for submitted receipts."""
import pytest

from receipt_points.schemas.receipt import Receipt
from receipt_points.services.errors import InvalidReceipt
from receipt_points.services.validation import check_receipt, is_money, validate


def test_example_receipts_are_valid(make_receipt, corner_market_payload):
    assert validate(make_receipt())
    assert validate(Receipt(**corner_market_payload))


def test_validate_is_repeatable(make_receipt):
    receipt = make_receipt(retailer="Bad@Shop")
    assert validate(receipt) is False
    assert validate(receipt) is False


@pytest.mark.parametrize("retailer", ["M&M Corner Market", "Shop_Express", "Walmart-Super", "Café 24", "7 Eleven"])
def test_retailer_accepts_allowed_characters(make_receipt, retailer):
    assert validate(make_receipt(retailer=retailer))


@pytest.mark.parametrize("retailer", ["", "Retailer@123", "50% Off", "Shop*Name", "Store#1", "Target\n!", "½ Price Store", "Shop²", "Ⅻ Mart"])
def test_retailer_rejects_other_characters(make_receipt, retailer):
    with pytest.raises(InvalidReceipt) as exc:
        check_receipt(make_receipt(retailer=retailer))
    assert exc.value.reason == "retailer"


@pytest.mark.parametrize("value", ["2022-02-30", "2022-13-01", "2022-1-01", "22-01-01", "2022/01/01", "20220101", "abcd-ef-gh", ""])
def test_purchase_date_rejects_bad_dates(make_receipt, value):
    with pytest.raises(InvalidReceipt) as exc:
        check_receipt(make_receipt(purchaseDate=value))
    assert exc.value.reason == "purchaseDate"


def test_purchase_date_accepts_leap_day(make_receipt):
    assert validate(make_receipt(purchaseDate="2024-02-29"))


@pytest.mark.parametrize("value", ["00:00", "23:59", "14:00"])
def test_purchase_time_accepts_24_hour_times(make_receipt, value):
    assert validate(make_receipt(purchaseTime=value))


@pytest.mark.parametrize("value", ["24:00", "12:60", "1:05", "13:01:00", "1pm", ""])
def test_purchase_time_rejects_bad_times(make_receipt, value):
    with pytest.raises(InvalidReceipt) as exc:
        check_receipt(make_receipt(purchaseTime=value))
    assert exc.value.reason == "purchaseTime"


@pytest.mark.parametrize("value", ["0.00", "6.49", "1234.50"])
def test_money_accepts_two_decimal_amounts(value):
    assert is_money(value)


@pytest.mark.parametrize("value", ["-1.00", "+1.00", "1,000.00", "1.5", "1.500", ".50", "1", "1.00 ", "١.٠٠"])
def test_money_rejects_other_formats(value):
    assert not is_money(value)


def test_total_must_be_money(make_receipt):
    with pytest.raises(InvalidReceipt) as exc:
        check_receipt(make_receipt(total="35.3"))
    assert exc.value.reason == "total"


def test_zero_items_rejected(make_receipt):
    with pytest.raises(InvalidReceipt) as exc:
        check_receipt(make_receipt(items=[]))
    assert exc.value.reason == "items"


def test_item_description_rejects_ampersand(make_receipt):
    items = [{"shortDescription": "Dasani", "price": "1.40"}, {"shortDescription": "Salt & Pepper", "price": "1.00"}]
    with pytest.raises(InvalidReceipt) as exc:
        check_receipt(make_receipt(items=items))
    assert exc.value.reason == "items[1].shortDescription"


@pytest.mark.parametrize("description", ["¼ lb burger", "Water 2²", "Ⅻ Pack", ""])
def test_item_description_rejects_numeric_symbols_and_empty(make_receipt, description):
    items = [{"shortDescription": description, "price": "1.00"}]
    with pytest.raises(InvalidReceipt) as exc:
        check_receipt(make_receipt(items=items))
    assert exc.value.reason == "items[0].shortDescription"


@pytest.mark.parametrize("description", ["Pepsi - 12oz", "Crème brûlée", "Ramen_ラーメン", "Tab\tSeparated"])
def test_item_description_accepts_unicode_letters(make_receipt, description):
    items = [{"shortDescription": description, "price": "1.00"}]
    assert validate(make_receipt(items=items))


def test_item_price_must_be_money(make_receipt):
    items = [{"shortDescription": "Dasani", "price": "1.4"}]
    with pytest.raises(InvalidReceipt) as exc:
        check_receipt(make_receipt(items=items))
    assert exc.value.reason == "items[0].price"


def test_bad_retailer_fails_regardless_of_other_fields(make_receipt):
    assert not validate(make_receipt(retailer="Target@Home", total="100.00", purchaseTime="14:00"))
