# receipt_points/api/v1/receipts.py
import logging

from fastapi import APIRouter, Depends, HTTPException, status

from receipt_points.api.v1.deps import get_store
from receipt_points.schemas.receipt import ErrorOut, Points, Receipt, ReceiptId
from receipt_points.services.errors import InvalidReceipt, ReceiptNotFound, StoreError
from receipt_points.services.scoring import score, score_breakdown
from receipt_points.services.store import ReceiptStore
from receipt_points.services.validation import check_receipt

logger = logging.getLogger(__name__)
router = APIRouter()

INVALID_RECEIPT = "Invalid receipt. Please verify input."

@router.post(
    "/process",
    response_model=ReceiptId,
    responses={400: {"model": ErrorOut}, 500: {"model": ErrorOut}},
)
def process_receipt(payload: Receipt, store: ReceiptStore = Depends(get_store)):
    try:
        check_receipt(payload)
    except InvalidReceipt as exc:
        logger.info("Rejected receipt from %r: %s", payload.retailer, exc.reason)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_RECEIPT)

    try:
        receipt_id = store.save(payload)
    except StoreError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to save receipt")
    return {"id": receipt_id}

@router.get(
    "/{receipt_id}/points",
    response_model=Points,
    responses={404: {"model": ErrorOut}, 500: {"model": ErrorOut}},
)
def get_points(receipt_id: str, store: ReceiptStore = Depends(get_store)):
    try:
        receipt = store.get(receipt_id)
    except ReceiptNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No receipt found for that ID")
    except StoreError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to retrieve receipt")

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Points for %s: %s", receipt_id, score_breakdown(receipt))
    return {"points": score(receipt)}
