# receipt_points/api/v1/deps.py
from fastapi import Request

from receipt_points.services.store import ReceiptStore


def get_store(request: Request) -> ReceiptStore:
    # opened by the application lifespan, see receipt_points.main
    return request.app.state.store
