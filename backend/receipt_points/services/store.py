# receipt_points/services/store.py
"""Persistence for accepted receipts.

ReceiptStore owns an engine + session factory. The application lifespan
opens it on startup and closes it on shutdown; request handlers reach it
through the `get_store` dependency instead of a module-level handle.
"""
import uuid
import logging
from typing import Optional

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from receipt_points.db import models
from receipt_points.db.base import Base
from receipt_points.db.session import make_engine, make_session_factory
from receipt_points.schemas.receipt import Item, Receipt
from receipt_points.services.errors import ReceiptNotFound, StoreError

logger = logging.getLogger(__name__)


def new_receipt_id() -> str:
    return str(uuid.uuid4())


def row_to_receipt(row: models.Receipt) -> Receipt:
    return Receipt(
        retailer=row.retailer,
        purchaseDate=row.purchase_date,
        purchaseTime=row.purchase_time,
        total=row.total,
        items=[Item(shortDescription=i.short_description, price=i.price) for i in row.items],
    )


class ReceiptStore:
    def __init__(self, database_url: str):
        self.database_url = database_url
        self.engine: Optional[Engine] = None
        self._session_factory = None

    def open(self) -> "ReceiptStore":
        """Create the engine and any missing tables."""
        self.engine = make_engine(self.database_url)
        self._session_factory = make_session_factory(self.engine)
        Base.metadata.create_all(bind=self.engine)
        logger.info("Receipt store opened (%s)", self.engine.url.render_as_string(hide_password=True))
        return self

    def close(self) -> None:
        if self.engine is not None:
            self.engine.dispose()
            logger.info("Receipt store closed")
        self.engine = None
        self._session_factory = None

    def _session(self):
        if self._session_factory is None:
            raise StoreError("receipt store is not open")
        return self._session_factory()

    def save(self, receipt: Receipt) -> str:
        """Persist an accepted receipt under a fresh identifier and return it."""
        receipt_id = new_receipt_id()
        db = self._session()
        try:
            rec = models.Receipt(
                id=receipt_id,
                retailer=receipt.retailer,
                purchase_date=receipt.purchaseDate,
                purchase_time=receipt.purchaseTime,
                total=receipt.total,
                items=[
                    models.ReceiptItem(position=pos, short_description=item.shortDescription, price=item.price)
                    for pos, item in enumerate(receipt.items)
                ],
            )
            db.add(rec)
            db.commit()
        except SQLAlchemyError as exc:
            db.rollback()
            logger.exception("Failed to save receipt %s", receipt_id)
            raise StoreError("failed to save receipt") from exc
        finally:
            db.close()
        logger.info("Stored receipt %s (%d items)", receipt_id, len(receipt.items))
        return receipt_id

    def get(self, receipt_id: str) -> Receipt:
        """Load a stored receipt. Raises ReceiptNotFound for unknown identifiers."""
        db = self._session()
        try:
            row = db.query(models.Receipt).filter(models.Receipt.id == receipt_id).first()
            if not row:
                raise ReceiptNotFound(receipt_id)
            return row_to_receipt(row)
        except SQLAlchemyError as exc:
            logger.exception("Failed to load receipt %s", receipt_id)
            raise StoreError("failed to load receipt") from exc
        finally:
            db.close()
