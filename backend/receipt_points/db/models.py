# receipt_points/db/models.py — stored receipts and their line items
from sqlalchemy import Column, Integer, String, DateTime, func, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base

class Receipt(Base):
    __tablename__ = "receipts"
    id = Column(String(36), primary_key=True, index=True)
    retailer = Column(String(255), nullable=False)
    purchase_date = Column(String(10), nullable=False)
    purchase_time = Column(String(5), nullable=False)
    total = Column(String(32), nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    items = relationship(
        "ReceiptItem",
        back_populates="receipt",
        cascade="all, delete-orphan",
        order_by="ReceiptItem.position",
    )

class ReceiptItem(Base):
    __tablename__ = "receipt_items"
    id = Column(Integer, primary_key=True, index=True)
    receipt_id = Column(String(36), ForeignKey("receipts.id", ondelete="CASCADE"), nullable=False, index=True)
    # original index in the submitted items list
    position = Column(Integer, nullable=False)
    short_description = Column(String(255), nullable=False)
    price = Column(String(32), nullable=False)

    receipt = relationship("Receipt", back_populates="items")
