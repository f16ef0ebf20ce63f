# check_receipts.py — print the most recent stored receipts with their points
import sys
import sqlalchemy
from receipt_points.core.config import settings
from receipt_points.db import models
from receipt_points.db.session import make_engine, make_session_factory
from receipt_points.services.scoring import score_breakdown
from receipt_points.services.store import row_to_receipt

limit = int(sys.argv[1]) if len(sys.argv) > 1 else 20

engine = make_engine(settings.DATABASE_URL)
if not sqlalchemy.inspect(engine).has_table("receipts"):
    raise SystemExit(f"No receipts table in {settings.DATABASE_URL} (run create_tables.py first)")

db = make_session_factory(engine)()
try:
    print("Recent receipts (id, retailer, total, points):")
    rows = db.query(models.Receipt).order_by(models.Receipt.created_at.desc()).limit(limit).all()
    for row in rows:
        breakdown = score_breakdown(row_to_receipt(row))
        print(row.id, repr(row.retailer), row.total, sum(breakdown.values()), breakdown)
finally:
    db.close()
    engine.dispose()
