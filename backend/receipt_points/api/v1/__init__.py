# receipt_points.api.v1 package - exports the routers so
# "from receipt_points.api.v1 import health, receipts" works.
from . import health
from . import receipts
