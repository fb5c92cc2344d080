"""ORM Models - SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Importing this package registers every table on Base.metadata
"""

from store_api.models.user import User  # noqa: F401
from store_api.models.product import Product  # noqa: F401
