"""Domain package — all ORM models are imported here so create_all sees them.

Folder intent:
  supplier.py  — the supplier record (the only table)
  mixins.py    — shared TimestampMixin
"""

from supplier_api.domain.supplier import Supplier

__all__ = ["Supplier"]
