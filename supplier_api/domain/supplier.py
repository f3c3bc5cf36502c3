"""SQLAlchemy ORM model for supplier records.

One row per supplier contact:
  - UUID primary key, assigned by the store and never reused
  - five required business fields, fully replaceable on update
  - created_at / updated_at (from TimestampMixin)
"""

from __future__ import annotations

import uuid

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from supplier_api.db.base import Base
from supplier_api.domain.mixins import TimestampMixin

# Fields a client supplies; id and timestamps belong to the store.
BUSINESS_FIELDS = ("name", "company_name", "product_name", "contact_number", "email")

# Fields matched by free-text search
SEARCHABLE_FIELDS = ("name", "company_name", "product_name", "email")


class Supplier(Base, TimestampMixin):
    __tablename__ = "suppliers"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    company_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    product_name: Mapped[str] = mapped_column(String(255), nullable=False)
    contact_number: Mapped[str] = mapped_column(String(10), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<Supplier {self.id} {self.name!r}>"
