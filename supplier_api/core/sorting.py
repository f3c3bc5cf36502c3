"""Sort helpers for the list endpoint."""


from fastapi import Query

# Columns a client may sort by; anything else leaves store order.
SORTABLE_FIELDS = frozenset(
    {"name", "company_name", "product_name", "contact_number", "email", "created_at"}
)


class SortParams:
    """FastAPI dependency for `?sortField=name&sortOrder=asc`."""

    def __init__(
        self,
        sort_field: str = Query(default="name", alias="sortField", description="Sort field"),
        sort_order: str = Query(default="asc", alias="sortOrder", description="asc or desc"),
    ):
        # An empty sortField falls back to the default
        self.field = sort_field or "name"
        # Only an explicit "desc" flips the order
        self.order = "desc" if sort_order == "desc" else "asc"

    @property
    def column(self) -> str | None:
        return self.field if self.field in SORTABLE_FIELDS else None
