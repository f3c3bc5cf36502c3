"""Report request schema."""

from pydantic import Field

from supplier_api.schemas.common import ApiModel


class ReportRequest(ApiModel):
    # Numeric ids are accepted and looked up as strings
    user_ids: list[str | int] | None = Field(default=None, alias="userIds")
