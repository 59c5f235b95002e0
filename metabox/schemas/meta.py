from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class FieldSummary(BaseModel):
    name: str = Field(..., title="Field Name", description="Storage key and form control name.")
    input_kind: str = Field(..., title="Input Kind")
    data_type: str = Field(..., title="Data Type")
    storage_type: str = Field(..., title="Storage Type", description="meta (per item) or option (site-wide).")
    label: Optional[str] = Field(None, title="Label")


class QueueSummary(BaseModel):
    name: str = Field(..., title="Queue Name")
    fields: List[FieldSummary] = Field(default_factory=list, description="Fields in registration order.")


class SaveResponse(BaseModel):
    item_id: str = Field(..., title="Item ID", description="The content item whose metadata was saved.")
    queue: str = Field(..., title="Queue Name")
    saved: Dict[str, Any] = Field(default_factory=dict, description="Coerced values written, in order.")
    skipped: Dict[str, str] = Field(default_factory=dict, description="Fields not written, with the reason.")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "item_id": "42",
                "queue": "post_details",
                "saved": {"subtitle": "A short subtitle", "featured": True, "count": 42},
                "skipped": {},
            }
        }
    )
