from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ProfessionalRecord(BaseModel):
    """Document shape stored in the professionals collection."""

    category: str = "videographer"
    location: str = ""
    name: str = ""
    location_search: Optional[List[str]] = Field(default=None, alias="locationSearch")
    bio: Optional[str] = None
    portfolio_url: Optional[str] = Field(default=None, alias="portfolioUrl")
    phone: Optional[str] = None
    email: Optional[str] = None
    created_at: Optional[str] = Field(default=None, alias="createdAt")
    platform: Optional[str] = None
    main_role: Optional[str] = Field(default=None, alias="mainRole")
    collaboration_type: Optional[str] = Field(default=None, alias="collaborationType")
    equipment: Optional[str] = None
    form_name: Optional[str] = Field(default=None, alias="formName")

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    def to_document(self) -> Dict[str, Any]:
        """Store payload: camelCase keys, absent optional fields left out."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ImportedRow(BaseModel):
    """One admitted sheet row: its document key plus the record to write."""

    row_number: int
    doc_id: Optional[str] = None
    record: ProfessionalRecord

    model_config = ConfigDict(extra="forbid")
