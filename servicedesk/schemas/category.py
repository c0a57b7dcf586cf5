"""
Category schemas.
"""
from pydantic import BaseModel, Field
from typing import Any, Dict, Optional

# Largest identifier MongoDB can store as a 64-bit integer
MAX_ID = 2**63 - 1


class Category(BaseModel):
    """Category used to classify service desk tickets."""
    id: Optional[int] = Field(default=None, ge=1, le=MAX_ID)
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = Field(default=None, max_length=1024)


class CategoryPatch(BaseModel):
    """Merge-patch payload. Absent or null fields leave stored values untouched."""
    id: Optional[int] = Field(default=None, ge=1, le=MAX_ID)
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = Field(default=None, max_length=1024)

    def changed_fields(self) -> Dict[str, Any]:
        """Fields to overwrite on the stored category (never the id)."""
        return self.model_dump(exclude_unset=True, exclude_none=True, exclude={"id"})
