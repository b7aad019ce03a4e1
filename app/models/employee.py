# app/models/employee.py
from typing import Optional
from pydantic import BaseModel, Field

class EmployeeModel(BaseModel):
    """Stored shape of an employee; the public ``id`` lives in ``_id``."""
    id: str = Field(alias="_id")
    name: Optional[str] = None
    department: Optional[str] = None

    class Config:
        populate_by_name = True

    def to_document(self):
        return self.model_dump(by_alias=True, exclude_none=True)
