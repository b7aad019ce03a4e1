# app/schemas/employee.py
from typing import Optional
from pydantic import BaseModel

class EmployeeBase(BaseModel):
    name: Optional[str] = None
    department: Optional[str] = None

class EmployeeIn(EmployeeBase):
    # Accepted so clients can echo a record back; always replaced server-side.
    id: Optional[str] = None

    class Config:
        extra = "ignore"

class EmployeeCreate(EmployeeIn):
    pass

class EmployeeUpdate(EmployeeIn):
    def settable_fields(self):
        # Empty strings count as unset, like null and absent fields.
        fields = self.model_dump(exclude={"id"}, exclude_none=True)
        return {k: v for k, v in fields.items() if v != ""}

class EmployeeOut(EmployeeBase):
    id: str

    class Config:
        from_attributes = True
