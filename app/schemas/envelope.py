# app/schemas/envelope.py
from typing import Any, Dict, Optional
from pydantic import BaseModel

class Envelope(BaseModel):
    """Response wrapper holding either ``data`` or ``error``, never both.

    Only the variant that was set is serialized, so a success payload of
    ``0`` or ``[]`` is still emitted while the missing side is omitted.
    """
    data: Any = None
    error: Optional[str] = None

    @classmethod
    def success(cls, data: Any) -> "Envelope":
        return cls(data=data)

    @classmethod
    def failure(cls, message: str) -> "Envelope":
        return cls(error=message)

    def dump(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_unset=True)
