import datetime
from typing import Optional

from pydantic import BaseModel, Field


# =========================
# Base
# =========================
class ExpenseBase(BaseModel):
    date: datetime.date
    amount: float
    category: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None

    class Config:
        str_strip_whitespace = True


# =========================
# Create
# =========================
class ExpenseCreate(ExpenseBase):
    pass


# =========================
# Update
# =========================
class ExpenseUpdate(ExpenseBase):
    # Full replacement of the editable fields; owner is not editable
    pass


# =========================
# Output
# =========================
class ExpenseOut(ExpenseBase):
    id: int
    owner_id: int
    created_at: datetime.datetime
    updated_at: datetime.datetime

    class Config:
        from_attributes = True


class MessageOut(BaseModel):
    message: str
