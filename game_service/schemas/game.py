"""
Pydantic schemas for request/response validation
"""
from pydantic import BaseModel, Field, ConfigDict
from datetime import date, datetime
from decimal import Decimal


class GameBase(BaseModel):
    """Base Game schema with common fields"""
    name: str = Field(..., min_length=1, max_length=255, description="Game name")
    category: str = Field(..., min_length=1, max_length=100, description="Game category")
    release_date: date = Field(..., description="Release date (YYYY-MM-DD)")
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2, description="Game price")


class GameCreate(GameBase):
    """Schema for creating a new game"""
    pass


class GameUpdate(GameBase):
    """Schema for updating a game (full overwrite, all fields required)"""
    pass


class GameResponse(GameBase):
    """Schema for game response"""
    id: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
