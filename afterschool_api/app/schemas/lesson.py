"""
Pydantic models for lessons.

``LessonCreate`` describes a catalog entry before it is stored,
``LessonRead`` is the JSON shape returned to clients and
``SeatUpdate``/``SeatUpdateResult`` are the request and response bodies
of the seat adjustment endpoint.
"""

from pydantic import BaseModel, Field

# Largest value an SQLite INTEGER column can hold.
MAX_INTEGER = 2**63 - 1


class LessonBase(BaseModel):
    subject: str = Field(..., example="Math")
    location: str = Field(..., example="London")
    price: int = Field(..., ge=0, le=MAX_INTEGER, example=100)
    spaces: int = Field(..., ge=0, le=MAX_INTEGER, example=5)


class LessonCreate(LessonBase):
    """Schema for inserting a lesson."""
    pass


class LessonRead(LessonBase):
    """Schema for reading a lesson from the API."""

    id: str

    model_config = {
        "from_attributes": True,
    }


class SeatUpdate(BaseModel):
    """Request body for ``PUT /lessons/{id}``."""

    spaces: int = Field(..., ge=0, le=MAX_INTEGER, description="New number of available seats", example=3)


class SeatUpdateResult(BaseModel):
    success: bool = True
    modified_count: int = Field(..., alias="modifiedCount")
    lesson_id: str = Field(..., alias="lessonId")
    new_spaces: int = Field(..., alias="newSpaces")

    model_config = {
        "populate_by_name": True,
    }
