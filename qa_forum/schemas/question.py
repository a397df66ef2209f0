from datetime import datetime
from pydantic import BaseModel, ConfigDict
from typing import List, Optional


class QuestionCreate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None


class QuestionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    user_id: int
    created_at: Optional[datetime] = None


class QuestionResponse(BaseModel):
    message: str
    data: QuestionOut


class QuestionListResponse(BaseModel):
    message: str
    data: List[QuestionOut]


# Shared by question and answer creation: {message, data: {id}}
class CreatedId(BaseModel):
    id: int


class CreatedResponse(BaseModel):
    message: str
    data: CreatedId
