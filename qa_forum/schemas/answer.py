from datetime import datetime
from pydantic import BaseModel, ConfigDict
from typing import List, Optional


class AnswerCreate(BaseModel):
    description: Optional[str] = None


class AnswerOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    description: str
    user_id: int
    question_id: int
    created_at: Optional[datetime] = None


class AnswerResponse(BaseModel):
    message: str
    data: AnswerOut


class AnswerListResponse(BaseModel):
    message: str
    data: List[AnswerOut]
