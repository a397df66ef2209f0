# qa_forum/routes/questions.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from qa_forum.database import get_db
from qa_forum.errors import BadRequestError, NotFoundError, UnauthenticatedError
from qa_forum.models.question import Question
from qa_forum.schemas import question as schemas
from qa_forum.schemas.user import TokenData
from qa_forum.utils.tokenJWT import get_current_user
from qa_forum.utils.validate import validate_question

router = APIRouter(prefix="/questions", tags=["Questions"])


# List every question
@router.get("", response_model=schemas.QuestionListResponse)
def get_all_questions(db: Session = Depends(get_db)):
    rows = db.query(Question).order_by(Question.id).all()
    return {"message": "Questions fetched successfully", "data": rows}


# Retrieve a single question
@router.get("/{question_id}", response_model=schemas.QuestionResponse)
def get_question_by_id(question_id: int, db: Session = Depends(get_db)):
    q = db.query(Question).filter(Question.id == question_id).first()
    if not q:
        raise NotFoundError("Question not found")
    return {"message": "Question fetched successfully", "data": q}


# Ask a new question (authenticated)
@router.post("", response_model=schemas.CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_question(
    payload: schemas.QuestionCreate,
    db: Session = Depends(get_db),
    current_user: TokenData = Depends(get_current_user),
):
    result = validate_question(payload.model_dump())
    if not result.valid:
        raise BadRequestError(result.message)

    if current_user is None or current_user.id is None:
        raise UnauthenticatedError("User not authenticated")

    q = Question(title=payload.title, description=payload.description, user_id=current_user.id)
    db.add(q)
    db.commit()
    db.refresh(q)

    return {"message": "Question created successfully", "data": {"id": q.id}}
