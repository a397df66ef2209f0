# qa_forum/routes/answers.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from qa_forum.database import get_db
from qa_forum.errors import BadRequestError, NotFoundError
from qa_forum.models.answer import Answer
from qa_forum.models.question import Question
from qa_forum.schemas import answer as schemas
from qa_forum.schemas.question import CreatedResponse
from qa_forum.schemas.user import TokenData
from qa_forum.utils.tokenJWT import get_current_user
from qa_forum.utils.validate import validate_answer

router = APIRouter(tags=["Answers"])


@router.get("/answers", response_model=schemas.AnswerListResponse)
def get_all_answers(db: Session = Depends(get_db)):
    rows = db.query(Answer).order_by(Answer.id).all()
    return {"message": "Answers fetched successfully", "data": rows}


@router.get("/answers/{answer_id}", response_model=schemas.AnswerResponse)
def get_answer_by_id(answer_id: int, db: Session = Depends(get_db)):
    a = db.query(Answer).filter(Answer.id == answer_id).first()
    if not a:
        raise NotFoundError("Answer not found")
    return {"message": "Answer fetched successfully", "data": a}


# Answers of one question; an unknown question yields an empty list
@router.get("/questions/{question_id}/answers", response_model=schemas.AnswerListResponse)
def get_answers_by_question_id(question_id: int, db: Session = Depends(get_db)):
    rows = db.query(Answer).filter(Answer.question_id == question_id).order_by(Answer.id).all()
    return {"message": "Answers fetched successfully", "data": rows}


# Answer a question (authenticated)
@router.post(
    "/questions/{question_id}/answers",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
def answer_question(
    question_id: int,
    payload: schemas.AnswerCreate,
    db: Session = Depends(get_db),
    current_user: TokenData = Depends(get_current_user),
):
    result = validate_answer(payload.model_dump())
    if not result.valid:
        raise BadRequestError(result.message)

    if not db.query(Question.id).filter(Question.id == question_id).first():
        raise NotFoundError("Question not found")

    a = Answer(description=payload.description, user_id=current_user.id, question_id=question_id)
    db.add(a)
    db.commit()
    db.refresh(a)

    return {"message": "Answer created successfully", "data": {"id": a.id}}
