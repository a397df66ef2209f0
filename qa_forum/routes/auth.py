# qa_forum/routes/auth.py
import logging
from functools import lru_cache

from fastapi import APIRouter, Depends, status
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from qa_forum.database import get_db
from qa_forum.errors import BadRequestError, ConflictError, UnauthenticatedError
from qa_forum.models.users import User
from qa_forum.schemas import user as schemas
from qa_forum.utils.hashing import get_password_hash, verify_password
from qa_forum.utils.tokenJWT import create_access_token
from qa_forum.utils.validate import validate_login, validate_register

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Auth"])

INVALID_CREDENTIALS = "Invalid email or password"


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    return get_password_hash("dummy-password-0")


def _normalize_email(email: str) -> str:
    return email.strip().lower()


def _find_user_by_email(db: Session, email: str):
    return db.query(User).filter(func.lower(User.email) == email).first()


def _issue_token(user: User) -> str:
    return create_access_token(data={"id": user.id, "email": user.email})


# Register a new user
@router.post("/register", response_model=schemas.AuthResponse, status_code=status.HTTP_201_CREATED)
def register(payload: schemas.UserCreate, db: Session = Depends(get_db)):
    result = validate_register(payload.model_dump(by_alias=True))
    if not result.valid:
        raise BadRequestError(result.message)

    normalized_email = _normalize_email(payload.email)

    # Fast path only; the unique index on users.email decides concurrent races
    if _find_user_by_email(db, normalized_email):
        logger.warning("Registration rejected, email already registered", extra={"event": "register.conflict"})
        raise ConflictError("User already exists")

    new_user = User(
        first_name=payload.first_name,
        last_name=payload.last_name,
        email=normalized_email,
        password=get_password_hash(payload.password),
    )
    db.add(new_user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning("Registration lost a race on a duplicate email", extra={"event": "register.conflict"})
        raise ConflictError("User already exists")
    db.refresh(new_user)

    user = schemas.UserResponse.model_validate(new_user)
    logger.info("User %s registered", user.id, extra={"event": "register.success", "user_id": user.id})

    return {"message": "User registered successfully", "token": _issue_token(new_user), "user": user}


# Authenticate user and issue JWT token
@router.post("/login", response_model=schemas.AuthResponse)
def login(payload: schemas.UserLogin, db: Session = Depends(get_db)):
    result = validate_login(payload.model_dump())
    if not result.valid:
        raise BadRequestError(result.message)

    db_user = _find_user_by_email(db, _normalize_email(payload.email))

    # Unknown emails run one bcrypt check too; timing must not reveal them
    password_hash = db_user.password if db_user else _dummy_hash()
    password_ok = verify_password(payload.password, password_hash)

    # Same message for an unknown email and a wrong password
    if not db_user or not password_ok:
        logger.warning("Failed login attempt", extra={"event": "login.failed"})
        raise UnauthenticatedError(INVALID_CREDENTIALS)

    logger.info("User %s logged in", db_user.id, extra={"event": "login.success", "user_id": db_user.id})

    return {
        "message": "Login successful",
        "token": _issue_token(db_user),
        "user": schemas.UserResponse.model_validate(db_user),
    }
