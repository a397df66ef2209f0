from sqlalchemy import Column, Integer, String, DateTime, func
from sqlalchemy.orm import relationship
from qa_forum.database import Base

# Represents a registered forum member; password holds only the bcrypt hash
class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    questions = relationship("Question", back_populates="user")
    answers = relationship("Answer", back_populates="user")
