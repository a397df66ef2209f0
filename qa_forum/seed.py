# qa_forum/seed.py
"""Populate an empty database with demo users, questions and answers.

Run with ``python -m qa_forum.seed``. Every demo user logs in with
``Password123!``.
"""
from sqlalchemy.orm import Session

from qa_forum.database import SessionLocal, init_db
from qa_forum.models.answer import Answer
from qa_forum.models.question import Question
from qa_forum.models.users import User
from qa_forum.utils.hashing import get_password_hash

SEED_PASSWORD = "Password123!"

USERS = [
    ("John", "Doe", "john.doe@example.com"),
    ("Jane", "Smith", "jane.smith@example.com"),
    ("Mike", "Johnson", "mike.j@example.com"),
    ("Sarah", "Williams", "sarah.w@example.com"),
    ("David", "Brown", "david.b@example.com"),
]

# (title, description, author index into USERS)
QUESTIONS = [
    ("How do I implement centralized error handling in a REST API?",
     "I want every endpoint to return errors in one consistent shape. What is the best approach for catching all errors in one place?", 0),
    ("What is the difference between threads and async/await?",
     "I am confused about when to use async functions versus a thread pool. Can someone explain the differences and when to use each?", 1),
    ("How to secure JWT tokens?",
     "What are the best practices for storing and validating JWT tokens? Should I use cookies or localStorage?", 2),
    ("Best practices for database connection pooling?",
     "Should I create a connection pool or open individual connections? What are the performance implications?", 0),
    ("How to handle file uploads in a web API?",
     "I need to accept file uploads. How do I validate file types and sizes?", 3),
    ("What is middleware?",
     "I keep hearing about middleware but I do not fully understand what it is or how to use it. Can someone explain with examples?", 4),
    ("How to prevent SQL injection?",
     "I am writing raw SQL queries in my application. Are parameterized statements enough to protect against SQL injection?", 1),
    ("Difference between PUT and PATCH in REST APIs?",
     "When should I use PUT vs PATCH for updating resources? I have seen both used interchangeably.", 2),
]

# (description, author index, question index)
ANSWERS = [
    ("Raise typed exceptions from your handlers and register one exception handler that turns them into responses. All errors then flow through one place.", 1, 0),
    ("Also add a catch-all handler for unexpected exceptions so nothing leaks a raw traceback to clients.", 2, 0),
    ("async/await runs cooperative tasks on one thread and shines for I/O-bound work. Threads help when you call blocking libraries.", 0, 1),
    ("For CPU-bound work neither helps much because of the GIL; reach for processes instead.", 3, 1),
    ("Store JWT tokens in httpOnly cookies to prevent XSS attacks. Always use HTTPS, keep expiration short and validate tokens on every protected route.", 4, 2),
    ("Keep the signing secret in environment variables and never hardcode it. Consider refresh tokens for long sessions.", 0, 2),
    ("Use a pool. Reusing existing connections instead of opening one per query significantly improves performance.", 1, 3),
    ("Parse multipart/form-data with your framework's upload support, enforce a size limit and check the content type before saving.", 2, 4),
    ("Middleware wraps every request and response. Common uses include authentication, logging, CORS and error handling.", 0, 5),
    ("Always use parameterized queries. Never concatenate user input into SQL strings.", 3, 6),
    ("PUT replaces the entire resource, while PATCH partially updates it.", 4, 7),
]


def seed(db: Session) -> bool:
    """Insert the demo data. Returns False when users already exist."""
    if db.query(User).first():
        return False

    hashed_password = get_password_hash(SEED_PASSWORD)
    users = [
        User(first_name=first, last_name=last, email=email, password=hashed_password)
        for first, last, email in USERS
    ]
    db.add_all(users)
    db.flush()

    questions = [
        Question(title=title, description=description, user_id=users[author].id)
        for title, description, author in QUESTIONS
    ]
    db.add_all(questions)
    db.flush()

    db.add_all([
        Answer(description=description, user_id=users[author].id, question_id=questions[question].id)
        for description, author, question in ANSWERS
    ])
    db.commit()
    return True


def main():
    init_db()
    session = SessionLocal()
    try:
        if seed(session):
            print(f"Inserted {len(USERS)} users, {len(QUESTIONS)} questions, {len(ANSWERS)} answers.")
            print(f"Test credentials: {USERS[0][2]} / {SEED_PASSWORD}")
        else:
            print("Users already present, skipping seed.")
    finally:
        session.close()


if __name__ == "__main__":
    main()
