"""Seed data."""

from qa_forum.models.answer import Answer
from qa_forum.models.question import Question
from qa_forum.models.users import User
from qa_forum.seed import ANSWERS, QUESTIONS, SEED_PASSWORD, USERS, seed


def test_seed_populates_empty_database(db, count_rows):
    assert seed(db) is True

    assert count_rows(User) == len(USERS)
    assert count_rows(Question) == len(QUESTIONS)
    assert count_rows(Answer) == len(ANSWERS)


def test_seed_is_skipped_when_users_exist(db, count_rows):
    seed(db)

    assert seed(db) is False
    assert count_rows(User) == len(USERS)


def test_seeded_user_can_log_in(client, db):
    seed(db)

    res = client.post("/login", json={"email": USERS[0][2], "password": SEED_PASSWORD})

    assert res.status_code == 200
    assert res.json()["user"]["first_name"] == USERS[0][0]
