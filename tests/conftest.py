"""
Shared fixtures: an in-memory database and a prompter fed with scripted answers.
"""

import pytest

from database import Database
from managing_system import ManagingSystem
from prompts import Prompter


class ScriptedInput:
    """Stand-in for ``input`` that replays answers and then behaves like closed stdin."""

    def __init__(self, answers=()):
        self.answers = list(answers)
        self.prompts = []

    def feed(self, *answers):
        self.answers.extend(answers)

    def __call__(self, prompt=""):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return str(self.answers.pop(0))


@pytest.fixture
def db():
    """An empty database with the tracker's tables."""
    database = Database(":memory:")
    yield database
    database.close()


@pytest.fixture
def answers():
    return ScriptedInput()


@pytest.fixture
def prompter(answers):
    return Prompter(input_func=answers)


@pytest.fixture
def system(db, prompter):
    return ManagingSystem(db, prompter)


@pytest.fixture
def engineering(db):
    """Department 1 'Engineering' with role 1 'Engineer' paid 80000."""
    db.execute("INSERT INTO department (name) VALUES (?)", ("Engineering",))
    db.execute(
        "INSERT INTO role (title, salary, department_id) VALUES (?, ?, ?)",
        ("Engineer", 80000, 1),
    )
    return db
