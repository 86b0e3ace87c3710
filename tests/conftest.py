from typing import Optional

import pytest
from pydantic import BaseModel

from typed_email import Email


class Person(BaseModel):
    name: str
    email: Email


class Contact(BaseModel):
    email: Optional[Email] = None
    aliases: list[Email] = []


@pytest.fixture()
def person_model():
    return Person


@pytest.fixture()
def contact_model():
    return Contact


@pytest.fixture()
def sqlite_engine():
    sqlalchemy = pytest.importorskip("sqlalchemy")
    engine = sqlalchemy.create_engine("sqlite://")
    yield engine
    engine.dispose()
