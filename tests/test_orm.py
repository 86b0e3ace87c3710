from typing import Optional

import pytest

pytest.importorskip("sqlalchemy")

from sqlalchemy import Integer, select  # noqa: E402
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column  # noqa: E402

from typed_email import Email, EmailNotValidError  # noqa: E402
from typed_email.orm import EmailType  # noqa: E402


class Base(DeclarativeBase):
    pass


class UserRow(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    email: Mapped[Email] = mapped_column(EmailType, nullable=False)
    backup_email: Mapped[Optional[Email]] = mapped_column(EmailType, nullable=True)


@pytest.fixture()
def session(sqlite_engine):
    Base.metadata.create_all(sqlite_engine)
    with Session(sqlite_engine) as session:
        yield session


def test_round_trip_through_database(session):
    session.add(UserRow(id=1, email=Email("John@Example.com")))
    session.add(UserRow(id=2, email="jane@example.org", backup_email="jane.doe@example.net"))
    session.commit()
    session.expire_all()

    john = session.get(UserRow, 1)
    assert isinstance(john.email, Email)
    assert john.email.as_str() == "John@Example.com"
    assert john.backup_email is None

    jane = session.get(UserRow, 2)
    assert isinstance(jane.backup_email, Email)
    assert jane.backup_email == "jane.doe@example.net"


def test_query_by_plain_string(session):
    session.add(UserRow(id=1, email="a@b.co"))
    session.commit()

    found = session.scalars(select(UserRow).where(UserRow.email == "a@b.co")).one()
    assert found.id == 1


def test_bind_validates_plain_strings():
    column_type = EmailType()
    assert column_type.process_bind_param(Email("a@b.co"), None) == "a@b.co"
    assert column_type.process_bind_param("a@b.co", None) == "a@b.co"
    assert column_type.process_bind_param(None, None) is None
    with pytest.raises(EmailNotValidError):
        column_type.process_bind_param("not-an-email", None)


def test_result_goes_through_checked_constructor():
    column_type = EmailType()
    loaded = column_type.process_result_value("a@b.co", None)
    assert isinstance(loaded, Email)
    assert column_type.process_result_value(None, None) is None
    with pytest.raises(EmailNotValidError):
        column_type.process_result_value("not-an-email", None)


def test_python_type():
    assert EmailType().python_type is Email
