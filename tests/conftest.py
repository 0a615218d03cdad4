import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from presensi.api.deps import get_db
from presensi.core.face_matcher import FaceComparator, MatchVerdict, get_face_comparator, parse_verdict
from presensi.core.security import create_access_token, get_password_hash
from presensi.db import Base, User
from presensi.main import app


class FakeComparator(FaceComparator):
    """Stands in for the vision model: answers with a fixed verdict text."""

    def __init__(self, verdict: str = "MATCH", configured: bool = True, error: Exception | None = None):
        self.verdict = verdict
        self.configured = configured
        self.error = error
        self.calls = []

    async def compare(self, reference_image, candidate_image):
        self.calls.append((reference_image, candidate_image))
        if self.error:
            raise self.error
        return MatchVerdict(verified=parse_verdict(self.verdict), raw=self.verdict)


@pytest.fixture()
def session_factory(tmp_path):
    engine = create_engine(
        f"sqlite:///{tmp_path / 'presensi_test.db'}",
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(engine)
    yield sessionmaker(bind=engine, autoflush=False, autocommit=False)
    engine.dispose()


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture()
def comparator():
    return FakeComparator()


@pytest.fixture()
def client(session_factory, comparator):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_face_comparator] = lambda: comparator
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def make_user(db):
    def _make_user(email="siswa@sekolah.id", full_name="Siswa Satu", role="student"):
        user = User(
            email=email,
            hashed_password=get_password_hash("rahasia123"),
            full_name=full_name,
            role=role,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user
    return _make_user


@pytest.fixture()
def auth_headers():
    def _auth_headers(user):
        token = create_access_token(user.email, user.role)
        return {"Authorization": f"Bearer {token}"}
    return _auth_headers
