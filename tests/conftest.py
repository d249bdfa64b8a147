"""
Shared pytest fixtures for the Trip Planner API tests.

Every test gets its own SQLite file, a fresh application built from explicit
settings, and a recording mailer in place of SMTP.
"""
from datetime import datetime, timedelta, timezone
from typing import List

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app
from app.services.email_service import EmailMessage, Mailer

API_BASE_URL = "http://api.test"
WEB_BASE_URL = "http://web.test"


class RecordingMailer(Mailer):
    """Collects messages instead of talking to an SMTP server."""

    def __init__(self, settings: Settings, fail_for: tuple = ()):
        super().__init__(settings)
        self.sent: List[EmailMessage] = []
        self.fail_for = set(fail_for)

    async def send(self, message: EmailMessage) -> None:
        if message.to_email in self.fail_for:
            raise ConnectionError(f"SMTP refused {message.to_email}")
        self.sent.append(message)

    @property
    def recipients(self) -> List[str]:
        return [message.to_email for message in self.sent]


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'app.db'}",
        API_BASE_URL=API_BASE_URL,
        WEB_BASE_URL=WEB_BASE_URL,
        TIMEZONE="UTC",
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def mailer(settings) -> RecordingMailer:
    return RecordingMailer(settings)


@pytest.fixture
def client(settings, mailer):
    app = create_app(settings, mailer=mailer)
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


def future_day(days: int, hour: int = 12) -> datetime:
    base = datetime.now(timezone.utc) + timedelta(days=days)
    return base.replace(hour=hour, minute=0, second=0, microsecond=0)


def trip_payload(**overrides) -> dict:
    payload = {
        "destination": "Rio de Janeiro",
        "starts_at": future_day(30).isoformat(),
        "ends_at": future_day(34).isoformat(),
        "owner_name": "Ana",
        "owner_email": "a@example.com",
        "emails_to_invite": ["b@example.com"],
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def create_trip(client):
    """Create a trip through the API and return its id."""
    def _create(**overrides) -> str:
        response = client.post("/trips", json=trip_payload(**overrides))
        assert response.status_code == 200, response.text
        return response.json()["trip_id"]
    return _create
