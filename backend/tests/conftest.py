"""Shared test configuration, pytest markers and fixtures."""

import copy

import pytest

from models.requests import ChatMessage, MessagePart
from services.completion_client import CompletionService


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: calls the real Gemini API (needs GEMINI_API_KEY)"
    )


VALID_CANDIDATE = {
    "personalInfo": {
        "name": "Jane Doe",
        "email": "jane.doe@example.com",
        "phone": "+1-555-0100",
        "location": "Austin, TX",
        "linkedin": "https://linkedin.com/in/janedoe",
        "website": "",
    },
    "summary": "Backend engineer with eight years of experience building payment APIs.",
    "experience": [
        {
            "title": "Software Engineer",
            "company": "Initech",
            "startDate": "Jun 2016",
            "endDate": "Dec 2019",
            "description": ["Built billing integrations", "- Cut report latency by 40%"],
        },
        {
            "title": "Senior Software Engineer",
            "company": "Globex",
            "location": "Remote",
            "startDate": "Jan 2020",
            "endDate": "Present",
            "description": ["• Led a team of 5 engineers"],
        },
    ],
    "education": [
        {
            "degree": "B.S. Computer Science",
            "institution": "State University",
            "graduationDate": "May 2016",
            "gpa": "3.8",
        }
    ],
    "skills": [
        {"category": "Programming Languages", "items": ["Python", "Go"]},
    ],
    "projects": [
        {
            "name": "ledgerlite",
            "description": "Double-entry bookkeeping library",
            "technologies": ["Python"],
            "url": "https://github.com/janedoe/ledgerlite",
        }
    ],
    "certifications": [
        {"name": "AWS Solutions Architect", "issuer": "Amazon", "date": "2021"},
    ],
}


class FakeCompletionService(CompletionService):
    """Records every call; returns ``response`` or raises ``error``."""

    def __init__(self, response: str = "", error: Exception | None = None):
        self.response = response
        self.error = error
        self.calls: list[dict] = []

    def complete(self, prompt: str, model_id: str, temperature: float) -> str:
        self.calls.append({"prompt": prompt, "model_id": model_id, "temperature": temperature})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def valid_candidate() -> dict:
    return copy.deepcopy(VALID_CANDIDATE)


@pytest.fixture
def fake_service():
    """Factory: fake_service(response="...", error=...)."""
    return FakeCompletionService


@pytest.fixture
def conversation() -> list[ChatMessage]:
    return [
        ChatMessage(role="system", parts=[MessagePart(text="You are a helpful assistant.")]),
        ChatMessage(role="user", parts=[MessagePart(text="Hi, I'm Jane Doe, a backend engineer.")]),
        ChatMessage(role="assistant", parts=[MessagePart(text="Nice to meet you, Jane!")]),
        ChatMessage(
            role="user",
            parts=[
                MessagePart(text="Here is my old CV:"),
                MessagePart(type="file", text=""),
            ],
        ),
    ]
