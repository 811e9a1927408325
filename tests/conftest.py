"""
Shared fixtures: listing/profile factories and a fake OpenAI client.

No test touches a real MongoDB or the network.
"""
from types import SimpleNamespace

import httpx
import pytest

from app.core.config import Settings
from app.schemas.schemas import Internship, Profile


def make_internship(id="1", **overrides) -> Internship:
    values = {
        "id": id,
        "title": "Software Development Intern",
        "company": "TechCorp Solutions",
        "location": "Bangalore, Karnataka",
        "state": "Karnataka",
        "duration": "3 months",
        "stipend": "₹15,000/month",
        "skills": ["JavaScript", "React"],
        "type": "Technical",
        "category": "Information Technology",
        "remote": False,
        "description": "Build things.",
        "requirements": ["Willingness to learn"],
    }
    values.update(overrides)
    return Internship(**values)


def make_profile(**overrides) -> Profile:
    values = {
        "id": "user-1",
        "name": "Asha",
        "education_level": "B.Tech",
        "field_of_study": "Computer Science",
        "skills": [],
        "interests": [],
        "state": "Karnataka",
        "duration": "3 months",
        "work_type": "on-site",
    }
    values.update(overrides)
    return Profile(**values)


class FakeCompletions:
    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeOpenAI:
    """Stands in for openai.OpenAI: only chat.completions.create is used."""

    def __init__(self, content=None, error=None):
        self.completions = FakeCompletions(content, error)
        self.chat = SimpleNamespace(completions=self.completions)


def fake_request() -> httpx.Request:
    return httpx.Request("POST", "https://ranking.test/v1/chat/completions")


@pytest.fixture
def settings():
    return Settings(ai_api_key="test-key", ai_top_n=5, _env_file=None)


@pytest.fixture
def listings():
    return [
        make_internship("1", title="Machine Learning Intern", skills=["Python", "TensorFlow"], type="AI/ML"),
        make_internship("2", title="Digital Marketing Assistant", skills=["SEO", "Canva"], type="Marketing",
                        remote=True, location="Mumbai, Maharashtra", state="Maharashtra"),
        make_internship("3", title="Data Analysis Trainee", skills=["Excel", "SQL"], type="Analytics",
                        remote=True, location="Delhi NCR", state="Delhi", duration="6 months"),
        make_internship("4", title="Content Writing Intern", skills=["Content Writing"], type="Content",
                        category="Media & Communications"),
        make_internship("5", title="Data Engineering Intern", skills=["Python", "Spark"], type="Analytics",
                        location="Mumbai", state="Maharashtra", duration="6 months"),
    ]
