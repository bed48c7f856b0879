"""Shared fixtures: settings without .env leakage, fake AI gateway and LLM clients."""

import json
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from backend.app.api.dependencies import get_gateway
from backend.app.core.config import Settings, get_settings
from backend.app.main_api import create_app
from backend.app.schemas.ats import ResumeUpload

PDF_BYTES = b"%PDF-1.4\n1 0 obj << /Type /Catalog >> endobj\n%%EOF"
PDF_MIME = "application/pdf"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

OPTIMIZE_PAYLOAD = {
    "optimizedHtml": "<h2>Summary</h2><p>Backend engineer.</p>",
    "changes": {
        "keywordsAdded": ["Kubernetes"],
        "sectionsImproved": ["Summary"],
        "formattingAdjustments": [],
        "rationale": "Aligned skills to role.",
    },
}

SCORE_PAYLOAD = {
    "overallScore": 82,
    "scoreBreakdown": {
        "keywordMatch": 78,
        "formatting": 90,
        "contentRelevance": 80,
        "structure": 85,
    },
    "detailedFeedback": {
        "strengths": ["Clear section headers"],
        "weaknesses": ["Few cloud keywords"],
        "keywordAnalysis": {
            "matched": ["Go"],
            "missing": ["Helm"],
            "suggested": ["Helm charts"],
        },
        "formattingIssues": [],
        "recommendations": ["Mention Helm experience if any"],
    },
    "atsCompatibility": "High - Resume should pass through most ATS systems successfully",
}


class FakeGateway:
    """Stands in for GeminiGateway; records every call."""

    def __init__(self, text: str = "", error: Exception = None):
        self.text = text
        self.error = error
        self.calls = []

    def generate(self, parts):
        self.calls.append(list(parts))
        if self.error is not None:
            raise self.error
        return self.text


class FakeLLM:
    def __init__(self, content="", error: Exception = None):
        self.content = content
        self.error = error
        self.messages = None

    def invoke(self, messages):
        self.messages = messages
        if self.error is not None:
            raise self.error
        return SimpleNamespace(content=self.content)


class FakeLLMFactory:
    def __init__(self, llm: FakeLLM = None):
        self.llm = llm or FakeLLM()
        self.calls = []

    def __call__(self, **kwargs):
        self.calls.append(kwargs)
        return self.llm


def make_settings(**overrides) -> Settings:
    values = {"gemini_api_key": "test-key", "static_dir": "does-not-exist"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def resume():
    return ResumeUpload(filename="resume.pdf", content_type=PDF_MIME, content=PDF_BYTES)


@pytest.fixture
def fake_gateway():
    return FakeGateway(text=json.dumps(OPTIMIZE_PAYLOAD))


@pytest.fixture
def make_client():
    """Build a TestClient whose settings and gateway are replaced."""
    apps = []

    def _make(gateway, settings=None):
        settings = settings or make_settings()
        app = create_app(settings)
        app.dependency_overrides[get_settings] = lambda: settings
        app.dependency_overrides[get_gateway] = lambda: gateway
        apps.append(app)
        return TestClient(app)

    yield _make

    for app in apps:
        app.dependency_overrides.clear()
