"""Shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from alexa_skill_kit.examples.helloworld import build_skill
from alexa_skill_kit.main import create_app
from alexa_skill_kit.skill import Skill

from .factories import APPLICATION_ID


@pytest.fixture
def skill() -> Skill:
    """Hello World skill bound to the test application id."""
    return build_skill(
        application_id=APPLICATION_ID, verbose=True, skip_validation=False, verify_signature=False
    )


@pytest.fixture
def client(skill: Skill) -> TestClient:
    return TestClient(create_app(skill))
