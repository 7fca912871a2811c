# app/conftest.py
"""
pytest fixtures: 사용자, 인증된 APIClient, 기본 작업 공고
"""

from decimal import Decimal

import pytest
from django.contrib.auth import get_user_model
from job.models import Job
from rest_framework.test import APIClient

User = get_user_model()


@pytest.fixture
def owner(db):
    return User.objects.create_user(
        username="owner",
        email="owner@example.com",
        password="testpass123",
        display_name="Job Owner",
    )


@pytest.fixture
def other_user(db):
    return User.objects.create_user(
        username="stranger", email="stranger@example.com", password="testpass123"
    )


@pytest.fixture
def owner_client(owner):
    client = APIClient()
    client.force_authenticate(user=owner)
    return client


@pytest.fixture
def other_client(other_user):
    client = APIClient()
    client.force_authenticate(user=other_user)
    return client


@pytest.fixture
def job(owner):
    return Job.objects.create(
        owner=owner,
        title="Landing page redesign",
        description="Rebuild the marketing landing page",
        budget=Decimal("1500.00"),
        category="design",
        skills=["Figma", "CSS"],
    )
