"""Tests for field constraints, tag normalization and tagged results."""

import pytest

from zelene.shared.schemas import (
    FeedbackCreate,
    ProfileUpdateRequest,
    RegisterRequest,
    TagCreate,
    TechnicalIssueCreate,
)
from zelene.shared.schemas.validation import normalize_tag_name, validate


def test_short_username_reports_field_message():
    result = validate(RegisterRequest, {"username": "ab", "email": "ab@example.com", "password": "secret1"})

    assert result.ok is False
    assert result.value is None
    assert [(e.field, e.message) for e in result.errors] == [
        ("username", "Username must be at least 3 characters")
    ]


def test_every_failing_field_is_reported():
    result = validate(RegisterRequest, {"username": "a" * 21, "email": "nope", "password": "123"})

    messages = {error.field: error.message for error in result.errors}
    assert messages == {
        "username": "Username cannot be longer than 20 characters",
        "email": "Email is not valid",
        "password": "Password must be at least 6 characters",
    }


def test_valid_input_returns_typed_value():
    result = validate(
        RegisterRequest,
        {"username": "ada", "email": "ada@example.com", "password": "secret1", "captchaToken": "t"},
    )

    assert result.ok is True
    assert result.errors == []
    assert result.value.captcha_token == "t"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("#python", "python"),
        ("  Machine   Learning ", "machine-learning"),
        ("##Web Dev", "web-dev"),
        ("rust", "rust"),
    ],
)
def test_tag_names_are_normalized(raw, expected):
    assert normalize_tag_name(raw) == expected
    assert normalize_tag_name(normalize_tag_name(raw)) == expected


def test_tag_name_rejects_symbols_after_normalizing():
    result = validate(TagCreate, {"name": "c++"})

    assert result.errors[0].field == "name"
    assert result.errors[0].message == "Tags can only contain letters, numbers, and hyphens"


def test_tag_name_of_only_hashes_is_required():
    result = validate(TagCreate, {"name": "###"})

    assert result.errors[0].message == "Tag name is required"


def test_feedback_scores_are_bounded():
    payload = {
        "category": "UI",
        "satisfaction": 6,
        "usability": 3,
        "improvements": "Faster search please",
        "recommendation": True,
    }

    result = validate(FeedbackCreate, payload)

    assert [error.field for error in result.errors] == ["satisfaction"]


def test_technical_issue_messages():
    result = validate(
        TechnicalIssueCreate,
        {
            "issueType": "DEVICE",
            "severity": "HIGH",
            "title": "",
            "description": "short",
            "stepsToReproduce": "Open the app and tap sync",
            "expectedBehavior": "Syncs",
        },
    )

    messages = {error.field: error.message for error in result.errors}
    assert messages["title"] == "Title is required"
    assert messages["description"] == "Description must be at least 10 characters"
    assert messages["expectedBehavior"] == "Expected behavior must be at least 10 characters"


def test_blank_social_links_are_cleared_and_bad_ones_rejected():
    ok = validate(ProfileUpdateRequest, {"social": {"website": "  "}})
    bad = validate(ProfileUpdateRequest, {"social": {"github": "not a url"}})

    assert ok.value.social.website is None
    assert bad.errors[0].field == "social.github"
