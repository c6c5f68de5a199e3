"""Tests for the form state reducers. Reducers never mutate their input."""

import dataclasses
from datetime import datetime, timezone
from uuid import uuid4

import pytest

from zelene.shared.schemas import FileUpload, ProfileResponse
from zelene.shared.state import issue_wizard, post_editor, settings_form


# ═══════════════════════════════════════════════════════════════════════════════
# ISSUE WIZARD
# ═══════════════════════════════════════════════════════════════════════════════


def test_wizard_steps_merge_form_data():
    initial = issue_wizard.IssueWizardState()

    state = issue_wizard.set_form_data(initial, 0, {"issue_type": "DEVICE", "severity": "HIGH"})
    state = issue_wizard.set_form_data(state, 1, {"title": "Sensor offline"})
    state = issue_wizard.set_current_step(state, 2)

    assert initial == issue_wizard.IssueWizardState()
    assert state.current_step == 2
    assert issue_wizard.get_form_data(state)["issue_type"] == "DEVICE"
    assert issue_wizard.get_form_data(state)["title"] == "Sensor offline"


def test_wizard_state_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        issue_wizard.IssueWizardState().title = "x"


def test_wizard_rejects_unknown_fields():
    with pytest.raises(ValueError):
        issue_wizard.set_form_data(issue_wizard.IssueWizardState(), 0, {"current_step": 3})


def test_wizard_form_data_excludes_ui_state():
    state = issue_wizard.set_is_submitting(issue_wizard.IssueWizardState(), True)

    data = issue_wizard.get_form_data(state)

    assert "is_submitting" not in data
    assert "file_list" not in data
    assert "current_step" not in data


def test_wizard_submission_validates():
    state = issue_wizard.set_form_data(
        issue_wizard.IssueWizardState(),
        0,
        {
            "issue_type": "DEVICE",
            "severity": "LOW",
            "title": "Flicker",
            "description": "Screen flickers on battery.",
            "steps_to_reproduce": "Unplug the charger first.",
            "expected_behavior": "A steady picture.",
        },
    )
    upload = FileUpload(filename="a.png", content_type="image/png", size=3, base64_data="YWJj")
    state = issue_wizard.set_file_list(state, [upload])

    result = issue_wizard.submission(state)

    assert result.ok is True
    assert result.value.attachments == [upload]


def test_wizard_incomplete_submission_reports_errors():
    result = issue_wizard.submission(issue_wizard.IssueWizardState())

    assert result.ok is False
    assert {"issueType", "severity", "title"} <= {error.field for error in result.errors}


def test_wizard_reset():
    state = issue_wizard.set_current_step(issue_wizard.IssueWizardState(), 3)

    assert issue_wizard.reset(state) == issue_wizard.IssueWizardState()


# ═══════════════════════════════════════════════════════════════════════════════
# POST EDITOR
# ═══════════════════════════════════════════════════════════════════════════════


def test_add_tag_normalizes_and_clears_input():
    state = post_editor.set_current_tag(post_editor.PostEditorState(), "#Web Dev")

    state = post_editor.add_tag(state, state.current_tag)

    assert state.tags == ("web-dev",)
    assert state.current_tag == ""


def test_add_tag_ignores_duplicates_and_blanks():
    state = post_editor.add_tag(post_editor.PostEditorState(), "python")
    state = post_editor.add_tag(state, "#Python")
    state = post_editor.add_tag(state, "   ")

    assert state.tags == ("python",)


def test_remove_tag():
    state = post_editor.add_tag(post_editor.PostEditorState(), "python")
    state = post_editor.add_tag(state, "rust")

    assert post_editor.remove_tag(state, "python").tags == ("rust",)
    assert state.tags == ("python", "rust")


def test_editor_fields():
    state = post_editor.set_title(post_editor.PostEditorState(), "Hello")
    state = post_editor.set_content(state, "Body")
    state = post_editor.set_selection_range(state, 2, 4)
    state = post_editor.toggle_preview(state)

    assert (state.title, state.content) == ("Hello", "Body")
    assert (state.selection_start, state.selection_end) == (2, 4)
    assert state.is_preview is True
    assert post_editor.toggle_preview(state).is_preview is False
    assert post_editor.reset(state) == post_editor.PostEditorState()


# ═══════════════════════════════════════════════════════════════════════════════
# SETTINGS FORM
# ═══════════════════════════════════════════════════════════════════════════════


def loaded_profile() -> ProfileResponse:
    return ProfileResponse.model_validate(
        {
            "id": str(uuid4()),
            "username": "ada",
            "email": "ada@example.com",
            "name": None,
            "joined": datetime(2026, 1, 1, tzinfo=timezone.utc),
            "profile": {"bio": "Mathematician", "pronouns": True},
            "social": None,
        }
    )


def test_initialize_from_profile():
    dirty = settings_form.set_is_dirty(settings_form.SettingsFormState(), True)

    state = settings_form.initialize_from_profile(dirty, loaded_profile())

    assert state.user_info.username == "ada"
    assert state.user_info.name == ""
    assert state.profile_info.bio == "Mathematician"
    assert state.profile_info.pronouns is True
    assert state.social_info.github == ""
    assert state.ui.is_dirty is False


def test_initialize_without_profile_keeps_state():
    state = settings_form.set_active_tab(settings_form.SettingsFormState(), "2")

    assert settings_form.initialize_from_profile(state, None) is state


def test_updates_mark_dirty():
    state = settings_form.update_social_info(settings_form.SettingsFormState(), "github", "https://github.com/ada")

    assert state.social_info.github == "https://github.com/ada"
    assert state.ui.is_dirty is True


def test_prepare_update_data_drops_empty_values():
    state = settings_form.initialize_from_profile(settings_form.SettingsFormState(), loaded_profile())
    state = settings_form.update_profile_info(state, "location", "London")

    request = settings_form.prepare_update_data(state)

    assert request.user.model_dump(exclude_unset=True) == {"username": "ada", "email": "ada@example.com"}
    assert request.profile.model_dump(exclude_unset=True) == {
        "bio": "Mathematician",
        "location": "London",
        "pronouns": True,
    }
    assert request.social.model_dump(exclude_unset=True) == {}
