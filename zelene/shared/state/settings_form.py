"""
Profile Settings Form State

Per-session state of the settings page. Every text field is held as a
string ("" when empty) so inputs are always controlled; the conversion
back to a partial update happens in prepare_update_data().

Flow:
=====
    state = initialize_from_profile(SettingsFormState(), profile)   # clean
    state = update_profile_info(state, "bio", "Hello")              # dirty
    request = prepare_update_data(state)                            # ProfileUpdateRequest

Empty strings are left out of the request, so clearing an input in the
form never overwrites the stored value. ``pronouns`` is only sent when
true.
"""

from dataclasses import asdict, dataclass, field, replace
from typing import Any, Optional

from zelene.shared.schemas.profile import ProfileResponse, ProfileUpdateRequest


@dataclass(frozen=True)
class UserInfo:
    name: str = ""
    username: str = ""
    email: str = ""


@dataclass(frozen=True)
class ProfileInfo:
    bio: str = ""
    location: str = ""
    current_learning: str = ""
    available_for: str = ""
    skills: str = ""
    current_project: str = ""
    pronouns: bool = False
    work: str = ""
    education: str = ""


@dataclass(frozen=True)
class SocialInfo:
    website: str = ""
    twitter: str = ""
    github: str = ""
    linkedin: str = ""
    facebook: str = ""


@dataclass(frozen=True)
class FormUI:
    active_tab: str = "1"
    is_loading: bool = False
    is_dirty: bool = False


@dataclass(frozen=True)
class SettingsFormState:
    user_info: UserInfo = field(default_factory=UserInfo)
    profile_info: ProfileInfo = field(default_factory=ProfileInfo)
    social_info: SocialInfo = field(default_factory=SocialInfo)
    ui: FormUI = field(default_factory=FormUI)


# ═══════════════════════════════════════════════════════════════════════════════
# UI FLAGS
# ═══════════════════════════════════════════════════════════════════════════════


def set_active_tab(state: SettingsFormState, tab: str) -> SettingsFormState:
    return replace(state, ui=replace(state.ui, active_tab=tab))


def set_is_loading(state: SettingsFormState, loading: bool) -> SettingsFormState:
    return replace(state, ui=replace(state.ui, is_loading=loading))


def set_is_dirty(state: SettingsFormState, dirty: bool) -> SettingsFormState:
    return replace(state, ui=replace(state.ui, is_dirty=dirty))


# ═══════════════════════════════════════════════════════════════════════════════
# FORM DATA
# ═══════════════════════════════════════════════════════════════════════════════


def _text(value: Optional[str]) -> str:
    return value or ""


def initialize_from_profile(state: SettingsFormState, profile: Optional[ProfileResponse]) -> SettingsFormState:
    """
    Fill the form from a loaded profile and mark it clean.

    A missing profile leaves the state unchanged.
    """
    if profile is None:
        return state

    section = profile.profile
    social = profile.social
    return SettingsFormState(
        user_info=UserInfo(
            name=_text(profile.name),
            username=_text(profile.username),
            email=_text(profile.email),
        ),
        profile_info=ProfileInfo(
            bio=_text(section.bio if section else None),
            location=_text(section.location if section else None),
            current_learning=_text(section.current_learning if section else None),
            available_for=_text(section.available_for if section else None),
            skills=_text(section.skills if section else None),
            current_project=_text(section.current_project if section else None),
            pronouns=bool(section.pronouns) if section else False,
            work=_text(section.work if section else None),
            education=_text(section.education if section else None),
        ),
        social_info=SocialInfo(
            website=_text(social.website if social else None),
            twitter=_text(social.twitter if social else None),
            github=_text(social.github if social else None),
            linkedin=_text(social.linkedin if social else None),
            facebook=_text(social.facebook if social else None),
        ),
        ui=FormUI(),
    )


def update_user_info(state: SettingsFormState, field_name: str, value: Any) -> SettingsFormState:
    """Set one account field and mark the form dirty."""
    return replace(
        state,
        user_info=replace(state.user_info, **{field_name: value or ""}),
        ui=replace(state.ui, is_dirty=True),
    )


def update_profile_info(state: SettingsFormState, field_name: str, value: Any) -> SettingsFormState:
    """Set one profile field and mark the form dirty."""
    empty: Any = False if field_name == "pronouns" else ""
    return replace(
        state,
        profile_info=replace(state.profile_info, **{field_name: value or empty}),
        ui=replace(state.ui, is_dirty=True),
    )


def update_social_info(state: SettingsFormState, field_name: str, value: Any) -> SettingsFormState:
    """Set one social link and mark the form dirty."""
    return replace(
        state,
        social_info=replace(state.social_info, **{field_name: value or ""}),
        ui=replace(state.ui, is_dirty=True),
    )


def reset(state: Optional[SettingsFormState] = None) -> SettingsFormState:
    return SettingsFormState()


def prepare_update_data(state: SettingsFormState) -> ProfileUpdateRequest:
    """
    Build the partial update request from the form.

    Falsy values (empty strings, pronouns=False) are left unset so they
    do not overwrite stored values.
    """

    def present(section: Any) -> dict[str, Any]:
        return {name: value for name, value in asdict(section).items() if value}

    return ProfileUpdateRequest.model_validate(
        {
            "user": present(state.user_info),
            "profile": present(state.profile_info),
            "social": present(state.social_info),
        }
    )
