"""
Issue Report Wizard State

Per-session state of the multi-step technical issue form.

State is an immutable ``IssueWizardState``; every operation is a pure
function returning a new state, so the caller owns where it lives (one
instance per browser session) and when it is thrown away:

    state = IssueWizardState()
    state = set_form_data(state, 0, {"issue_type": "DEVICE", "severity": "HIGH"})
    state = set_current_step(state, 1)
    state = set_form_data(state, 1, {"title": "Sensor offline", ...})
    result = submission(state)          # ValidationResult[TechnicalIssueCreate]
    state = reset(state) if result.ok else state

Steps are 0-indexed and not guarded: any step may be set at any time. The
step passed to set_form_data is informational only.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Optional

from zelene.shared.schemas.queries import FileUpload, TechnicalIssueCreate
from zelene.shared.schemas.validation import ValidationResult, validate


FORM_FIELDS = (
    "device_id",
    "issue_type",
    "severity",
    "title",
    "description",
    "steps_to_reproduce",
    "expected_behavior",
)


@dataclass(frozen=True)
class IssueWizardState:
    """Form fields collected so far plus wizard UI state."""

    device_id: Optional[str] = None
    issue_type: Optional[str] = None
    severity: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    steps_to_reproduce: Optional[str] = None
    expected_behavior: Optional[str] = None

    current_step: int = 0
    file_list: tuple[FileUpload, ...] = field(default_factory=tuple)
    is_submitting: bool = False


def set_form_data(state: IssueWizardState, step: int, data: Mapping[str, Any]) -> IssueWizardState:
    """
    Merge fields entered on a step into the state.

    Raises:
        ValueError: If data names something other than a form field
    """
    unknown = set(data) - set(FORM_FIELDS)
    if unknown:
        raise ValueError(f"Unknown form fields: {sorted(unknown)}")
    return replace(state, **dict(data))


def set_current_step(state: IssueWizardState, step: int) -> IssueWizardState:
    return replace(state, current_step=step)


def set_file_list(state: IssueWizardState, files: list[FileUpload]) -> IssueWizardState:
    return replace(state, file_list=tuple(files))


def set_is_submitting(state: IssueWizardState, is_submitting: bool) -> IssueWizardState:
    return replace(state, is_submitting=is_submitting)


def reset(state: Optional[IssueWizardState] = None) -> IssueWizardState:
    """Fresh state, as after a completed submission."""
    return IssueWizardState()


def get_form_data(state: IssueWizardState) -> dict[str, Any]:
    """Domain fields only; UI state (step, files, submitting) is left out."""
    return {name: getattr(state, name) for name in FORM_FIELDS}


def submission(state: IssueWizardState) -> ValidationResult[TechnicalIssueCreate]:
    """Validate the collected data together with the selected files."""
    payload = {name: value for name, value in get_form_data(state).items() if value is not None}
    payload["attachments"] = [upload.model_dump() for upload in state.file_list]
    return validate(TechnicalIssueCreate, payload)

