"""
Client Form State

Immutable per-session state objects and pure reducers for the multi-step
forms: the issue report wizard, the post editor and the profile settings
page.

Usage:
======
    from zelene.shared.state import issue_wizard

    state = issue_wizard.IssueWizardState()
    state = issue_wizard.set_current_step(state, 1)
"""

from zelene.shared.state import issue_wizard, post_editor, settings_form

__all__ = [
    "issue_wizard",
    "post_editor",
    "settings_form",
]
