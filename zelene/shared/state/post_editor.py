"""
Post Editor State

Per-session state of the post composer: draft content, the tag chips
entered so far, and editor UI flags.

Tags are normalized on entry with the same rules as the tag schema, so
"#Machine Learning" and "machine-learning" end up as one chip.
"""

from dataclasses import dataclass, replace
from typing import Literal, Optional

from zelene.shared.schemas.validation import normalize_tag_name


Suggestion = Optional[Literal["title", "tags", "content"]]


@dataclass(frozen=True)
class PostEditorState:
    title: str = ""
    content: str = ""
    tags: tuple[str, ...] = ()
    current_tag: str = ""

    is_preview: bool = False
    selection_start: int = 0
    selection_end: int = 0
    active_suggestion: Suggestion = None


def set_title(state: PostEditorState, title: str) -> PostEditorState:
    return replace(state, title=title)


def set_content(state: PostEditorState, content: str) -> PostEditorState:
    return replace(state, content=content)


def set_current_tag(state: PostEditorState, current_tag: str) -> PostEditorState:
    return replace(state, current_tag=current_tag)


def add_tag(state: PostEditorState, tag: str) -> PostEditorState:
    """
    Add a tag chip and clear the tag input.

    Blank input and tags already present only clear the input.
    """
    name = normalize_tag_name(tag)
    tags = state.tags
    if name and name not in tags:
        tags = tags + (name,)
    return replace(state, tags=tags, current_tag="")


def remove_tag(state: PostEditorState, tag: str) -> PostEditorState:
    name = normalize_tag_name(tag)
    return replace(state, tags=tuple(t for t in state.tags if t != name))


def set_selection_range(state: PostEditorState, start: int, end: int) -> PostEditorState:
    return replace(state, selection_start=start, selection_end=end)


def toggle_preview(state: PostEditorState) -> PostEditorState:
    return replace(state, is_preview=not state.is_preview)


def set_active_suggestion(state: PostEditorState, suggestion: Suggestion) -> PostEditorState:
    return replace(state, active_suggestion=suggestion)


def reset(state: Optional[PostEditorState] = None) -> PostEditorState:
    return PostEditorState()
