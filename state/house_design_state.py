"""
State for the House Designer page.
"""

from dataclasses import field

import mesop as me

from config.house_design_options import (
    DEFAULT_ARCHITECTURAL_STYLE,
    DEFAULT_COLOR_SCHEME,
    DEFAULT_ROOM_LAYOUT,
)
from models.house_design import Preferences, toggle_feature


@me.stateclass
class PageState:
    """State for the House Designer page."""

    # pylint: disable=E3701:invalid-field-call

    architectural_style: str = DEFAULT_ARCHITECTURAL_STYLE
    room_layout: str = DEFAULT_ROOM_LAYOUT
    color_scheme: str = DEFAULT_COLOR_SCHEME
    special_features: list[str] = field(default_factory=list)

    is_generating: bool = False
    show_results: bool = False
    # [{"view": ..., "imageUrl": ...}]
    designs: list[dict] = field(default_factory=list)

    show_snackbar: bool = False
    snackbar_title: str = ""
    snackbar_message: str = ""
    snackbar_is_error: bool = False


def select_style(state: PageState, style_name: str):
    state.architectural_style = style_name


def select_color_scheme(state: PageState, scheme_name: str):
    state.color_scheme = scheme_name


def toggle_special_feature(state: PageState, label: str):
    state.special_features = toggle_feature(state.special_features, label)


def reset_preferences(state: PageState):
    """Discards the current choices and any results."""
    state.architectural_style = DEFAULT_ARCHITECTURAL_STYLE
    state.room_layout = DEFAULT_ROOM_LAYOUT
    state.color_scheme = DEFAULT_COLOR_SCHEME
    state.special_features = []
    state.designs = []
    state.show_results = False


def current_preferences(state: PageState) -> Preferences:
    return Preferences(
        architectural_style=state.architectural_style,
        room_layout=state.room_layout,
        color_scheme=state.color_scheme,
        special_features=list(state.special_features),
    )
