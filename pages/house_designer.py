# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""House Designer page."""

import uuid

import mesop as me

from common.analytics import get_logger, log_page_view, track_click
from common.house_design_utils import request_house_designs
from components.house_design.color_scheme_selector import color_scheme_selector
from components.house_design.design_results import design_results
from components.house_design.feature_selector import feature_selector
from components.house_design.style_selector import style_selector
from config.house_design_options import get_special_feature
from state.house_design_state import (
    PageState,
    current_preferences,
    reset_preferences,
    select_color_scheme,
    select_style,
    toggle_special_feature,
)
from state.state import AppState

logger = get_logger(__name__)

PAGE_NAME = "house_designer"


def on_load(e: me.LoadEvent):
    app_state = me.state(AppState)
    app_state.current_page = PAGE_NAME
    if not app_state.session_id:
        app_state.session_id = str(uuid.uuid4())
    log_page_view(PAGE_NAME, session_id=app_state.session_id)


@me.page(
    path="/",
    title="AI House Designer",
    on_load=on_load,
    security_policy=me.SecurityPolicy(
        allowed_script_srcs=["https://cdn.jsdelivr.net"],
    ),
)
def house_designer_page():
    state = me.state(PageState)
    with me.box(
        style=me.Style(
            background=me.theme_var("background"),
            min_height="100vh",
            padding=me.Padding.symmetric(vertical=24, horizontal=32),
        )
    ):
        header()
        if state.show_results:
            design_results(
                designs=state.designs,
                architectural_style=state.architectural_style,
                color_scheme=state.color_scheme,
                special_features=state.special_features,
                on_back=on_back_click,
                on_new_design=on_new_design_click,
            )
        else:
            page_content()
        snackbar()


def header():
    with me.box(
        style=me.Style(
            display="flex",
            flex_direction="row",
            align_items="center",
            gap=12,
            padding=me.Padding(bottom=16),
            margin=me.Margin(bottom=24),
            border=me.Border(
                bottom=me.BorderSide(width=1, style="solid", color=me.theme_var("outline-variant"))
            ),
        )
    ):
        me.icon("home", style=me.Style(color=me.theme_var("primary"), font_size=32))
        me.text("AI House Designer", type="headline-4")


def page_content():
    state = me.state(PageState)

    with me.box(style=me.Style(text_align="center", margin=me.Margin(bottom=32))):
        me.text("Design Your Dream Home", type="headline-3", style=me.Style(color=me.theme_var("primary")))
        me.text(
            "Tell us your preferences and our AI will create the perfect design for you",
            style=me.Style(color=me.theme_var("on-surface-variant")),
        )

    with me.box(
        style=me.Style(
            display="grid",
            grid_template_columns="1fr 1fr",
            gap=32,
            max_width=1200,
            margin=me.Margin.symmetric(horizontal="auto"),
        )
    ):
        with me.box(style=me.Style(display="flex", flex_direction="column", gap=24)):
            me.text("Design Preferences", type="headline-6")
            me.text("Choose your preferred style and layout", style=me.Style(font_size=14))
            style_selector(
                selected_style=state.architectural_style,
                on_select=on_style_click,
            )
            color_scheme_selector(
                selected_scheme=state.color_scheme,
                on_select=on_color_scheme_click,
            )

        with me.box(style=me.Style(display="flex", flex_direction="column", gap=24)):
            me.text("Special Features", type="headline-6")
            me.text("Add special elements to your design", style=me.Style(font_size=14))
            feature_selector(
                selected_features=state.special_features,
                on_toggle=on_feature_toggle,
            )
            with me.content_button(
                on_click=on_generate_click,
                type="flat",
                disabled=state.is_generating,
                style=me.Style(width="100%", padding=me.Padding.all(16)),
            ):
                with me.box(
                    style=me.Style(display="flex", flex_direction="row", gap=8, justify_content="center", align_items="center")
                ):
                    if state.is_generating:
                        me.progress_spinner(diameter=20)
                        me.text("Generating AI Design...")
                    else:
                        me.icon("auto_awesome")
                        me.text("Generate AI Design")


def snackbar():
    state = me.state(PageState)
    if not state.show_snackbar:
        return
    with me.box(
        style=me.Style(
            position="fixed",
            bottom=24,
            right=24,
            padding=me.Padding.all(16),
            border_radius=8,
            display="flex",
            flex_direction="row",
            gap=16,
            align_items="center",
            background=me.theme_var("error-container")
            if state.snackbar_is_error
            else me.theme_var("inverse-surface"),
            color=me.theme_var("on-error-container")
            if state.snackbar_is_error
            else me.theme_var("inverse-on-surface"),
        )
    ):
        with me.box():
            me.text(state.snackbar_title, style=me.Style(font_weight="bold"))
            me.text(state.snackbar_message)
        with me.content_button(on_click=on_snackbar_close, type="icon"):
            me.icon("close")


def _show_snackbar(state: PageState, title: str, message: str, is_error: bool = False):
    state.show_snackbar = True
    state.snackbar_title = title
    state.snackbar_message = message
    state.snackbar_is_error = is_error


# --- Event Handlers ---


def on_style_click(e: me.ClickEvent):
    select_style(me.state(PageState), e.key)


def on_color_scheme_click(e: me.ClickEvent):
    select_color_scheme(me.state(PageState), e.key)


def on_feature_toggle(e: me.CheckboxChangeEvent):
    feature = get_special_feature(e.key)
    if feature:
        toggle_special_feature(me.state(PageState), feature.label)


@track_click(element_id="house_designer_generate_button")
def on_generate_click(e: me.ClickEvent):
    """Generates all house views for the current preferences."""
    state = me.state(PageState)
    if state.is_generating:
        return

    state.is_generating = True
    state.show_snackbar = False
    yield

    try:
        designs = request_house_designs(current_preferences(state))
        state.designs = [d.model_dump(by_alias=True) for d in designs]
        state.show_results = True
        _show_snackbar(state, "Design Generated!", "Your AI house design is ready to view.")
    except Exception as ex:
        logger.error(f"Error generating design: {ex}")
        _show_snackbar(
            state,
            "Generation Failed",
            "Failed to generate house design. Please try again.",
            is_error=True,
        )
    finally:
        state.is_generating = False
        yield


@track_click(element_id="house_designer_back_button")
def on_back_click(e: me.ClickEvent):
    state = me.state(PageState)
    state.show_results = False
    state.show_snackbar = False


@track_click(element_id="house_designer_new_design_button")
def on_new_design_click(e: me.ClickEvent):
    state = me.state(PageState)
    reset_preferences(state)
    state.show_snackbar = False


def on_snackbar_close(e: me.ClickEvent):
    me.state(PageState).show_snackbar = False
