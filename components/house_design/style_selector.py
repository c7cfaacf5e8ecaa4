"""
Component for choosing the architectural style.
"""

from typing import Callable

import mesop as me

from config.house_design_options import ARCHITECTURAL_STYLES


def option_card_style(is_selected: bool) -> me.Style:
    """Card style shared by the style and color scheme choices."""
    return me.Style(
        padding=me.Padding.all(16),
        border_radius=12,
        cursor="pointer",
        border=me.Border.all(
            me.BorderSide(
                width=2 if is_selected else 1,
                style="solid",
                color=me.theme_var("primary")
                if is_selected
                else me.theme_var("outline-variant"),
            )
        ),
        background=me.theme_var("primary-container")
        if is_selected
        else me.theme_var("surface"),
    )


@me.component
def style_selector(selected_style: str, on_select: Callable):
    """
    Renders one clickable card per architectural style.
    The card key is the style name.
    """
    with me.box(style=me.Style(display="flex", flex_direction="column", gap=8)):
        me.text("Architectural Style", type="subtitle-1")
        for style in ARCHITECTURAL_STYLES:
            with me.box(
                key=style.name,
                on_click=on_select,
                style=option_card_style(style.name == selected_style),
            ):
                with me.box(style=me.Style(display="flex", flex_direction="row", gap=12)):
                    me.icon(style.icon, style=me.Style(color=me.theme_var("primary")))
                    with me.box():
                        me.text(style.name, style=me.Style(font_weight="bold"))
                        me.text(
                            style.description,
                            style=me.Style(font_size=13, color=me.theme_var("on-surface-variant")),
                        )
