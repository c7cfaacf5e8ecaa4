"""
Component for choosing the color scheme.
"""

from typing import Callable

import mesop as me

from components.house_design.style_selector import option_card_style
from config.house_design_options import COLOR_SCHEMES


@me.component
def color_scheme_selector(selected_scheme: str, on_select: Callable):
    with me.box(style=me.Style(display="flex", flex_direction="column", gap=8)):
        me.text("Color Scheme", type="subtitle-1")
        for scheme in COLOR_SCHEMES:
            with me.box(
                key=scheme.name,
                on_click=on_select,
                style=option_card_style(scheme.name == selected_scheme),
            ):
                with me.box(
                    style=me.Style(
                        display="flex",
                        flex_direction="row",
                        justify_content="space-between",
                        align_items="center",
                    )
                ):
                    me.text(scheme.name, style=me.Style(font_weight=500))
                    with me.box(style=me.Style(display="flex", flex_direction="row", gap=8)):
                        for color in scheme.colors:
                            me.box(
                                style=me.Style(
                                    width=24,
                                    height=24,
                                    border_radius="50%",
                                    background=color,
                                    border=me.Border.all(
                                        me.BorderSide(
                                            width=1,
                                            style="solid",
                                            color=me.theme_var("outline-variant"),
                                        )
                                    ),
                                )
                            )
