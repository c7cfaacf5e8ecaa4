"""
Gallery of generated house views.
"""

from typing import Callable

import mesop as me

from common.house_design_utils import download_filename
from components.house_design.download_button import download_button
from config.house_design_options import get_view_label


def _chip(label: str, outlined: bool = False):
    me.text(
        label,
        style=me.Style(
            padding=me.Padding.symmetric(vertical=6, horizontal=14),
            border_radius=16,
            font_size=14,
            background="transparent" if outlined else me.theme_var("secondary-container"),
            border=me.Border.all(
                me.BorderSide(width=1, style="solid", color=me.theme_var("outline"))
            )
            if outlined
            else None,
        ),
    )


@me.component
def design_results(
    designs: list[dict],
    architectural_style: str,
    color_scheme: str,
    special_features: list[str],
    on_back: Callable,
    on_new_design: Callable,
):
    """
    Design specifications summary, then one card per generated view, each
    with its label and a download button.
    """
    with me.box(style=me.Style(display="flex", flex_direction="column", gap=24, width="100%")):
        with me.box(
            style=me.Style(
                display="flex",
                flex_direction="row",
                justify_content="space-between",
                align_items="center",
            )
        ):
            with me.content_button(on_click=on_back, type="flat"):
                with me.box(style=me.Style(display="flex", flex_direction="row", gap=4, align_items="center")):
                    me.icon("arrow_back")
                    me.text("Back to Designer")
            me.text("Your AI Generated Design", type="headline-5")

        with me.box(
            style=me.Style(
                padding=me.Padding.all(24),
                border_radius=12,
                background=me.theme_var("surface-container-low"),
            )
        ):
            me.text("Design Specifications", type="headline-6")
            with me.box(style=me.Style(display="flex", flex_wrap="wrap", gap=12, margin=me.Margin(top=12))):
                _chip(architectural_style)
                _chip(color_scheme)
                for feature in special_features:
                    _chip(feature, outlined=True)

        if not designs:
            me.text("No images were returned for this design. Please try again.")

        with me.box(
            style=me.Style(
                display="grid",
                grid_template_columns="repeat(auto-fill, minmax(420px, 1fr))",
                gap=24,
            )
        ):
            for design in designs:
                view = design["view"]
                with me.box(
                    key=view,
                    style=me.Style(
                        position="relative",
                        border_radius=12,
                        overflow="hidden",
                        background=me.theme_var("surface-container"),
                    ),
                ):
                    me.image(
                        src=design["imageUrl"],
                        alt=get_view_label(view),
                        style=me.Style(width="100%", height="auto", object_fit="cover"),
                    )
                    with me.box(style=me.Style(position="absolute", top=16, left=16)):
                        me.text(
                            get_view_label(view),
                            style=me.Style(
                                padding=me.Padding.symmetric(vertical=6, horizontal=14),
                                border_radius=16,
                                background=me.theme_var("primary"),
                                color=me.theme_var("on-primary"),
                            ),
                        )
                    with me.box(style=me.Style(position="absolute", top=16, right=16)):
                        download_button(
                            key=f"download_{view}",
                            image_url=design["imageUrl"],
                            filename=download_filename(view),
                        )

        with me.box(style=me.Style(display="flex", justify_content="center")):
            me.button("Create New Design", on_click=on_new_design, type="stroked")
