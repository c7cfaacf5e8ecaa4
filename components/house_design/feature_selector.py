"""
Component for toggling special features.
"""

from typing import Callable

import mesop as me

from config.house_design_options import SPECIAL_FEATURES

_SECTION_STYLE = me.Style(
    padding=me.Padding.all(16),
    border_radius=12,
    background=me.theme_var("secondary-container"),
    display="flex",
    flex_direction="column",
    gap=8,
)


@me.component
def feature_selector(selected_features: list[str], on_toggle: Callable):
    """
    Vastu compliance first, then the eco-friendly features.
    Checkbox keys are feature ids; the handler maps them back to labels.
    """
    vastu, *eco_features = SPECIAL_FEATURES

    with me.box(style=me.Style(display="flex", flex_direction="column", gap=16)):
        with me.box(style=_SECTION_STYLE):
            me.checkbox(
                label="Vastu Compliance",
                key=vastu.id,
                checked=vastu.label in selected_features,
                on_change=on_toggle,
            )
            me.text(vastu.label, style=me.Style(font_size=13, margin=me.Margin(left=40)))

        with me.box(style=_SECTION_STYLE):
            with me.box(style=me.Style(display="flex", flex_direction="row", gap=8, align_items="center")):
                me.icon("eco")
                me.text("Eco-Friendly Features", style=me.Style(font_weight="bold"))
            for feature in eco_features:
                me.checkbox(
                    label=feature.label,
                    key=feature.id,
                    checked=feature.label in selected_features,
                    on_change=on_toggle,
                )
