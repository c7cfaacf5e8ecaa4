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

"""Turns house design preferences into per-view image generation prompts."""

from typing import Callable, List

from config.house_design_options import HOUSE_VIEWS, is_feature_selected
from models.house_design import Preferences, ViewRequest


def _features(preferences: Preferences) -> str:
    return ", ".join(preferences.special_features)


def _feature_clause(preferences: Preferences, template: str) -> str:
    if not preferences.special_features:
        return ""
    return template.format(features=_features(preferences))


def _floor_plan(p: Preferences) -> List[str]:
    return [
        f"Create a detailed architectural floor plan view of a {p.architectural_style} house with {p.room_layout} layout.",
        f"Use {p.color_scheme} color scheme. Include room labels, dimensions, and furniture placement.",
        _feature_clause(p, "Special features: {features}."),
        "Professional architectural drawing style with clean lines, measurements, and annotations. Top-down view showing all rooms and spaces.",
    ]


def _front_view(p: Preferences) -> List[str]:
    return [
        f"Create a detailed architectural front elevation view of a {p.architectural_style} house.",
        f"Use {p.color_scheme} color scheme with appropriate exterior materials and finishes.",
        _feature_clause(p, "Show {features}."),
        "Professional architectural rendering with proper scale, details of windows, doors, roof, and landscaping. Clear, technical drawing style.",
    ]


def _back_view(p: Preferences) -> List[str]:
    return [
        f"Create a detailed architectural back elevation view of a {p.architectural_style} house.",
        f"Use {p.color_scheme} color scheme. Show the rear facade with backyard elements.",
        _feature_clause(p, "Include {features}."),
        "Professional architectural rendering showing windows, doors, outdoor spaces, and any patio or deck areas.",
    ]


def _top_view(p: Preferences) -> List[str]:
    solar = is_feature_selected("solar", p.special_features)
    return [
        f"Create a detailed architectural top/roof view of a {p.architectural_style} house.",
        f"Show roof structure, materials, and design in {p.color_scheme} style.",
        "Include solar panel placement on the roof." if solar else "",
        "Professional architectural drawing showing roof pitch, chimneys, vents, and overall footprint. Bird's eye perspective.",
    ]


def _side_view(p: Preferences) -> List[str]:
    return [
        f"Create a detailed architectural side elevation view of a {p.architectural_style} house.",
        f"Use {p.color_scheme} color scheme showing the profile of the building.",
        _feature_clause(p, "Incorporate {features}."),
        "Professional architectural rendering with proper proportions, height details, and side landscaping elements.",
    ]


VIEW_TEMPLATES: dict[str, Callable[[Preferences], List[str]]] = {
    "floor_plan": _floor_plan,
    "front_view": _front_view,
    "back_view": _back_view,
    "top_view": _top_view,
    "side_view": _side_view,
}


def build_view_prompt(preferences: Preferences, view_name: str) -> str:
    """Builds the generation prompt for one view.

    Args:
        preferences: The user's design preferences.
        view_name: One of the names in HOUSE_VIEWS.

    Returns:
        The prompt text. Clauses that do not apply are left out entirely.

    Raises:
        ValueError: If the view name is not a known view.
    """
    template = VIEW_TEMPLATES.get(view_name)
    if template is None:
        raise ValueError(f"Unknown house view: {view_name}")
    return " ".join(clause for clause in template(preferences) if clause)


def build_view_requests(preferences: Preferences) -> List[ViewRequest]:
    """One request per view, in generation order."""
    return [
        ViewRequest(name=view.name, prompt=build_view_prompt(preferences, view.name))
        for view in HOUSE_VIEWS
    ]
