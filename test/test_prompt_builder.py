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

import pytest

from config.house_design_options import HOUSE_VIEWS
from models.house_design import Preferences
from models.prompt_builder import build_view_prompt, build_view_requests

VIEW_NAMES = [view.name for view in HOUSE_VIEWS]
SOLAR_CLAUSE = "Include solar panel placement on the roof."


@pytest.mark.parametrize("view_name", VIEW_NAMES)
def test_prompt_is_deterministic(view_name):
    prefs = Preferences(
        architectural_style="Traditional Indian",
        color_scheme="Warm Earth",
        special_features=["Natural ventilation - Energy-efficient cooling"],
    )
    assert build_view_prompt(prefs, view_name) == build_view_prompt(prefs, view_name)


@pytest.mark.parametrize("view_name", VIEW_NAMES)
def test_no_feature_clause_without_features(preferences, view_name):
    prompt = build_view_prompt(preferences, view_name)

    assert "Special features:" not in prompt
    assert SOLAR_CLAUSE not in prompt
    assert "  " not in prompt
    assert prompt == prompt.strip()


@pytest.mark.parametrize("view_name", VIEW_NAMES)
def test_prompt_names_style_and_color_scheme(preferences, view_name):
    prompt = build_view_prompt(preferences, view_name)

    assert "Modern Minimalist" in prompt
    assert "Cool Blues" in prompt


def test_floor_plan_lists_features_and_layout():
    prefs = Preferences(
        special_features=[
            "Follow Vastu Shastra principles for positive energy",
            "Rainwater harvesting - Water conservation system",
        ]
    )

    prompt = build_view_prompt(prefs, "floor_plan")

    assert prompt.startswith(
        "Create a detailed architectural floor plan view of a Modern Minimalist "
        "house with Open floor plan layout."
    )
    assert (
        "Special features: Follow Vastu Shastra principles for positive energy, "
        "Rainwater harvesting - Water conservation system." in prompt
    )
    assert "Top-down view" in prompt


@pytest.mark.parametrize(
    "view_name, clause",
    [
        ("front_view", "Show Natural ventilation - Energy-efficient cooling."),
        ("back_view", "Include Natural ventilation - Energy-efficient cooling."),
        ("side_view", "Incorporate Natural ventilation - Energy-efficient cooling."),
    ],
)
def test_elevations_mention_features(view_name, clause):
    prefs = Preferences(special_features=["Natural ventilation - Energy-efficient cooling"])

    assert clause in build_view_prompt(prefs, view_name)


def test_solar_clause_only_in_top_view():
    prefs = Preferences(special_features=["Solar panels - Renewable energy system"])

    for view_name in VIEW_NAMES:
        prompt = build_view_prompt(prefs, view_name)
        if view_name == "top_view":
            assert SOLAR_CLAUSE in prompt
        else:
            assert SOLAR_CLAUSE not in prompt


@pytest.mark.parametrize("label", ["solar", "Solar panels", "solar panels - renewable energy system"])
def test_solar_feature_matches_id_and_short_name(label):
    prefs = Preferences(special_features=[label])

    assert SOLAR_CLAUSE in build_view_prompt(prefs, "top_view")


def test_top_view_ignores_other_features():
    prefs = Preferences(special_features=["Rainwater harvesting - Water conservation system"])

    prompt = build_view_prompt(prefs, "top_view")

    assert "Rainwater" not in prompt
    assert SOLAR_CLAUSE not in prompt


def test_unknown_view_raises():
    with pytest.raises(ValueError):
        build_view_prompt(Preferences(), "basement_view")


def test_view_requests_follow_fixed_order(preferences):
    requests = build_view_requests(preferences)

    assert [r.name for r in requests] == [
        "floor_plan",
        "front_view",
        "back_view",
        "top_view",
        "side_view",
    ]
    assert all(r.prompt == build_view_prompt(preferences, r.name) for r in requests)


def test_feature_named_twice_is_listed_once():
    prefs = Preferences(special_features=["solar", "Solar panels - Renewable energy system"])

    prompt = build_view_prompt(prefs, "front_view")

    assert "Show Solar panels - Renewable energy system." in prompt
    assert "Show solar," not in prompt


def test_blank_room_layout_keeps_single_spacing():
    prefs = Preferences.model_validate({"roomLayout": "  "})

    prompt = build_view_prompt(prefs, "floor_plan")

    assert "with Open floor plan layout." in prompt
    assert "  " not in prompt
