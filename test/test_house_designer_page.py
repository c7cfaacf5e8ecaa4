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

from types import SimpleNamespace

import pytest

from models.house_design import DesignResult
from pages import house_designer
from state.house_design_state import PageState
from state.state import AppState

CLICK = SimpleNamespace(key="")


@pytest.fixture
def page_state(monkeypatch):
    states = {PageState: PageState(), AppState: AppState()}
    monkeypatch.setattr(house_designer.me, "state", lambda state_class: states[state_class])
    return states[PageState]


def test_second_click_while_generating_is_ignored_and_failure_collapses(monkeypatch, page_state):
    calls = []

    def failing_request(preferences):
        calls.append(preferences)
        raise RuntimeError("Failed to generate house design.")

    monkeypatch.setattr(house_designer, "request_house_designs", failing_request)

    first = house_designer.on_generate_click(CLICK)
    next(first)
    assert page_state.is_generating

    list(house_designer.on_generate_click(CLICK))
    assert calls == []

    list(first)

    assert len(calls) == 1
    assert page_state.is_generating is False
    assert page_state.show_results is False
    assert page_state.snackbar_is_error
    assert page_state.snackbar_title == "Generation Failed"
    assert page_state.snackbar_message == "Failed to generate house design. Please try again."


def test_successful_generation_stores_designs_and_shows_results(monkeypatch, page_state):
    page_state.architectural_style = "Eco-Friendly"
    requested = []

    def fake_request(preferences):
        requested.append(preferences)
        return [
            DesignResult(view="floor_plan", image_url="https://cdn.example.com/1.png"),
            DesignResult(view="top_view", image_url="https://cdn.example.com/4.png"),
        ]

    monkeypatch.setattr(house_designer, "request_house_designs", fake_request)

    list(house_designer.on_generate_click(CLICK))

    assert requested[0].architectural_style == "Eco-Friendly"
    assert page_state.designs == [
        {"view": "floor_plan", "imageUrl": "https://cdn.example.com/1.png"},
        {"view": "top_view", "imageUrl": "https://cdn.example.com/4.png"},
    ]
    assert page_state.show_results
    assert page_state.is_generating is False
    assert page_state.snackbar_title == "Design Generated!"
    assert not page_state.snackbar_is_error


def test_create_new_design_resets_preferences(page_state):
    page_state.architectural_style = "Luxury Contemporary"
    page_state.special_features = ["Solar panels - Renewable energy system"]
    page_state.show_results = True

    house_designer.on_new_design_click(CLICK)

    assert page_state.architectural_style == "Modern Minimalist"
    assert page_state.special_features == []
    assert page_state.show_results is False
