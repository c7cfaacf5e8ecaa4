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

from common import house_design_utils
from common.error_handling import GenerationError
from common.house_design_utils import download_filename, request_house_designs
from conftest import FakeResponse
from models.house_design import Preferences


def test_request_house_designs_posts_preferences(monkeypatch):
    calls = []

    def fake_post(url, json=None):
        calls.append((url, json))
        return FakeResponse(
            200,
            {
                "designs": [
                    {"view": "floor_plan", "imageUrl": "https://cdn.example.com/0.png"},
                    {"view": "side_view", "imageUrl": "https://cdn.example.com/4.png"},
                ]
            },
        )

    monkeypatch.setattr(house_design_utils.requests, "post", fake_post)
    prefs = Preferences(color_scheme="Warm Earth", special_features=["vastu"])

    designs = request_house_designs(prefs)

    assert [d.view for d in designs] == ["floor_plan", "side_view"]
    assert designs[1].image_url == "https://cdn.example.com/4.png"
    url, body = calls[0]
    assert url.endswith("/api/house_design/generate")
    assert body == {
        "preferences": {
            "architecturalStyle": "Modern Minimalist",
            "roomLayout": "Open floor plan",
            "colorScheme": "Warm Earth",
            "specialFeatures": ["Follow Vastu Shastra principles for positive energy"],
        }
    }


def test_request_house_designs_raises_on_error(monkeypatch):
    monkeypatch.setattr(
        house_design_utils.requests,
        "post",
        lambda url, json=None: FakeResponse(
            500, {"error": "Failed to generate house design.", "errorType": "generation"}
        ),
    )

    with pytest.raises(GenerationError, match="Failed to generate house design."):
        request_house_designs(Preferences())


def test_request_house_designs_handles_non_json_error(monkeypatch):
    monkeypatch.setattr(
        house_design_utils.requests,
        "post",
        lambda url, json=None: FakeResponse(502, payload=None, text="Bad Gateway"),
    )

    with pytest.raises(GenerationError, match="Bad Gateway"):
        request_house_designs(Preferences())


def test_download_filename_is_named_by_view():
    assert download_filename("floor_plan") == "house-design-floor_plan.png"
