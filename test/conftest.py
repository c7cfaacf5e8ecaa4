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

"""Shared fakes for the house design tests."""

import os
import sys

import pytest

# Add the project root to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from models.house_design import Preferences
from models.image_generation import ImageGenerator

NO_IMAGE = object()


class FakeImageGenerator(ImageGenerator):
    """Records prompts; outcomes maps a 1-based call number to an exception or NO_IMAGE."""

    model_name = "fake-image-model"

    def __init__(self, outcomes: dict | None = None):
        self.outcomes = outcomes or {}
        self.prompts: list[str] = []

    def generate(self, prompt):
        self.prompts.append(prompt)
        outcome = self.outcomes.get(len(self.prompts))
        if isinstance(outcome, Exception):
            raise outcome
        if outcome is NO_IMAGE:
            return None
        return f"https://images.example.com/{len(self.prompts)}.png"


class FakeResponse:
    """Just enough of requests.Response for the code under test."""

    def __init__(self, status_code: int = 200, payload=None, text: str = ""):
        self.status_code = status_code
        self.ok = 200 <= status_code < 300
        self._payload = payload
        self.text = text

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON body")
        return self._payload


def image_payload(url: str) -> dict:
    return {
        "id": "gen-123",
        "choices": [
            {
                "message": {
                    "role": "assistant",
                    "content": "Here is your design.",
                    "images": [{"type": "image_url", "image_url": {"url": url}}],
                }
            }
        ],
    }


@pytest.fixture
def preferences():
    return Preferences(
        architectural_style="Modern Minimalist",
        color_scheme="Cool Blues",
        special_features=[],
    )
