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

"""Data structures for the House Design feature.

These schemas are shared by the UI, which builds the request, and by the
FastAPI endpoint, which validates it. Field names are camelCase on the wire.
"""

from dataclasses import dataclass
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from config.house_design_options import (
    DEFAULT_ARCHITECTURAL_STYLE,
    DEFAULT_COLOR_SCHEME,
    DEFAULT_ROOM_LAYOUT,
    SPECIAL_FEATURES,
)

ArchitecturalStyle = Literal[
    "Modern Minimalist",
    "Traditional Indian",
    "Luxury Contemporary",
    "Eco-Friendly",
]

ColorScheme = Literal[
    "Neutral Elegance",
    "Warm Earth",
    "Cool Blues",
    "Vibrant Accent",
]

ViewName = Literal["floor_plan", "front_view", "back_view", "top_view", "side_view"]


class Preferences(BaseModel):
    """The user's choices for a single design request."""

    model_config = ConfigDict(populate_by_name=True)

    architectural_style: ArchitecturalStyle = Field(
        DEFAULT_ARCHITECTURAL_STYLE, alias="architecturalStyle"
    )
    room_layout: str = Field(DEFAULT_ROOM_LAYOUT, alias="roomLayout")
    color_scheme: ColorScheme = Field(DEFAULT_COLOR_SCHEME, alias="colorScheme")
    special_features: List[str] = Field(
        default_factory=list, alias="specialFeatures"
    )

    @field_validator("room_layout")
    @classmethod
    def _default_blank_layout(cls, value: str) -> str:
        return value.strip() or DEFAULT_ROOM_LAYOUT

    @field_validator("special_features")
    @classmethod
    def _drop_duplicate_features(cls, value: List[str]) -> List[str]:
        """Stores catalog features by their label, each at most once."""
        seen = []
        for selected in value:
            feature = next((f for f in SPECIAL_FEATURES if f.matches(selected)), None)
            label = feature.label if feature else selected.strip()
            if label and label not in seen:
                seen.append(label)
        return seen


@dataclass
class ViewRequest:
    name: str
    prompt: str


class DesignResult(BaseModel):
    """A generated image for one view."""

    model_config = ConfigDict(populate_by_name=True)

    view: ViewName
    image_url: str = Field(..., alias="imageUrl")


class HouseDesignRequest(BaseModel):
    preferences: Preferences


class HouseDesignResponse(BaseModel):
    designs: List[DesignResult] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    error: str
    error_type: Optional[str] = Field(None, alias="errorType")


def toggle_feature(selected: List[str], label: str) -> List[str]:
    """Returns a new feature list with `label` added, or removed if present."""
    if label in selected:
        return [f for f in selected if f != label]
    return [*selected, label]
