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

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class ArchitecturalStyleOption:
    """An architectural style the user can pick."""

    name: str
    description: str
    icon: str  # Material icon name used by the style card


@dataclass(frozen=True)
class ColorSchemeOption:
    """A named palette; the four colors are for display only."""

    name: str
    colors: tuple[str, str, str, str]


@dataclass(frozen=True)
class SpecialFeatureOption:
    """An optional feature, stored in preferences by its label."""

    id: str
    label: str

    @property
    def short_name(self) -> str:
        # "Solar panels - Renewable energy system" -> "Solar panels"
        return self.label.split(" - ")[0].strip()

    def matches(self, selected_label: str) -> bool:
        candidate = selected_label.strip().lower()
        return candidate in (
            self.id.lower(),
            self.label.lower(),
            self.short_name.lower(),
        )


@dataclass(frozen=True)
class HouseView:
    """One of the fixed architectural views generated for every design."""

    name: str
    label: str


ARCHITECTURAL_STYLES: List[ArchitecturalStyleOption] = [
    ArchitecturalStyleOption(
        name="Modern Minimalist",
        description="Clean lines, open spaces, neutral colors",
        icon="apartment",
    ),
    ArchitecturalStyleOption(
        name="Traditional Indian",
        description="Classic architecture, warm colors, cultural elements",
        icon="home",
    ),
    ArchitecturalStyleOption(
        name="Luxury Contemporary",
        description="Premium finishes, sophisticated design, high-end materials",
        icon="auto_awesome",
    ),
    ArchitecturalStyleOption(
        name="Eco-Friendly",
        description="Sustainable materials, green technology, natural lighting",
        icon="eco",
    ),
]

COLOR_SCHEMES: List[ColorSchemeOption] = [
    ColorSchemeOption(
        name="Neutral Elegance",
        colors=("#f5f5f0", "#e8e8e0", "#d1d1c8", "#b8b8a8"),
    ),
    ColorSchemeOption(
        name="Warm Earth",
        colors=("#f4e4d7", "#e8b882", "#d4753e", "#8b4513"),
    ),
    ColorSchemeOption(
        name="Cool Blues",
        colors=("#e3f2fd", "#90caf9", "#42a5f5", "#1e88e5"),
    ),
    ColorSchemeOption(
        name="Vibrant Accent",
        colors=("#fff8e1", "#ffecb3", "#ff6f00", "#1e88e5"),
    ),
]

SPECIAL_FEATURES: List[SpecialFeatureOption] = [
    SpecialFeatureOption(
        id="vastu", label="Follow Vastu Shastra principles for positive energy"
    ),
    SpecialFeatureOption(id="solar", label="Solar panels - Renewable energy system"),
    SpecialFeatureOption(
        id="rainwater", label="Rainwater harvesting - Water conservation system"
    ),
    SpecialFeatureOption(
        id="ventilation", label="Natural ventilation - Energy-efficient cooling"
    ),
]

# Generation order is significant.
HOUSE_VIEWS: List[HouseView] = [
    HouseView(name="floor_plan", label="Floor Plan"),
    HouseView(name="front_view", label="Front View"),
    HouseView(name="back_view", label="Back View"),
    HouseView(name="top_view", label="Top View"),
    HouseView(name="side_view", label="Side View"),
]

DEFAULT_ARCHITECTURAL_STYLE = "Modern Minimalist"
DEFAULT_ROOM_LAYOUT = "Open floor plan"
DEFAULT_COLOR_SCHEME = "Neutral Elegance"


def get_color_scheme(name: str) -> Optional[ColorSchemeOption]:
    for scheme in COLOR_SCHEMES:
        if scheme.name == name:
            return scheme
    return None


def get_special_feature(feature_id: str) -> Optional[SpecialFeatureOption]:
    for feature in SPECIAL_FEATURES:
        if feature.id == feature_id:
            return feature
    return None


def get_view_label(view_name: str) -> str:
    """Human-readable label for a view, falling back to the raw name."""
    for view in HOUSE_VIEWS:
        if view.name == view_name:
            return view.label
    return view_name


def is_feature_selected(feature_id: str, selected_labels: List[str]) -> bool:
    feature = get_special_feature(feature_id)
    if not feature:
        return False
    return any(feature.matches(label) for label in selected_labels)
