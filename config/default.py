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

"""Application configuration, read from the environment."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv(override=True)


@dataclass
class Default:
    """Defaults class"""

    # Generation endpoint
    GENERATION_API_KEY: str | None = os.environ.get("GENERATION_API_KEY")
    GENERATION_API_BASE_URL: str = os.environ.get(
        "GENERATION_API_BASE_URL", "https://ai.gateway.lovable.dev/v1"
    )
    GENERATION_MODEL: str = os.environ.get(
        "GENERATION_MODEL", "google/gemini-2.5-flash-image-preview"
    )

    # "chat_completions" or "gemini"
    IMAGE_GENERATOR_BACKEND: str = os.environ.get(
        "IMAGE_GENERATOR_BACKEND", "chat_completions"
    )
    GEMINI_IMAGE_MODEL: str = os.environ.get(
        "GEMINI_IMAGE_MODEL", "gemini-2.5-flash-image"
    )

    # Where the UI reaches the house design API
    API_BASE_URL: str = os.environ.get("API_BASE_URL", "http://localhost:8080")

    DEBUG_MODE: bool = os.environ.get("DEBUG_MODE", "") == "true"
