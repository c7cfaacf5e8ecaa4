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


class GenerationError(Exception):
    """Custom exception for house design generation errors."""

    def __init__(self, message):
        self.message = message
        super().__init__(self.message)


class ViewGenerationError(GenerationError):
    """The generation endpoint rejected the request for a single view."""

    def __init__(self, view: str, status_code: int | None = None, detail: str = ""):
        self.view = view
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"Failed to generate {view}")


class EndpointError(GenerationError):
    """The generation endpoint answered with a non-success status."""

    def __init__(self, status_code: int | None, detail: str = ""):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"Generation endpoint returned status {status_code}")


class ConfigurationError(Exception):
    """Required configuration (e.g. the generation API key) is missing or invalid."""
    pass
