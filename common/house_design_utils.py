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

import requests

from common.analytics import get_logger
from common.error_handling import GenerationError
from config.default import Default
from models.house_design import DesignResult, HouseDesignResponse, Preferences

logger = get_logger(__name__)
config = Default()


def request_house_designs(preferences: Preferences) -> list[DesignResult]:
    """
    Asks the house design API to generate every view for the preferences.

    Args:
        preferences: The user's design preferences.

    Returns:
        The generated designs, at most one per view.

    Raises:
        GenerationError: If the API answered with an error.
    """
    api_url = f"{config.API_BASE_URL}/api/house_design/generate"
    request_json = {"preferences": preferences.model_dump(by_alias=True)}
    logger.info(f"Requesting house design. Request: {request_json}")

    response = requests.post(api_url, json=request_json)
    if not response.ok:
        try:
            message = response.json().get("error", response.text)
        except (ValueError, AttributeError):
            message = response.text
        logger.error(f"House design request failed ({response.status_code}): {message}")
        raise GenerationError(message)

    return HouseDesignResponse.model_validate(response.json()).designs


def download_filename(view_name: str) -> str:
    return f"house-design-{view_name}.png"
