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

from common.analytics import get_logger, track_model_call
from common.error_handling import EndpointError, ViewGenerationError
from models.house_design import DesignResult, Preferences
from models.image_generation import ImageGenerator
from models.prompt_builder import build_view_requests

logger = get_logger(__name__)


def generate_house_designs(
    preferences: Preferences, generator: ImageGenerator
) -> list[DesignResult]:
    """
    Generates one image per house view, one view at a time.

    Views are requested in the fixed order of HOUSE_VIEWS and each request
    waits for the previous one. A view whose response carries no image is
    left out of the results. Any endpoint failure aborts the whole batch.

    Raises:
        ViewGenerationError: If the endpoint failed for one of the views.
    """
    results: list[DesignResult] = []

    view_requests = build_view_requests(preferences)

    for view in view_requests:
        logger.info(f"Generating {view.name}...")

        try:
            with track_model_call(
                model_name=generator.model_name,
                view=view.name,
                prompt_length=len(view.prompt),
            ):
                image_url = generator.generate(view.prompt)
        except EndpointError as e:
            logger.error(
                f"Error generating {view.name}: status={e.status_code} detail={e.detail}"
            )
            raise ViewGenerationError(view.name, e.status_code, e.detail) from e

        if not image_url:
            logger.warning(f"No image returned for {view.name}, skipping it.")
            continue

        results.append(DesignResult(view=view.name, image_url=image_url))

    logger.info(f"Generated {len(results)} of {len(view_requests)} house views.")
    return results
