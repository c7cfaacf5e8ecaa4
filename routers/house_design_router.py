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

from dataclasses import asdict

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from common.analytics import get_logger
from common.error_handling import ConfigurationError, GenerationError
from config.default import Default
from config.house_design_options import (
    ARCHITECTURAL_STYLES,
    COLOR_SCHEMES,
    HOUSE_VIEWS,
    SPECIAL_FEATURES,
)
from models.house_design import ErrorResponse, HouseDesignRequest, HouseDesignResponse
from models.image_generation import create_image_generator
from services.house_design_service import generate_house_designs

logger = get_logger(__name__)

router = APIRouter(prefix="/api/house_design", tags=["house_design"])

GENERATION_FAILED_MESSAGE = "Failed to generate house design."
UNEXPECTED_ERROR_MESSAGE = "Unexpected error during house design generation."


def get_config() -> Default:
    return Default()


def _error_response(message: str, error_type: str) -> JSONResponse:
    body = ErrorResponse(error=message, error_type=error_type)
    return JSONResponse(status_code=500, content=body.model_dump(by_alias=True))


@router.post("/generate", response_model=HouseDesignResponse)
def generate_house_design(
    request: HouseDesignRequest,
    config: Default = Depends(get_config),
):
    """
    Generates all five house views for the given preferences.
    Either every successful view is returned, or an error; never a partial batch.
    """
    try:
        generator = create_image_generator(config)
        designs = generate_house_designs(request.preferences, generator)
    except ConfigurationError as e:
        logger.error(f"House design generation is not configured: {e}")
        return _error_response(str(e), "configuration")
    except GenerationError as e:
        # The failing view is only reported in the logs.
        logger.error(f"Error in generate_house_design: {e}")
        return _error_response(GENERATION_FAILED_MESSAGE, "generation")
    except Exception as e:
        logger.exception(f"Unexpected error in generate_house_design: {e}")
        return _error_response(UNEXPECTED_ERROR_MESSAGE, "unknown")

    return HouseDesignResponse(designs=designs)


@router.get("/options")
def get_house_design_options():
    """Lists the styles, color schemes, features and views the generator accepts."""
    return {
        "architectural_styles": [asdict(s) for s in ARCHITECTURAL_STYLES],
        "color_schemes": [asdict(c) for c in COLOR_SCHEMES],
        "special_features": [asdict(f) for f in SPECIAL_FEATURES],
        "views": [asdict(v) for v in HOUSE_VIEWS],
    }
