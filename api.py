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

"""FastAPI application serving the house design API."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from routers import house_design_router

# The UI may be served from a different origin than the API.
CORS_ALLOWED_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]


def create_api_app() -> FastAPI:
    app = FastAPI(title="AI House Designer")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=CORS_ALLOWED_HEADERS,
    )
    app.include_router(house_design_router.router)
    return app
