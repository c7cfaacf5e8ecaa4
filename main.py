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

"""Serves the house design API and the Mesop UI from one FastAPI app.

Run with: uvicorn main:app --port 8080
"""

import mesop as me
import uvicorn
from fastapi.middleware.wsgi import WSGIMiddleware

from api import create_api_app
from config.default import Default

# Importing the page module registers the Mesop page.
import pages.house_designer  # noqa: F401  pylint: disable=unused-import

config = Default()

app = create_api_app()

# Mesop is mounted last so /api routes take precedence.
app.mount(
    "/",
    WSGIMiddleware(me.create_wsgi_app(debug_mode=config.DEBUG_MODE)),
)


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8080, reload=config.DEBUG_MODE)
