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

"""Clients for the external image generation endpoint.

The house design service only depends on `ImageGenerator.generate`, so the
vendor's request and response envelopes stay in this module.
"""

import base64
from abc import ABC, abstractmethod
from typing import Any, Optional

import requests
from google import genai
from google.genai import errors, types

from common.error_handling import ConfigurationError, EndpointError
from config.default import Default


class ImageGenerator(ABC):
    """Turns a text prompt into an image URL."""

    model_name: str

    @abstractmethod
    def generate(self, prompt: str) -> Optional[str]:
        """Returns the image URL, or None if the response carried no image.

        Raises:
            EndpointError: If the endpoint answered with a non-success status.
        """


def extract_image_url(payload: Any) -> Optional[str]:
    """Reads choices[0].message.images[0].image_url.url from a response body.

    Any other envelope content is ignored. Returns None when the path does not
    resolve or the URL is empty.
    """
    node = payload
    for key in ("choices", 0, "message", "images", 0, "image_url", "url"):
        if isinstance(key, int):
            if not isinstance(node, list) or len(node) <= key:
                return None
        elif not isinstance(node, dict) or key not in node:
            return None
        node = node[key]
    if isinstance(node, str) and node:
        return node
    return None


class ChatCompletionsImageGenerator(ImageGenerator):
    """Image generation through an OpenAI-compatible chat completions gateway."""

    def __init__(self, api_key: str, base_url: str, model_name: str):
        if not api_key:
            raise ConfigurationError("GENERATION_API_KEY is not configured")
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.model_name = model_name

    def generate(self, prompt: str) -> Optional[str]:
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        data = {
            "model": self.model_name,
            "messages": [{"role": "user", "content": prompt}],
            "modalities": ["image", "text"],
        }

        response = requests.post(
            f"{self.base_url}/chat/completions", headers=headers, json=data
        )
        if not response.ok:
            raise EndpointError(response.status_code, response.text)

        return extract_image_url(response.json())


class GeminiImageGenerator(ImageGenerator):
    """Image generation through the Gemini API using the google-genai SDK."""

    def __init__(self, api_key: str, model_name: str, client: genai.Client = None):
        if not api_key and client is None:
            raise ConfigurationError("GENERATION_API_KEY is not configured")
        self.model_name = model_name
        self.client = client or genai.Client(api_key=api_key)

    def generate(self, prompt: str) -> Optional[str]:
        try:
            response = self.client.models.generate_content(
                model=self.model_name,
                contents=prompt,
                config=types.GenerateContentConfig(
                    response_modalities=["IMAGE", "TEXT"],
                ),
            )
        except errors.APIError as e:
            raise EndpointError(e.code, e.message or str(e)) from e

        if not response.candidates:
            return None
        content = response.candidates[0].content
        for part in (content.parts if content else None) or []:
            inline = part.inline_data
            if inline and inline.data:
                mime_type = inline.mime_type or "image/png"
                encoded = base64.b64encode(inline.data).decode("utf-8")
                return f"data:{mime_type};base64,{encoded}"
        return None


def create_image_generator(config: Default) -> ImageGenerator:
    """Builds the generator selected by IMAGE_GENERATOR_BACKEND.

    Raises:
        ConfigurationError: If the API key is missing or the backend is unknown.
    """
    if not config.GENERATION_API_KEY:
        raise ConfigurationError("GENERATION_API_KEY is not configured")

    backend = config.IMAGE_GENERATOR_BACKEND
    if backend == "chat_completions":
        return ChatCompletionsImageGenerator(
            api_key=config.GENERATION_API_KEY,
            base_url=config.GENERATION_API_BASE_URL,
            model_name=config.GENERATION_MODEL,
        )
    if backend == "gemini":
        return GeminiImageGenerator(
            api_key=config.GENERATION_API_KEY,
            model_name=config.GEMINI_IMAGE_MODEL,
        )
    raise ConfigurationError(f"Unknown IMAGE_GENERATOR_BACKEND: {backend}")
