"""Generates part of speech, meaning, examples and level for a new word via a chat-completions API."""
from __future__ import annotations
import json
import logging
from typing import Optional

import requests

from wordquiz.core import config

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("speech", "meaning", "example_sentence", "level")


class WordGenerationError(Exception):
    CONFIGURATION = "configuration"
    UPSTREAM = "upstream"
    FORMAT = "format"

    def __init__(self, message: str, kind: str):
        super().__init__(message)
        self.kind = kind


def _build_prompt(word: str) -> str:
    return f"""Generate information for the word "{word}" with the following requirements:
    - Part of speech (noun, verb, adjective, etc.)
    - Clear and concise definition without using the word in the definition.
    - Three example sentences using the word. Use "____" to indicate the word in the sentence.
    - Difficulty level (A1, A2, B1, B2, C1, C2)

    Respond ONLY with a JSON object in this exact format, with no additional text or markdown:
    {{
      "speech": "your_response",
      "meaning": "your_response",
      "example_sentence": "First sentence. Second sentence. Third sentence.",
      "level": "your_response"
    }}"""


def _strip_fence(content: str) -> str:
    # Some models still wrap the JSON in a markdown block
    if "```json" in content:
        return content.split("```json")[1].split("```")[0].strip()
    if "```" in content:
        return content.split("```")[1].split("```")[0].strip()
    return content.strip()


class AIWordGenerator:
    def __init__(
        self,
        api_key: Optional[str] = None,
        api_url: Optional[str] = None,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.api_key = config.AI_API_KEY if api_key is None else api_key
        self.api_url = api_url or config.AI_API_URL
        self.model = model or config.AI_MODEL
        self.timeout = timeout or config.AI_TIMEOUT_SECONDS

    def generate(self, word: str) -> dict:
        """
        Ask the model to describe ``word``.

        Returns a dict with ``speech``, ``meaning``, ``example_sentence`` and
        ``level``. Raises WordGenerationError on missing configuration, a
        failed request, or a reply that is not the expected JSON object.
        """
        if not self.api_key:
            raise WordGenerationError("AI_API_KEY is not set", WordGenerationError.CONFIGURATION)

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        payload = {
            "model": self.model,
            "messages": [{"role": "user", "content": _build_prompt(word)}],
            "temperature": 0.7,
            "max_tokens": 500,
            "response_format": {"type": "json_object"},
        }

        logger.info("Generating word data for '%s' with %s", word, self.model)
        try:
            response = requests.post(self.api_url, headers=headers, json=payload, timeout=self.timeout)
            response.raise_for_status()
            content = response.json()["choices"][0]["message"]["content"]
        except requests.RequestException as e:
            logger.error("AI request failed for '%s': %s", word, e)
            raise WordGenerationError(f"Error communicating with the AI service: {e}", WordGenerationError.UPSTREAM) from e
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise WordGenerationError("Unexpected response shape from the AI service", WordGenerationError.FORMAT) from e

        if not content:
            raise WordGenerationError("No content generated", WordGenerationError.FORMAT)

        try:
            data = json.loads(_strip_fence(content))
        except json.JSONDecodeError as e:
            logger.error("Could not parse AI reply for '%s': %r", word, content)
            raise WordGenerationError("Failed to parse AI response", WordGenerationError.FORMAT) from e

        if not isinstance(data, dict) or any(not data.get(f) for f in REQUIRED_FIELDS):
            logger.error("AI reply for '%s' is missing fields: %r", word, data)
            raise WordGenerationError("Invalid response format from AI", WordGenerationError.FORMAT)

        return {f: data[f] for f in REQUIRED_FIELDS}
