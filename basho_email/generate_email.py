"""
Email generation using the OpenAI chat completions API.

This module turns a filled-in outreach form into a prompt, sends it to
the completion endpoint and returns the drafted email text.
"""

import logging
from typing import Optional

import openai
from openai import OpenAI

from .config import config
from .prompt_components import SYSTEM_INSTRUCTION, build_prompt

# Configure logging
logger = logging.getLogger(__name__)

MAX_TOKENS = 500
COMPLETION_COUNT = 1
TEMPERATURE = 0.7


class EmailGenerationError(Exception):
    """Base class for failures while generating an email."""


class NetworkFailureError(EmailGenerationError):
    """The request could not be sent or did not complete."""


class ApiError(EmailGenerationError):
    """The completion endpoint answered with a non-success status."""
    
    def __init__(self, status_code: int, body: str):
        super().__init__(f"HTTP error! status: {status_code}, message: {body}")
        self.status_code = status_code
        self.body = body


class MalformedResponseError(EmailGenerationError):
    """The completion endpoint answered successfully but with no usable choice."""


class EmailGenerationClient:
    """
    Client for the chat completions endpoint.
    
    One call to generate() makes exactly one HTTP request; retries are
    disabled on the underlying OpenAI client.
    """
    
    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        client: Optional[OpenAI] = None,
    ):
        self.api_key = api_key if api_key is not None else config.OPENAI_API_KEY
        self.model = model or config.OPENAI_MODEL
        self.base_url = base_url or config.OPENAI_BASE_URL
        self._client = client
    
    @property
    def is_configured(self) -> bool:
        """Check if an API key is available."""
        return bool(self.api_key)
    
    def _get_client(self) -> OpenAI:
        if not self._client:
            try:
                self._client = OpenAI(
                    api_key=self.api_key or None,
                    base_url=self.base_url,
                    max_retries=0,
                )
            except openai.OpenAIError as e:
                raise EmailGenerationError(f"OpenAI client not configured: {e}") from e
        return self._client
    
    def build_request(self, prompt: str) -> dict:
        """Build the chat completion request body for a prompt."""
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_INSTRUCTION},
                {"role": "user", "content": prompt},
            ],
            "max_tokens": MAX_TOKENS,
            "n": COMPLETION_COUNT,
            "temperature": TEMPERATURE,
        }
    
    def generate(self, record: dict[str, str]) -> str:
        """
        Generate an outreach email for a form record.
        
        Args:
            record: Outreach form record with all 12 fields.
        
        Returns:
            The first completion's text, stripped of surrounding whitespace.
        
        Raises:
            NetworkFailureError: The request could not be completed.
            ApiError: The endpoint returned a non-success status.
            MalformedResponseError: The response held no usable choice.
        """
        prompt = build_prompt(record)
        
        logger.info(f"Sending request to OpenAI API (model={self.model})...")
        logger.info(f"Prompt: {prompt}")
        
        try:
            response = self._get_client().chat.completions.create(
                **self.build_request(prompt)
            )
        except openai.APIConnectionError as e:
            raise NetworkFailureError(f"Could not reach completion endpoint: {e}") from e
        except openai.APIStatusError as e:
            body = e.response.text
            logger.error(f"Error response ({e.status_code}): {body}")
            raise ApiError(e.status_code, body) from e
        except openai.APIError as e:
            raise MalformedResponseError(f"Unreadable response from completion endpoint: {e}") from e
        except ValueError as e:
            # Success status with a body that is not JSON, e.g. a proxy error page
            raise MalformedResponseError(f"Response body is not valid JSON: {e}") from e
        
        logger.info(f"API Response: {response!r}")
        
        choices = getattr(response, "choices", None)
        if not choices:
            logger.error(f"No choices in API response: {response!r}")
            raise MalformedResponseError("No choices returned from the API")
        
        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None)
        if content is None:
            raise MalformedResponseError("First choice has no message content")
        
        return content.strip()
