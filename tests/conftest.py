"""
Shared fixtures: an OpenAI client wired to a fake completion endpoint.
"""

import json
import os
import sys

import httpx
import pytest
from openai import OpenAI

# Add project to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from basho_email.generate_email import EmailGenerationClient

BASE_URL = "https://api.openai.com/v1"
TEST_API_KEY = "sk-test-key"


def completion_body(*contents: str) -> dict:
    """Chat completion JSON with one choice per content string."""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "gpt-3.5-turbo",
        "choices": [
            {
                "index": i,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
            for i, content in enumerate(contents)
        ],
        "usage": {"prompt_tokens": 10, "completion_tokens": 5, "total_tokens": 15},
    }


class FakeCompletionEndpoint:
    """Records requests and replays a canned response."""
    
    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: dict | str = completion_body("Hello.")
        self.error: Exception | None = None
        self.content_type: str | None = None
    
    def respond(self, status_code: int, body) -> None:
        self.status_code = status_code
        self.body = body
        self.content_type = None
    
    def respond_raw(self, status_code: int, content: bytes, content_type: str) -> None:
        """Reply with raw bytes under an arbitrary content type."""
        self.status_code = status_code
        self.body = content.decode()
        self.content_type = content_type
    
    def fail_with(self, error: Exception) -> None:
        self.error = error
    
    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.content_type is not None:
            return httpx.Response(
                self.status_code,
                content=self.body.encode(),
                headers={"content-type": self.content_type},
            )
        if isinstance(self.body, str):
            return httpx.Response(self.status_code, text=self.body)
        return httpx.Response(self.status_code, json=self.body)
    
    @property
    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def endpoint():
    return FakeCompletionEndpoint()


@pytest.fixture
def generation_client(endpoint):
    openai_client = OpenAI(
        api_key=TEST_API_KEY,
        base_url=BASE_URL,
        max_retries=0,
        http_client=httpx.Client(transport=httpx.MockTransport(endpoint)),
    )
    return EmailGenerationClient(
        api_key=TEST_API_KEY,
        model="gpt-3.5-turbo",
        base_url=BASE_URL,
        client=openai_client,
    )
