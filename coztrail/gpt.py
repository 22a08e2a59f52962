import logging
import time
from pathlib import Path
from typing import Optional

import httpx
import openai
from pydantic import ValidationError

from .errors import APIError, EmptyResponseError, NetworkError, ParseError, ReadError
from .models import ChatRequest, ChatResponse, Message, RunConfig
from .prompts import load_system_prompt


API_BASE_URL = "https://api.deepseek.com/v1"
DEFAULT_MODEL = "deepseek-chat"
TEMPERATURE = 0.2
MAX_TOKENS = 800

logger = logging.getLogger("coztrail.gpt")


def build_request(system_prompt: str, user_prompt: str, model: str = DEFAULT_MODEL) -> ChatRequest:
    """Build a chat completion request with a system and user message."""
    return ChatRequest(
        model=model,
        messages=[
            Message(role="system", content=system_prompt),
            Message(role="user", content=user_prompt),
        ],
        temperature=TEMPERATURE,
        max_tokens=MAX_TOKENS,
    )


def get_client(api_key: str, base_url: str = API_BASE_URL, http_client: Optional[httpx.Client] = None) -> openai.OpenAI:
    """Create a single-attempt OpenAI-compatible client for the given key."""
    return openai.OpenAI(
        api_key=api_key,
        base_url=base_url,
        max_retries=0,
        http_client=http_client,
    )


def send(
    request: ChatRequest,
    api_key: str,
    base_url: str = API_BASE_URL,
    http_client: Optional[httpx.Client] = None,
) -> bytes:
    """
    POST the request to <base_url>/chat/completions and return the raw body.

    Args:
        request: Request built by build_request
        api_key: Bearer token for the Authorization header
        base_url: API root, the SDK appends /chat/completions
        http_client: Optional httpx client handed to the SDK

    Returns:
        Response body bytes of a successful call
    """
    client = get_client(api_key, base_url, http_client)
    try:
        try:
            raw = client.chat.completions.with_raw_response.create(**request.model_dump())
        except openai.APIStatusError as e:
            raise APIError(e.status_code, e.response.text) from e
        except openai.APIConnectionError as e:
            if isinstance(e.__cause__, httpx.ReadError):
                raise ReadError(f"failed to read response: {e.__cause__}") from e
            raise NetworkError(f"failed to send request: {e}") from e

        try:
            body = raw.content
        except httpx.HTTPError as e:
            raise ReadError(f"failed to read response: {e}") from e

        # The SDK only raises for >= 400; any other non-200 is still a failure
        if raw.status_code != 200:
            raise APIError(raw.status_code, body.decode("utf-8", errors="replace"))
        return body
    finally:
        client.close()


def parse_response(body: bytes) -> str:
    """Return the first choice's content, unmodified."""
    try:
        response = ChatResponse.model_validate_json(body)
    except ValidationError as e:
        raise ParseError(f"failed to unmarshal response: {e}") from e

    if not response.choices:
        raise EmptyResponseError("no choices in response")
    return response.choices[0].message.content


def complete(config: RunConfig, user_prompt: str, http_client: Optional[httpx.Client] = None) -> str:
    """Run one full request cycle: system prompt, request, send, parse."""
    system_prompt = load_system_prompt(Path(config.template_dir))
    request = build_request(system_prompt, user_prompt, model=config.model)

    start = time.monotonic()
    body = send(request, config.api_key, config.base_url, http_client)
    logger.info("Response from %s received (took %.2fs)", config.model, time.monotonic() - start)

    return parse_response(body)
