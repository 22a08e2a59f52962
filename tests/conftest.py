"""Shared fixtures and stub-API helpers."""

from __future__ import annotations

import json
from pathlib import Path

import httpx
import pytest

from coztrail.gpt import API_BASE_URL, DEFAULT_MODEL
from coztrail.models import RunConfig

SYSTEM_PROMPT = 'You are a terse summarizer.\n'
COMPLETIONS_URL = f'{API_BASE_URL}/chat/completions'


def chat_body(*contents: str) -> bytes:
    """Encode a chat completion response with one choice per content."""
    return json.dumps({
        'id': 'chatcmpl-1',
        'object': 'chat.completion',
        'model': DEFAULT_MODEL,
        'choices': [
            {'index': i, 'message': {'role': 'assistant', 'content': c}, 'finish_reason': 'stop'}
            for i, c in enumerate(contents)
        ],
        'usage': {'prompt_tokens': 12, 'completion_tokens': 3, 'total_tokens': 15},
    }).encode('utf-8')


class StubAPI:
    """httpx transport standing in for the remote API; records every request."""

    def __init__(self, status_code: int = 200, body: bytes = b''):
        self.status_code = status_code
        self.body = body
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, content=self.body, headers={'content-type': 'application/json'})

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    d = tmp_path / 'templates'
    d.mkdir()
    (d / 'system_prompt.txt').write_text(SYSTEM_PROMPT, encoding='utf-8')
    return d


@pytest.fixture
def prompt_file(tmp_path: Path) -> Path:
    p = tmp_path / 'prompt.txt'
    p.write_bytes(b'Summarize this diff:\r\n+ added line\n')
    return p


@pytest.fixture
def run_config(prompt_file: Path, template_dir: Path) -> RunConfig:
    return RunConfig(
        prompt_path=prompt_file,
        api_key='sk-test',
        template_dir=template_dir,
        model=DEFAULT_MODEL,
        base_url=API_BASE_URL,
    )
