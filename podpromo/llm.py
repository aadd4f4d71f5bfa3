import logging
from dataclasses import dataclass
from typing import Any

import anthropic
from anthropic import Anthropic

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "claude-sonnet-4-5"


class TransportError(RuntimeError):
    def __init__(self, error: str, cause: Exception | None = None):
        super().__init__(f"Completion call failed: {error}")
        self.error = error
        self.cause = cause


class InvalidModelJSON(ValueError):
    def __init__(self, raw_text: str, error: str, kind: str):
        super().__init__(f"Model output failure ({kind}): {error}")
        self.raw_text = raw_text
        self.error = error
        self.kind = kind


class ParseError(InvalidModelJSON):
    def __init__(self, raw_text: str, error: str, kind: str = "json_decode"):
        super().__init__(raw_text=raw_text, error=error, kind=kind)


class ShapeError(InvalidModelJSON):
    def __init__(self, raw_text: str, error: str):
        super().__init__(raw_text=raw_text, error=error, kind="schema_shape")


class ConstraintError(InvalidModelJSON):
    def __init__(self, raw_text: str, error: str):
        super().__init__(raw_text=raw_text, error=error, kind="schema_constraint")


class EmptyModelOutput(ParseError):
    def __init__(self):
        super().__init__(
            raw_text="",
            error="No text content found in model response",
            kind="empty_output",
        )


@dataclass(frozen=True)
class SamplingConfig:
    temperature: float
    max_output_tokens: int
    model: str = DEFAULT_MODEL


def resolve_client(client: Any | None = None, api_key: str | None = None) -> Any:
    if client is not None:
        return client
    if not api_key:
        raise RuntimeError("api_key is required when client is not provided")
    return Anthropic(api_key=api_key)


def extract_text(resp) -> str:
    parts = []
    for block in resp.content:
        if hasattr(block, "text") and block.text:
            parts.append(block.text)
    raw_text = "".join(parts)
    if not raw_text.strip():
        raise EmptyModelOutput()
    return raw_text.strip()


def invoke(client: Any, system_prompt: str, user_prompt: str, sampling: SamplingConfig) -> str:
    """Issue one completion call and return its stripped text.

    Provider errors (connection, auth, rate limit, bad status) surface as
    TransportError. A response with no text raises EmptyModelOutput.
    """
    try:
        resp = client.messages.create(
            model=sampling.model,
            max_tokens=sampling.max_output_tokens,
            temperature=sampling.temperature,
            system=system_prompt,
            messages=[{"role": "user", "content": user_prompt}],
        )
    except anthropic.APIError as e:
        logger.warning("Completion call failed: %s", e)
        raise TransportError(str(e), cause=e) from e

    return extract_text(resp)
