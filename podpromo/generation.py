import logging
from dataclasses import dataclass, replace
from typing import Any, Callable, Generic, Optional, Type, TypeVar

from pydantic import BaseModel

from .llm import DEFAULT_MODEL, InvalidModelJSON, SamplingConfig, TransportError, invoke
from .models import ArtifactKind, Transcript
from .prompts import SYSTEM_PROMPTS, build_repair_prompt
from .validation import parse_and_validate

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)
V = TypeVar("V")


@dataclass(frozen=True)
class ArtifactSpec(Generic[T]):
    kind: ArtifactKind
    model_cls: Type[T]
    build_prompt: Callable[[Transcript], str]
    sampling: SamplingConfig
    repair_sampling: SamplingConfig
    fallback: Callable[[], T]


@dataclass(frozen=True)
class GenerationResult(Generic[V]):
    value: V
    was_fallback: bool
    attempts: int
    raw: Optional[str] = None
    failure: Optional[str] = None


def _log_failure(kind: ArtifactKind, attempt: str, exc: Exception, error_kind: str) -> None:
    logger.warning(
        "%s %s attempt failed (%s): %s",
        kind.value,
        attempt,
        error_kind,
        exc,
        extra={"artifact_kind": kind.value, "attempt": attempt, "error_kind": error_kind},
    )


def generate_artifact(
    spec: ArtifactSpec[T],
    transcript: Transcript,
    *,
    client: Any,
    model: str = DEFAULT_MODEL,
) -> GenerationResult[T]:
    """Generate one artifact with at most one repair call.

    A well-formed first response is returned as is. Any validation failure
    triggers a single stricter repair request at lower temperature; if that
    also fails, or the completion endpoint is unreachable at any point, the
    kind's static fallback is returned with was_fallback=True.
    """
    kind = spec.kind
    system_prompt = SYSTEM_PROMPTS[kind]
    attempts = 0
    raw: Optional[str] = None

    def _fallback(error_kind: str) -> GenerationResult[T]:
        logger.error(
            "Falling back to static %s after %d call(s)",
            kind.value,
            attempts,
            extra={"artifact_kind": kind.value, "attempt": "fallback", "error_kind": error_kind},
        )
        return GenerationResult(
            value=spec.fallback(),
            was_fallback=True,
            attempts=attempts,
            raw=raw,
            failure=error_kind,
        )

    logger.info("Generating %s", kind.value, extra={"artifact_kind": kind.value, "attempt": "first"})

    try:
        attempts += 1
        raw = invoke(client, system_prompt, spec.build_prompt(transcript), replace(spec.sampling, model=model))
        return GenerationResult(value=parse_and_validate(raw, spec.model_cls), was_fallback=False, attempts=attempts, raw=raw)
    except TransportError as exc:
        _log_failure(kind, "first", exc, "transport")
        return _fallback("transport")
    except InvalidModelJSON as exc:
        _log_failure(kind, "first", exc, exc.kind)
        first_error = exc

    repair_prompt = build_repair_prompt(kind, first_error.raw_text, first_error.kind)
    try:
        attempts += 1
        raw = invoke(client, system_prompt, repair_prompt, replace(spec.repair_sampling, model=model))
        value = parse_and_validate(raw, spec.model_cls)
    except TransportError as exc:
        _log_failure(kind, "repair", exc, "transport")
        return _fallback("transport")
    except InvalidModelJSON as exc:
        _log_failure(kind, "repair", exc, exc.kind)
        return _fallback(exc.kind)

    logger.info("Repaired %s output", kind.value, extra={"artifact_kind": kind.value, "attempt": "repair"})
    return GenerationResult(value=value, was_fallback=False, attempts=attempts, raw=raw)
