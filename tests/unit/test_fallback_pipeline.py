"""Tests for the multi-model fallback loop."""

import json

import httpx
import pytest

from src.config.constants import AttemptOutcome
from src.infrastructure.llm.client import OpenRouterClient
from src.orchestrator.errors import (
    FatalBackendError,
    MalformedContentError,
    NotConfiguredError,
    PipelineExhaustedError,
    UpstreamTransportError,
)
from src.orchestrator.pipeline import FallbackPipeline
from src.orchestrator.state import AttemptRecord, FallbackState
from src.utils.retry import is_retryable_status
from tests.fakes import FakeCompletionClient, completion, upstream_error

MODELS = ["m1", "m2", "m3", "m4"]
MESSAGES = [{"role": "user", "content": "hola"}]


class EchoPipeline(FallbackPipeline[str]):
    """Returns the content as-is; empty content is unusable."""

    name = "echo"
    exhausted_message = "agotado"

    def models(self) -> list[str]:
        return MODELS

    def timeout(self) -> float:
        return 7.5

    def parse(self, content: str | None) -> str:
        if not content:
            raise MalformedContentError("vacío")
        return content


# ==========================================
#  STATUS CLASSIFICATION
# ==========================================


@pytest.mark.parametrize("status", [429, 500, 502, 503, 504, 599])
def test_retryable_statuses(status):
    assert is_retryable_status(status)


@pytest.mark.parametrize("status", [400, 401, 402, 403, 404, 408, 422, 600])
def test_fatal_statuses(status):
    assert not is_retryable_status(status)


# ==========================================
#  ORDERING AND FIRST-SUCCESS-WINS
# ==========================================


@pytest.mark.asyncio
async def test_first_model_success_stops_immediately(settings):
    client = FakeCompletionClient(completion("respuesta"))
    outcome = await EchoPipeline(settings, client).run(MESSAGES)

    assert outcome.result == "respuesta"
    assert outcome.model == "m1"
    assert client.called_models == ["m1"]


@pytest.mark.asyncio
@pytest.mark.parametrize("k", [2, 3, 4])
async def test_kth_model_wins_after_retryable_failures(settings, k):
    failures = [
        upstream_error(429, "rate limited"),
        UpstreamTransportError("timeout"),
        completion(""),
    ]
    script = failures[: k - 1] + [completion(f"de m{k}")]
    client = FakeCompletionClient(*script)

    outcome = await EchoPipeline(settings, client).run(MESSAGES)

    assert outcome.result == f"de m{k}"
    assert outcome.model == f"m{k}"
    assert client.called_models == MODELS[:k]
    assert [a.outcome for a in outcome.attempts] == [AttemptOutcome.RETRYABLE] * (k - 1) + [
        AttemptOutcome.SUCCESS
    ]


@pytest.mark.asyncio
async def test_each_attempt_gets_same_messages_and_timeout(settings):
    client = FakeCompletionClient(upstream_error(503), completion("ok"))
    await EchoPipeline(settings, client).run(MESSAGES)

    assert all(c["messages"] == MESSAGES for c in client.calls)
    assert all(c["timeout"] == 7.5 for c in client.calls)


@pytest.mark.asyncio
async def test_each_attempt_sends_key_from_pipeline_settings(settings):
    pipeline_settings = settings.model_copy(update={"openrouter_api_key": "sk-del-pipeline"})
    client = FakeCompletionClient(upstream_error(429), completion("ok"))

    await EchoPipeline(pipeline_settings, client).run(MESSAGES)

    assert [c["api_key"] for c in client.calls] == ["sk-del-pipeline", "sk-del-pipeline"]


@pytest.mark.asyncio
async def test_body_decoding_failure_moves_to_next_model(settings):
    authorizations = []

    def handler(request: httpx.Request) -> httpx.Response:
        authorizations.append(request.headers["authorization"])
        if json.loads(request.content)["model"] == "m1":
            raise httpx.DecodingError("corrupt gzip body", request=request)
        return httpx.Response(200, json={"choices": [{"message": {"content": "de m2"}}]})

    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    async with OpenRouterClient(settings, http_client=http) as client:
        outcome = await EchoPipeline(settings, client).run(MESSAGES)

    assert outcome.result == "de m2"
    assert outcome.model == "m2"
    assert [a.outcome for a in outcome.attempts] == [
        AttemptOutcome.RETRYABLE,
        AttemptOutcome.SUCCESS,
    ]
    assert outcome.attempts[0].reason == "corrupt gzip body"
    assert authorizations == ["Bearer test-key", "Bearer test-key"]


# ==========================================
#  FATAL FAILURES
# ==========================================


@pytest.mark.asyncio
@pytest.mark.parametrize("position", [0, 1, 2, 3])
async def test_fatal_status_aborts_without_trying_remaining(settings, position):
    script = [upstream_error(500)] * position + [upstream_error(401, "Invalid API key")]
    client = FakeCompletionClient(*script)

    with pytest.raises(FatalBackendError) as exc_info:
        await EchoPipeline(settings, client).run(MESSAGES)

    assert exc_info.value.error == "Invalid API key"
    assert exc_info.value.upstream_status == 401
    assert exc_info.value.model == MODELS[position]
    assert client.called_models == MODELS[: position + 1]


@pytest.mark.asyncio
async def test_fatal_without_error_body_uses_generic_message(settings):
    from src.infrastructure.llm.client import UpstreamResponse

    client = FakeCompletionClient(UpstreamResponse(status_code=400, payload={}))
    with pytest.raises(FatalBackendError) as exc_info:
        await EchoPipeline(settings, client).run(MESSAGES)
    assert exc_info.value.error == "Error en la API"


# ==========================================
#  EXHAUSTION
# ==========================================


@pytest.mark.asyncio
async def test_exhausted_reports_last_failure_reason(settings):
    client = FakeCompletionClient(
        upstream_error(429, "primero"),
        UpstreamTransportError("segundo"),
        upstream_error(502, "tercero"),
        completion(None),
    )

    with pytest.raises(PipelineExhaustedError) as exc_info:
        await EchoPipeline(settings, client).run(MESSAGES)

    assert exc_info.value.error == "agotado"
    assert exc_info.value.details == "vacío"
    assert exc_info.value.status_code == 500
    assert client.called_models == MODELS


@pytest.mark.asyncio
async def test_exhausted_last_reason_from_status_error(settings):
    client = FakeCompletionClient(
        completion(None),
        completion(None),
        completion(None),
        upstream_error(503, "Service Unavailable"),
    )
    with pytest.raises(PipelineExhaustedError) as exc_info:
        await EchoPipeline(settings, client).run(MESSAGES)
    assert exc_info.value.details == "Service Unavailable"


def test_exhausted_without_reason_uses_generic_details():
    error = PipelineExhaustedError("agotado", details=None)
    assert error.to_payload() == {"error": "agotado", "details": "Error desconocido"}


# ==========================================
#  PRE-FLIGHT
# ==========================================


@pytest.mark.asyncio
async def test_missing_key_fails_before_any_call(unconfigured_settings):
    client = FakeCompletionClient(completion("nunca"))

    with pytest.raises(NotConfiguredError) as exc_info:
        await EchoPipeline(unconfigured_settings, client).run(MESSAGES)

    assert exc_info.value.to_payload() == {"error": "API Key no configurada"}
    assert client.calls == []


def test_pipeline_without_hooks_cannot_be_instantiated(settings):
    class NoHooks(FallbackPipeline[str]):
        name = "incompleto"

    with pytest.raises(TypeError):
        NoHooks(settings, FakeCompletionClient())


# ==========================================
#  STATE
# ==========================================


def test_state_keeps_only_latest_error():
    state = FallbackState(pipeline="echo")
    state.record_failure(AttemptRecord(model="m1", outcome=AttemptOutcome.RETRYABLE, reason="a"))
    state.record_failure(AttemptRecord(model="m2", outcome=AttemptOutcome.RETRYABLE, reason="b"))

    assert state.last_error == "b"
    assert state.tried_models == ["m1", "m2"]
    assert state.winner is None


def test_state_summary_lists_attempts():
    state = FallbackState(pipeline="echo")
    state.record_failure(
        AttemptRecord(model="m1", outcome=AttemptOutcome.RETRYABLE, reason="x", status_code=429)
    )
    state.record_success(AttemptRecord(model="m2", outcome=AttemptOutcome.SUCCESS, status_code=200))

    summary = state.summary()
    assert summary["winner"] == "m2"
    assert summary["attempts"] == [
        {"model": "m1", "outcome": "retryable", "status_code": 429},
        {"model": "m2", "outcome": "success", "status_code": 200},
    ]
