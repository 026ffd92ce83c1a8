from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from worker_bridge.adapters.llm.constants import (BACKEND_ERROR_PREFIX,
                                                  EMPTY_QUESTION_TEXT,
                                                  MISSING_URL_TEXT,
                                                  MODEL_NAME, NO_ANSWER_TEXT,
                                                  PROVIDER_NAME,
                                                  TRANSPORT_ERROR_TEXT)
from worker_bridge.domain import errors as de
from worker_bridge.domain.extract import last_user_question
from worker_bridge.domain.models import GenerateOptions, GenerateResult
from worker_bridge.domain.ports.llm import LanguageModelPort

logger = logging.getLogger(__name__)


def _error_detail(data: Any, status_code: int) -> str:
    if isinstance(data, dict):
        detail = data.get('error') or data.get('message')
        if detail:
            return str(detail)
    return f'HTTP {status_code}'


class WorkerBackedModel(LanguageModelPort):
    """
    Language model that answers by asking the Bahá’í assistant worker.

    - Pulls the last user message out of the conversation and POSTs it as {"q": ...}.
    - Returns the worker's `answer` as the assistant text. Non-streaming.
    - Never raises: every failure comes back as a readable reply, the cause goes to the log.
    """

    provider = PROVIDER_NAME
    model_id = MODEL_NAME

    def __init__(
        self,
        ask_url: Optional[str],
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.ask_url = ask_url
        self.client = client

    # ---------- public API ----------

    async def do_generate(self, options: Any) -> GenerateResult:
        try:
            text = await self._answer(options)
        except de.ConfigError as exc:
            # already warned about at startup
            logger.debug('generation skipped: %s', exc.message)
            return GenerateResult.stop(exc.message)
        except de.BackendError as exc:
            logger.warning('worker returned %s: %s', exc.status_code, exc.message)
            return GenerateResult.stop(exc.message)
        except httpx.HTTPError as exc:
            logger.warning('worker request failed: %s: %s', type(exc).__name__, exc)
            return GenerateResult.stop(str(exc) or TRANSPORT_ERROR_TEXT)
        except Exception as exc:
            logger.exception('unexpected failure while asking the worker')
            return GenerateResult.stop(str(exc) or TRANSPORT_ERROR_TEXT)
        return GenerateResult.stop(text)

    # ---------- internals ----------

    async def _answer(self, options: Any) -> str:
        request = GenerateOptions.parse(options)
        question = last_user_question(request.turns)

        if not question:
            return EMPTY_QUESTION_TEXT

        if not self.ask_url:
            raise de.ConfigError(MISSING_URL_TEXT)

        response = await self._post(question)

        try:
            data = response.json()
        except ValueError:
            data = None

        if not response.is_success:
            raise de.BackendError(
                BACKEND_ERROR_PREFIX + _error_detail(data, response.status_code),
                status_code=response.status_code,
            )

        answer = data.get('answer') if isinstance(data, dict) else None
        if not isinstance(answer, str):
            logger.warning('worker replied %s without an answer', response.status_code)
            return NO_ANSWER_TEXT
        return answer

    async def _post(self, question: str) -> httpx.Response:
        headers = {'Content-Type': 'application/json'}
        payload = {'q': question}
        if self.client is not None:
            return await self.client.post(self.ask_url, headers=headers, json=payload)
        async with httpx.AsyncClient() as client:
            return await client.post(self.ask_url, headers=headers, json=payload)
