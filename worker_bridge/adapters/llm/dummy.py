from typing import Any

from worker_bridge.adapters.llm.constants import ModelId
from worker_bridge.domain.models import GenerateResult
from worker_bridge.domain.ports.llm import LanguageModelPort


class DummyLanguageModel(LanguageModelPort):
    provider = 'dummy'
    reply = '...'

    async def do_generate(self, options: Any) -> GenerateResult:
        return GenerateResult.stop(self.reply)


class DummyChatModel(DummyLanguageModel):
    model_id = ModelId.CHAT.value
    reply = 'Hello, world!'


class DummyReasoningModel(DummyLanguageModel):
    model_id = ModelId.CHAT_REASONING.value
    reply = 'I thought about it. Hello, world!'


class DummyTitleModel(DummyLanguageModel):
    model_id = ModelId.TITLE.value
    reply = 'This is a test title'


class DummyArtifactModel(DummyLanguageModel):
    model_id = ModelId.ARTIFACT.value
    reply = 'This is a test artifact'
