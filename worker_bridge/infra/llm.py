import logging
from functools import lru_cache
from typing import Dict, List, Mapping, Optional

from worker_bridge.adapters.llm.constants import ModelId
from worker_bridge.adapters.llm.dummy import (DummyArtifactModel,
                                              DummyChatModel,
                                              DummyReasoningModel,
                                              DummyTitleModel)
from worker_bridge.adapters.llm.worker import WorkerBackedModel
from worker_bridge.domain.errors import ModelNotFound
from worker_bridge.domain.ports.llm import LanguageModelPort
from worker_bridge.settings import settings

logger = logging.getLogger(__name__)


class ModelProvider:
    """Resolves the model ids the chat host asks for."""

    def __init__(self, language_models: Mapping[str, LanguageModelPort]):
        self._models: Dict[str, LanguageModelPort] = {
            str(getattr(k, 'value', k)): v for k, v in language_models.items()
        }

    @property
    def model_ids(self) -> List[str]:
        return list(self._models)

    def language_model(self, model_id: str) -> LanguageModelPort:
        try:
            return self._models[str(getattr(model_id, 'value', model_id))]
        except KeyError:
            raise ModelNotFound(f'No such language model: {model_id}')


def make_worker_model(ask_url: Optional[str]) -> WorkerBackedModel:
    if not ask_url:
        # Don't fail at startup; every reply will explain what is missing.
        logger.warning(
            'CF_WORKER_ASK_URL is not set. Add it to .env to use the Bahá’í backend.'
        )
    return WorkerBackedModel(ask_url=ask_url)


def make_provider(*, test_mode: bool, ask_url: Optional[str] = None) -> ModelProvider:
    if test_mode:
        return ModelProvider({
            ModelId.CHAT: DummyChatModel(),
            ModelId.CHAT_REASONING: DummyReasoningModel(),
            ModelId.TITLE: DummyTitleModel(),
            ModelId.ARTIFACT: DummyArtifactModel(),
        })

    model = make_worker_model(ask_url)
    return ModelProvider({model_id: model for model_id in ModelId})


def get_provider() -> ModelProvider:
    return make_provider(
        test_mode=settings.IS_TEST_ENVIRONMENT,
        ask_url=settings.CF_WORKER_ASK_URL,
    )


@lru_cache(maxsize=1)
def get_provider_singleton() -> ModelProvider:
    # Build once per process
    return get_provider()


def reset_provider_singleton_cache() -> None:
    get_provider_singleton.cache_clear()
