from worker_bridge.adapters.llm.constants import ModelId
from worker_bridge.domain.models import GenerateOptions


class GenerateIn(GenerateOptions):
    model: str = ModelId.CHAT.value
