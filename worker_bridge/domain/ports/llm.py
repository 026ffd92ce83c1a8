import abc
from typing import Any

from worker_bridge.domain.models import GenerateResult


class LanguageModelPort(abc.ABC):
    provider: str
    model_id: str

    @abc.abstractmethod
    async def do_generate(self, options: Any) -> GenerateResult:
        """
        Given a generation request (GenerateOptions or its raw dict form),
        return the assistant's reply. Implementations must not raise.
        """
        raise NotImplementedError
