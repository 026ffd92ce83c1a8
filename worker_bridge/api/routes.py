from fastapi import APIRouter, Depends

from worker_bridge.api.dto import ModelsOut
from worker_bridge.api.requests import GenerateIn
from worker_bridge.domain.models import GenerateResult
from worker_bridge.infra.llm import ModelProvider, get_provider_singleton

router = APIRouter()


@router.get('/models', response_model=ModelsOut)
async def list_models(provider: ModelProvider = Depends(get_provider_singleton)):
    return ModelsOut(models=provider.model_ids)


@router.post('/generate', response_model=GenerateResult)
async def generate(
    body: GenerateIn,
    provider: ModelProvider = Depends(get_provider_singleton),
):
    model = provider.language_model(body.model)
    return await model.do_generate(body)
