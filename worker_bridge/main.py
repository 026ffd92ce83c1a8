from contextlib import asynccontextmanager

from fastapi import FastAPI

from worker_bridge.api.errors import register_exception_handlers
from worker_bridge.api.routes import router
from worker_bridge.infra.llm import get_provider_singleton


@asynccontextmanager
async def lifespan(app: FastAPI):
    # bind the models up front so a missing worker URL is reported at startup
    app.state.provider = get_provider_singleton()
    yield


app = FastAPI(lifespan=lifespan)

app.include_router(router)

register_exception_handlers(app)


@app.get('/', tags=['health'])
async def healthcheck():
    return {'Welcome to the Bahá’í assistant bridge': 'POST /generate to ask a question'}
