from fastapi import FastAPI, Request
from starlette import status as st
from starlette.responses import JSONResponse

from worker_bridge.domain import errors as de


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(de.ModelNotFound)
    async def _404_model(_: Request, exc: de.ModelNotFound):
        return JSONResponse(
            status_code=st.HTTP_404_NOT_FOUND, content={'detail': exc.message}
        )

    @app.exception_handler(de.ConfigError)
    async def _500_config_error(_: Request, exc: de.ConfigError):
        return JSONResponse(
            status_code=st.HTTP_500_INTERNAL_SERVER_ERROR,
            content={'detail': exc.message},
        )
