from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    CF_WORKER_ASK_URL: Optional[str] = None
    IS_TEST_ENVIRONMENT: bool = Field(default=False)

    model_config = SettingsConfigDict(env_file='.env', extra='ignore')

    @field_validator('CF_WORKER_ASK_URL', mode='before')
    def allow_blank_url(cls, v):
        if v is None or str(v).strip() == '':
            return None
        return str(v).strip()


settings = Settings()
