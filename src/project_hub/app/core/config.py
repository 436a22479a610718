from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file='.env', case_sensitive=True)
    APP_NAME: str = 'Project Hub'
    API_PREFIX: str = '/api/v1'
    HOST: str = '0.0.0.0'
    PORT: int = 8000
    LOG_LEVEL: str = 'INFO'
    LOG_FORMAT: Literal['text', 'json'] = 'text'


settings = Settings()
