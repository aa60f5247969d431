from __future__ import annotations

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8')

    app_name: str = 'File Explorer'
    app_host: str = '127.0.0.1'
    app_port: int = 8080
    allowed_roots: str = Field(default_factory=os.getcwd)
    log_level: str = 'info'
    log_json: bool = False
    cors_origins: str = ''
    destination_attempts: int = Field(default=10, ge=1, le=100)

    @property
    def root_list(self) -> list[str]:
        roots = [root.strip() for root in self.allowed_roots.split(',') if root.strip()]
        return [os.path.abspath(root) for root in roots] or [os.getcwd()]

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(',') if origin.strip()]


settings = Settings()
