from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

REPO_ROOT = Path(__file__).resolve().parents[3]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=str(REPO_ROOT / '.env'), env_file_encoding='utf-8', extra='ignore')

    app_name: str = 'HelpdeskRatings'
    environment: str = 'dev'

    database_url: str = Field(default='sqlite:///./backend/data/database.db', validation_alias='DATABASE_URL')

    server_host: str = Field(default='0.0.0.0', validation_alias='SERVER_HOST')
    server_port: int = Field(default=8000, validation_alias='SERVER_PORT')

    log_level: str = 'INFO'
    log_format: str = '%(asctime)s %(levelname)s %(name)s: %(message)s'

    report_score_formula: Literal['weighted', 'average'] = 'weighted'
    min_window_days: int = Field(default=28, ge=1)
    weekly_bucket_days: int = Field(default=7, ge=1)
    weekly_keep_single_day_tail: bool = False

    frontend_origin: str = 'http://localhost:3000'

    @property
    def repo_root(self) -> Path:
        return Path(__file__).resolve().parents[3]

    @property
    def backend_root(self) -> Path:
        return Path(__file__).resolve().parents[2]

    @property
    def data_dir(self) -> Path:
        return self.backend_root / 'data'

    @property
    def resolved_database_url(self) -> str:
        if self.database_url.startswith('sqlite:///./'):
            rel_path = self.database_url.removeprefix('sqlite:///./')
            absolute_path = (self.repo_root / rel_path).resolve()
            absolute_path.parent.mkdir(parents=True, exist_ok=True)
            return f"sqlite:///{absolute_path.as_posix()}"
        return self.database_url


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
