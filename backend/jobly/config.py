from pathlib import Path
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    db_path: Path = Path("jobly.sqlite")
    api_prefix: str = "/api/v1"
    # argon2 hash of the admin bearer token; mutating routes answer 401 while unset.
    admin_token_hash: str | None = None
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000

    model_config = {"env_prefix": "JOBLY_"}


settings = Settings()
