from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    log_level: str = "INFO"
    report_delay_seconds: float = 1.0
    headline_delay_seconds: float = 0.8
    random_seed: int | None = None
