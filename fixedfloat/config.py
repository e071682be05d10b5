from pydantic_settings import BaseSettings

from fixedfloat.constants import BASE_URL


class Settings(BaseSettings):
    # Non-secret client defaults. API credentials are always passed to
    # FixedFloatClient directly and never read from the environment.
    base_url: str = BASE_URL
    request_timeout: float = 30.0  # seconds

    class Config:
        env_prefix = "FIXEDFLOAT_"
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


settings = Settings()
