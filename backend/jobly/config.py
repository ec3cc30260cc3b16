from pydantic_settings import BaseSettings
from pydantic import model_validator
from functools import lru_cache


class Settings(BaseSettings):
    # Database
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_database: str = "jobly"
    postgres_user: str = "jobly"
    postgres_password: str = ""

    # Auth
    secret_key: str = "change-me-in-production"
    jwt_algorithm: str = "HS256"
    jwt_expire_hours: int = 24
    bcrypt_work_factor: int = 12

    # App
    environment: str = "development"
    log_level: str = "INFO"

    @model_validator(mode="after")
    def validate_secret_key(self) -> "Settings":
        """Ensure secret_key is set properly in non-development environments."""
        weak_keys = {"change-me-in-production", "", "secret", "changeme"}
        if self.environment != "development" and self.secret_key in weak_keys:
            raise ValueError(
                f"SECRET_KEY must be set to a secure value in {self.environment} environment. "
                "Generate one with: openssl rand -hex 32"
            )
        return self

    @model_validator(mode="after")
    def validate_work_factor(self) -> "Settings":
        # bcrypt accepts 4..31 rounds
        if not 4 <= self.bcrypt_work_factor <= 31:
            raise ValueError("BCRYPT_WORK_FACTOR must be between 4 and 31")
        return self

    @property
    def database_url(self) -> str:
        return (
            f"postgresql://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_database}"
        )

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()
