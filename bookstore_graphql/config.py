"""Server configuration settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Server settings loaded from environment variables."""

    # API settings
    host: str = "0.0.0.0"
    port: int = 1234

    # Response body of GET /
    greeting: str = "hello world"

    # Load the fixture authors and books at startup
    seed_fixtures: bool = True

    # Serve the GraphiQL IDE on GET /graphql
    graphiql: bool = True

    log_level: str = "INFO"

    class Config:
        env_prefix = "BOOKSTORE_"
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
