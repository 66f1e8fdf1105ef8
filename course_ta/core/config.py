from pydantic import Field
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Database (required)
    database_url: str = Field(min_length=1)

    # OpenAI (required)
    openai_api_key: str = Field(min_length=1)
    # openai_model: str = "gpt-4o"
    openai_model: str = "gpt-4o-mini"  # Cheap and fast, good enough for grounded answers
    embedding_model: str = "text-embedding-3-small"
    temperature: float = 0.5
    max_output_tokens: int = 1000

    # Chroma vector index (api key required)
    chroma_api_key: str = Field(min_length=1)
    chroma_host: str = "localhost"
    chroma_port: int = 8000
    chroma_ssl: bool = False
    chroma_tenant: str = "default_tenant"
    chroma_database: str = "default_database"
    vector_index_name: str = "vta-data-privacy"
    namespace_field: str = "namespace"
    top_k: int = 5

    # Conversation
    default_module: str = "syllabus"
    history_limit: int = 20
    session_cookie_name: str = "sessionId"

    # URLs
    frontend_url: str = "http://localhost:3000"

    # Logging
    log_level: str = "INFO"
    log_rich: bool = True

    class Config:
        env_file = ".env"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    return Settings()
