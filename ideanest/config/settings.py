from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"

    http_host: str = "0.0.0.0"
    http_port: int = 8000
    http_debug: bool = False

    db_host: str = "host.docker.internal"
    db_port: int = 5432
    db_database: str = "ideanest"
    db_username: str = "ideanest"
    db_password: str = "secret"
    db_pool_min_size: int = 1
    db_pool_max_size: int = 10

    min_description_length: int = 150

    evaluation_provider: str = "gemini"
    evaluation_temperature: float = 0.7
    evaluation_max_output_tokens: int = 16384

    evaluation_openai_api_key: str = ""
    evaluation_openai_model_name: str = "gpt-4o-mini"
    evaluation_openai_timeout_seconds: int = 60

    evaluation_openai_compatible_api_key: str = ""
    evaluation_openai_compatible_model_name: str = ""
    evaluation_openai_compatible_base_url: str = ""
    evaluation_openai_compatible_timeout_seconds: int = 60

    evaluation_gemini_api_key: str = ""
    evaluation_gemini_model_name: str = "gemini-2.0-flash"
    evaluation_gemini_timeout_seconds: int = 60

    evaluation_openrouter_api_key: str = ""
    evaluation_openrouter_model_name: str = ""
    evaluation_openrouter_timeout_seconds: int = 60

    evaluation_groq_api_key: str = ""
    evaluation_groq_model_name: str = ""
    evaluation_groq_timeout_seconds: int = 60

    evaluation_ollama_api_key: str = "ollama"
    evaluation_ollama_model_name: str = ""
    evaluation_ollama_timeout_seconds: int = 120
