from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    APP_NAME: str = "Data Agent API"
    API_V1_PREFIX: str = "/api/v1"

    # LLM providers
    LLM_PROVIDER: str = "gemini"  # or "ollama", "sample"
    GEMINI_API_KEY: str = ""
    GEMINI_MODEL: str = "gemini-2.0-flash"
    OLLAMA_HOST: str = "http://ollama:11434"
    OLLAMA_MODEL: str = "gemma:2b"
    OLLAMA_TIMEOUT: float = 120

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

settings = Settings()
