from typing import List
from pydantic_settings import BaseSettings
from pydantic import ConfigDict
from dotenv import load_dotenv

# Force load .env file
load_dotenv()

class Settings(BaseSettings):
    model_config = ConfigDict(env_file=".env", extra='allow')
    environment: str = "development"
    cors_origins: List[str] = ["*"]

    # Groq settings
    groq_api_key: str = ""
    groq_model: str = "llama-3.1-8b-instant"
    fact_temperature: float = 0.9
    fact_timeout_seconds: float = 15.0

    # Form limits
    max_dog_age: float = 30

    # In-memory sessions
    max_sessions: int = 1000

settings = Settings()
