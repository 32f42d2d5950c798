from pydantic_settings import BaseSettings
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./todo.db"
    ENV: str = "local"  # Environment setting

    # Server
    HOST: str = "localhost"
    PORT: int = 8000

    # Frontend dev server allowed to call the API
    CORS_ORIGINS: list[str] = ["http://localhost:3001"]

    LOG_LEVEL: str = "INFO"

    # Used by app.client when talking to a running API
    API_BASE_URL: str = "http://localhost:8000"

    class Config:
        env_file = ".env"

settings = Settings()
