from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    SERVICE_NAME: str = "edumanage"
    DATABASE_URL: str = "sqlite:///./edumanage.db"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = ["*"]
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
