import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    ERROR_SEPARATOR: str = os.getenv("ERROR_SEPARATOR", ", ")


settings = Settings()
