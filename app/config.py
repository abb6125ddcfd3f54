from pydantic_settings import BaseSettings
from app.schemas.property import PropertyFilter

class Settings(BaseSettings):
    PROPERTY_API_URL: str = "https://android-kotlin-fun-mars-server.appspot.com"
    PROPERTY_API_TIMEOUT: float = 30.0
    DEFAULT_FILTER: PropertyFilter = PropertyFilter.SHOW_ALL

    class Config:
        env_file = ".env"

settings = Settings()
