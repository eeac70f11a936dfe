from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    DATABASE_URL: str
    DB_SCHEMA: str = "game"
    ROOT_PATH: str = ""
    LOG_LEVEL: str = "INFO"

    # Tables are normally created by SQL migrations
    AUTO_CREATE_TABLES: bool = False

    # Equipment
    EQUIP_MAX_RETRIES: int = 3
    EQUIP_REQUIRES_OWNERSHIP: bool = False

settings = Settings()
