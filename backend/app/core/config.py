from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_NAME: str = "Meal Wallet Ledger"
    DEBUG: bool = False
    APP_DATABASE_DSN: str = "sqlite:////tmp/wallet.db"
    LOG_LEVEL: str = "INFO"

    # Admin auth
    JWT_SECRET: str = "change-me"
    JWT_ALGORITHM: str = "HS256"

    # CORS
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    # Wallet ledger
    WALLET_CURRENCY: str = "INR"
    WALLET_MAX_CREDIT_AMOUNT: int = 1_000_000
    WALLET_NOTE_MAX_LENGTH: int = 200
    WALLET_DEFAULT_PAGE_SIZE: int = 50
    WALLET_MAX_PAGE_SIZE: int = 200

    @property
    def version(self) -> str:
        return "0.1.0"

    @property
    def sqlite_enabled(self) -> bool:
        return self.APP_DATABASE_DSN.startswith("sqlite")


settings = Settings()
