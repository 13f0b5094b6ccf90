from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Decimal context precision used for square roots
    decimal_precision: int = 28

    class Config:
        env_prefix = "TRADETOOLS_"
        env_file = ".env"


settings = Settings()
