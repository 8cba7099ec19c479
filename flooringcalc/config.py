from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./flooringcalc.db"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = ["*"]

    # Site identity used in head tags and structured data
    SITE_NAME: str = "Flooring Master Calculators"
    SITE_URL: str = "https://flooringmastercalculators.netlify.app"
    PUBLISHER_NAME: str = "FlooringCalc Pro"
    TWITTER_SITE: str = "@FlooringCalc"

    # When false, POST /api/calculations answers 404
    STORE_CALCULATIONS: bool = True

    class Config:
        env_file = ".env"


settings = Settings()
