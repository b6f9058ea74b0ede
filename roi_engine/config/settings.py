from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    default_discount_rate: float = 10.0
    hurdle_rate: float = 15.0
    max_acceptable_payback_months: float = 36.0
    storage_dir: str = ".roi_engine"
    storage_key: str = "roi-calculator-storage"
    cors_origins: list[str] = ["http://localhost:3000"]
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "ROI_"
