from pydantic_settings import BaseSettings, SettingsConfigDict
import logging

class Settings(BaseSettings):
    APP_TITLE: str = "Inverse-Square Fit Service"
    API_PREFIX: str = "/api/v1"
    LOG_LEVEL: str = "INFO"

    # Transform served by the fixed endpoint; kebab-case name or legacy label
    FIXED_TRANSFORM: str = "neg-log-complement"
    RESULT_DECIMALS: int = 6
    MIN_POINTS: int = 2

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    def log_level(self) -> int:
        level = logging.getLevelName(self.LOG_LEVEL.upper())
        return level if isinstance(level, int) else logging.INFO

    def fixed_transform(self):
        from fitservice.app.services.transforms import lookup
        return lookup(self.FIXED_TRANSFORM)

settings = Settings()
