from typing import Self

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.platform.constant.path import ENV_PATH
from src.platform.exception.exceptions import ConfigurationError


_LOG_LEVELS = ('TRACE', 'DEBUG', 'INFO', 'SUCCESS', 'WARNING', 'ERROR', 'CRITICAL')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix='THEATRE_SIM_',
        env_file=str(ENV_PATH) if ENV_PATH.exists() else None,
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Theatre Booking Simulator'
    VERSION: str = '0.1.0'
    DEBUG: bool = False  # Adds DEBUG console output and a rotating log file
    LOG_LEVEL: str = 'WARNING'  # stderr only; stdout is reserved for the report
    SERVICE_NAME: str = 'theatre-booking'

    # Theatre complex
    THEATRE_COUNT: int = 3
    SEATS_PER_THEATRE: int = 20

    # Customers
    CUSTOMER_COUNT: int = 100
    MIN_SEATS_PER_REQUEST: int = 1
    MAX_SEATS_PER_REQUEST: int = 3

    # Confirmation delay after a successful grab (milliseconds, inclusive)
    CONFIRMATION_DELAY_MIN_MS: int = 500
    CONFIRMATION_DELAY_MAX_MS: int = 1000

    # Overall await for worker quiescence
    AWAIT_DEADLINE_SECONDS: float = 60.0

    @field_validator('LOG_LEVEL', mode='before')
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = str(v).strip().upper()
        if level not in _LOG_LEVELS:
            raise ConfigurationError(f'Unknown LOG_LEVEL {v!r}, expected one of {_LOG_LEVELS}')
        return level

    @model_validator(mode='after')
    def check_scenario(self) -> Self:
        for name in (
            'THEATRE_COUNT',
            'SEATS_PER_THEATRE',
            'CUSTOMER_COUNT',
            'MIN_SEATS_PER_REQUEST',
        ):
            if getattr(self, name) < 1:
                raise ConfigurationError(f'{name} must be positive, got {getattr(self, name)}')
        if self.MIN_SEATS_PER_REQUEST > self.MAX_SEATS_PER_REQUEST:
            raise ConfigurationError('MIN_SEATS_PER_REQUEST exceeds MAX_SEATS_PER_REQUEST')
        if self.MAX_SEATS_PER_REQUEST > self.SEATS_PER_THEATRE:
            raise ConfigurationError('MAX_SEATS_PER_REQUEST exceeds SEATS_PER_THEATRE')
        if self.CONFIRMATION_DELAY_MIN_MS < 0:
            raise ConfigurationError('CONFIRMATION_DELAY_MIN_MS must not be negative')
        if self.CONFIRMATION_DELAY_MIN_MS > self.CONFIRMATION_DELAY_MAX_MS:
            raise ConfigurationError('CONFIRMATION_DELAY_MIN_MS exceeds CONFIRMATION_DELAY_MAX_MS')
        if self.AWAIT_DEADLINE_SECONDS <= 0:
            raise ConfigurationError('AWAIT_DEADLINE_SECONDS must be positive')
        return self


settings = Settings()  # type: ignore
