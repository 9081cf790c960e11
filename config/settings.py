from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class Settings(BaseSettings):
	WALUTOMAT_API_KEY: str = ''
	WALUTOMAT_BASE_URL: str = 'https://api.walutomat.pl'

	# PEM text takes precedence over the key file
	WALUTOMAT_PRIVATE_KEY: str = ''
	WALUTOMAT_PRIVATE_KEY_PATH: str = ''
	WALUTOMAT_PRIVATE_KEY_PASSWORD: str = ''

	CURRENCY_PAIRS: str = 'USDPLN,GBPPLN,CHFPLN,EURPLN'
	REQUEST_TIMEOUT: float | None = 10

	# Logging
	LOG_LEVEL: str = 'INFO'
	LOG_JSON: bool = False
	LOG_FILE: str = ''

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')

	@field_validator('REQUEST_TIMEOUT', mode='before')
	@classmethod
	def parse_disabled_timeout(cls, value):
		# '', 'none' and 'null' turn the timeout off
		if isinstance(value, str) and value.strip().lower() in ('', 'none', 'null'):
			return None
		return value

	@field_validator('LOG_LEVEL')
	@classmethod
	def validate_log_level(cls, value: str) -> str:
		level = value.strip().upper()
		if level not in LOG_LEVELS:
			raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
		return level

	@property
	def currency_pairs(self) -> list[str]:
		return [pair.strip().upper() for pair in self.CURRENCY_PAIRS.split(',') if pair.strip()]


@lru_cache
def get_settings() -> Settings:
	return Settings()
