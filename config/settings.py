from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	BOI_BASE_URL: str = 'https://boi.org.il/PublicApi'
	HTTP_TIMEOUT: float = 10.0

	# Home currency, quoted against itself at 1:1
	LOCAL_CURRENCY: str = 'ILS'

	# Application
	APP_NAME: str = 'Currency Exchange API'
	DEBUG: bool = False
	LOG_LEVEL: str = 'INFO'
	JSON_LOGS: bool = False

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
