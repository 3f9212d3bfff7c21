from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	COUNTRIES_API_URL: str = 'https://restcountries.com/v2'
	RATES_API_URL: str = 'https://api.exchangeratesapi.io'
	RATES_API_KEY: str = ''

	HTTP_TIMEOUT: int = 10
	# Border lookups in flight per request; 1 resolves them strictly one by one
	BORDER_LOOKUP_CONCURRENCY: int = 4

	# Application
	APP_NAME: str = 'Border Exchange API'
	API_VERSION: str = 'v1'
	DEBUG: bool = False
	LOG_LEVEL: str = 'INFO'
	HOST: str = '0.0.0.0'
	PORT: int = 8080

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
