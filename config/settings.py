from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	CNB_API_BASE_URL: str = 'https://api.cnb.cz/cnbapi'
	CNB_TIMEOUT: int = 10

	TARGET_CURRENCY: str = 'CZK'
	DEFAULT_CURRENCIES: str = 'USD,EUR,CZK,JPY,KES,RUB,THB,TRY,XYZ'

	# Application
	APP_NAME: str = 'Exchange Rate Updater'
	DEBUG: bool = False
	LOG_LEVEL: str = 'INFO'

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')

	@property
	def default_currency_codes(self) -> list[str]:
		return [code.strip() for code in self.DEFAULT_CURRENCIES.split(',') if code.strip()]


@lru_cache
def get_settings() -> Settings:
	return Settings()
