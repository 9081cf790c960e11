import re
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

# rates travel as plain decimal strings, e.g. "4.3012"
DECIMAL_STRING_PATTERN = re.compile(r'-?[0-9]+(\.[0-9]+)?')


class ApiErrorDetail(BaseModel):
	model_config = ConfigDict(extra='allow')

	key: str | None = None
	description: str | None = None


class DirectFxRatesEnvelope(BaseModel):
	success: bool
	result: dict | None = None
	errors: list[ApiErrorDetail] = Field(default_factory=list)


class DirectFxRate(BaseModel):
	ts: str
	currency_pair: str = Field(alias='currencyPair')
	buy_rate: Decimal = Field(alias='buyRate', allow_inf_nan=False)
	sell_rate: Decimal = Field(alias='sellRate', allow_inf_nan=False)

	@field_validator('buy_rate', 'sell_rate', mode='before')
	@classmethod
	def require_decimal_string(cls, value):
		if not isinstance(value, str):
			raise ValueError(f'Rate must be a decimal string, got {type(value).__name__}')
		if not DECIMAL_STRING_PATTERN.fullmatch(value):
			raise ValueError(f'Rate is not a plain decimal: {value!r}')
		return value
