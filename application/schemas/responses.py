from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from domain.models.rates import ExchangeRate


class ExchangeRateResponse(BaseModel):
	timestamp: datetime = Field(..., description='Transaction time reported by the API')
	currency_pair: str = Field(..., description='Currency pair code, e.g. EURPLN')
	buy_rate: Decimal = Field(..., description='Rate at which the API buys the base currency')
	sell_rate: Decimal = Field(..., description='Rate at which the API sells the base currency')

	@classmethod
	def from_domain(cls, rate: ExchangeRate) -> 'ExchangeRateResponse':
		return cls(
			timestamp=rate.timestamp,
			currency_pair=rate.currency_pair,
			buy_rate=rate.buy_rate,
			sell_rate=rate.sell_rate,
		)

	def to_line(self) -> str:
		return f'{self.currency_pair}  buy={self.buy_rate}  sell={self.sell_rate}  ts={self.timestamp.isoformat()}'
