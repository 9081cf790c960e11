from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class ExchangeRate:
	timestamp: datetime  # server-reported transaction time
	currency_pair: str
	buy_rate: Decimal
	sell_rate: Decimal
