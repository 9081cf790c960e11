import logging
import time
from collections.abc import Sequence

from domain.exceptions.rates import RatesClientError
from domain.models.rates import ExchangeRate
from infrastructure.monitoring.logger import ApiCallLogger
from infrastructure.providers.walutomat import WalutomatRatesProvider

logger = logging.getLogger(__name__)

DEFAULT_CURRENCY_PAIRS = ('USDPLN', 'GBPPLN', 'CHFPLN', 'EURPLN')


class RateCollector:
	"""
	Fetches rates for a list of currency pairs one after another.

	Collection is all-or-nothing: the first failing pair aborts the run, its
	error propagates unchanged and the rates fetched so far are discarded.
	"""

	def __init__(
		self,
		provider: WalutomatRatesProvider,
		pairs: Sequence[str] = DEFAULT_CURRENCY_PAIRS,
		api_logger: ApiCallLogger | None = None,
	):
		self.provider = provider
		self.pairs = list(pairs)
		self._api_logger = api_logger or ApiCallLogger()

	def collect_rates(self, pairs: Sequence[str] | None = None) -> list[ExchangeRate]:
		pairs = list(self.pairs if pairs is None else pairs)
		start_time = time.perf_counter()
		rates: list[ExchangeRate] = []

		for pair in pairs:
			try:
				rates.append(self.provider.fetch_rate(pair))
			except RatesClientError as e:
				logger.error(f'Fetching {pair} failed, aborting collection: {e}')
				self._api_logger.log_rate_collection(
					pairs=pairs,
					success=False,
					duration_ms=(time.perf_counter() - start_time) * 1000,
					completed=len(rates),
					error_message=str(e),
				)
				raise

		self._api_logger.log_rate_collection(
			pairs=pairs,
			success=True,
			duration_ms=(time.perf_counter() - start_time) * 1000,
			completed=len(rates),
		)
		return rates
