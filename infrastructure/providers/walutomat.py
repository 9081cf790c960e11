import logging
import re
import time
from collections.abc import Callable
from datetime import datetime

import httpx
from pydantic import ValidationError

from domain.exceptions.rates import ApiError, ConfigurationError, ParseError, RatesClientError, TransportError
from domain.models.rates import ExchangeRate
from infrastructure.monitoring.logger import ApiCallLogger
from infrastructure.providers.schemas import DirectFxRate, DirectFxRatesEnvelope
from infrastructure.signing.signer import sign_request
from infrastructure.utils.time import format_rfc3339, parse_rfc3339, utc_now

logger = logging.getLogger(__name__)

CURRENCY_PAIR_PATTERN = re.compile(r'[A-Z]{6}')


class WalutomatRatesProvider:
	BASE_URL = 'https://api.walutomat.pl'
	RATES_ENDPOINT = '/api/v2.0.0/direct_fx/rates?currencyPair='

	def __init__(
		self,
		api_key: str,
		private_key,
		base_url: str | None = None,
		client: httpx.Client | None = None,
		timeout: float | None = 10,
		clock: Callable[[], datetime] = utc_now,
		api_logger: ApiCallLogger | None = None,
	):
		self.api_key = api_key
		self.private_key = private_key
		self.base_url = (base_url or self.BASE_URL).rstrip('/')
		self._client = client or httpx.Client(timeout=timeout)
		self._clock = clock
		self._api_logger = api_logger or ApiCallLogger()

	@property
	def name(self) -> str:
		return 'walutomat'

	def _signed_headers(self, path: str, body: str = '') -> dict[str, str]:
		timestamp = format_rfc3339(self._clock())
		return {
			'X-API-Key': self.api_key,
			'X-API-Signature': sign_request(timestamp, path, body, self.private_key),
			'X-API-Timestamp': timestamp,
		}

	def _request(self, path: str) -> httpx.Response:
		headers = self._signed_headers(path)
		try:
			response = self._client.get(f'{self.base_url}{path}', headers=headers)
		except httpx.RequestError as e:
			raise TransportError(f'Walutomat request failed: {e.__class__.__name__}: {str(e)}') from e

		if not response.is_success:
			logger.warning(f'Walutomat answered HTTP {response.status_code} for {path}')
		return response

	def _parse_rate(self, response: httpx.Response) -> ExchangeRate:
		try:
			envelope = DirectFxRatesEnvelope.model_validate_json(response.content)
		except ValidationError as e:
			raise ParseError(f'Walutomat response parsing error: {str(e)}') from e

		if not envelope.success:
			descriptions = [error.description or error.key or 'Unknown error' for error in envelope.errors]
			raise ApiError(
				f"Walutomat API error: {'; '.join(descriptions) or 'Unknown error'}",
				errors=[error.model_dump() for error in envelope.errors],
				status_code=response.status_code,
			)

		if envelope.result is None:
			raise ParseError('Walutomat response has no result')

		try:
			result = DirectFxRate.model_validate(envelope.result)
		except ValidationError as e:
			raise ParseError(f'Walutomat rate parsing error: {str(e)}') from e

		return ExchangeRate(
			timestamp=parse_rfc3339(result.ts),
			currency_pair=result.currency_pair,
			buy_rate=result.buy_rate,
			sell_rate=result.sell_rate,
		)

	def fetch_rate(self, pair: str) -> ExchangeRate:
		# the path is signed verbatim, so it must not need URL encoding
		if not isinstance(pair, str) or not CURRENCY_PAIR_PATTERN.fullmatch(pair):
			raise ConfigurationError(f'Invalid currency pair: {pair!r}')

		path = f'{self.RATES_ENDPOINT}{pair}'
		start_time = time.perf_counter()
		status_code = None
		try:
			response = self._request(path)
			status_code = response.status_code
			rate = self._parse_rate(response)
		except RatesClientError as e:
			self._api_logger.log_api_call(
				provider_name=self.name,
				endpoint=path,
				success=False,
				response_time_ms=(time.perf_counter() - start_time) * 1000,
				status_code=status_code,
				error_message=str(e),
			)
			raise

		self._api_logger.log_api_call(
			provider_name=self.name,
			endpoint=path,
			success=True,
			response_time_ms=(time.perf_counter() - start_time) * 1000,
			status_code=status_code,
			rate_data={'buy_rate': rate.buy_rate, 'sell_rate': rate.sell_rate, 'ts': rate.timestamp},
		)
		return rate

	def close(self) -> None:
		self._client.close()

	def __enter__(self):
		return self

	def __exit__(self, exc_type, exc, tb):
		self.close()
