import logging

from application.services import RateCollector
from config.settings import Settings
from domain.exceptions.rates import ConfigurationError
from infrastructure.providers import WalutomatRatesProvider
from infrastructure.signing import load_private_key, load_private_key_file

logger = logging.getLogger(__name__)


def load_signing_key(settings: Settings, key_file: str | None = None):
	"""Load the RSA signing key from ``key_file``, inline PEM or the configured path."""
	password = settings.WALUTOMAT_PRIVATE_KEY_PASSWORD or None

	if key_file:
		return load_private_key_file(key_file, password)
	if settings.WALUTOMAT_PRIVATE_KEY:
		return load_private_key(settings.WALUTOMAT_PRIVATE_KEY, password)
	if settings.WALUTOMAT_PRIVATE_KEY_PATH:
		return load_private_key_file(settings.WALUTOMAT_PRIVATE_KEY_PATH, password)

	raise ConfigurationError(
		'No private key configured: set WALUTOMAT_PRIVATE_KEY or WALUTOMAT_PRIVATE_KEY_PATH'
	)


def create_provider(settings: Settings, private_key) -> WalutomatRatesProvider:
	if not settings.WALUTOMAT_API_KEY:
		raise ConfigurationError('WALUTOMAT_API_KEY is not set')

	logger.debug(f'Creating Walutomat provider for {settings.WALUTOMAT_BASE_URL}')
	return WalutomatRatesProvider(
		api_key=settings.WALUTOMAT_API_KEY,
		private_key=private_key,
		base_url=settings.WALUTOMAT_BASE_URL,
		timeout=settings.REQUEST_TIMEOUT,
	)


def create_rate_collector(settings: Settings, provider: WalutomatRatesProvider) -> RateCollector:
	pairs = settings.currency_pairs
	if not pairs:
		raise ConfigurationError('CURRENCY_PAIRS is empty')
	return RateCollector(provider, pairs)
