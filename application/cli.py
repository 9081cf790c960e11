import argparse
import json
import logging
import sys

from pydantic import ValidationError

from application.dependencies import create_provider, create_rate_collector, load_signing_key
from application.schemas import ExchangeRateResponse
from config.settings import LOG_LEVELS, Settings, get_settings
from domain.exceptions.rates import ConfigurationError, RatesClientError
from infrastructure.monitoring.logger import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(
		prog='walutomat-rates',
		description='Fetch signed direct FX rates from the Walutomat API.',
	)
	parser.add_argument(
		'-p', '--pair',
		action='append',
		dest='pairs',
		metavar='PAIR',
		help='Currency pair to fetch, e.g. EURPLN. Repeat for several pairs. '
		'Defaults to CURRENCY_PAIRS.',
	)
	parser.add_argument('--key-file', help='PEM file with the RSA private key')
	parser.add_argument('--json', action='store_true', help='Print rates as a JSON array')
	parser.add_argument(
		'--log-level',
		type=str.upper,
		choices=LOG_LEVELS,
		help='Console log level (overrides LOG_LEVEL)',
	)
	return parser


def load_settings() -> Settings:
	try:
		return get_settings()
	except ValidationError as e:
		problems = '; '.join(
			f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}" for error in e.errors()
		)
		raise ConfigurationError(f'Invalid configuration: {problems}') from e


def main(argv: list[str] | None = None, settings: Settings | None = None) -> int:
	args = build_parser().parse_args(argv)
	try:
		settings = settings or load_settings()
		configure_logging(
			level=args.log_level or settings.LOG_LEVEL,
			json_output=settings.LOG_JSON,
			log_file=settings.LOG_FILE or None,
		)
		private_key = load_signing_key(settings, key_file=args.key_file)
		with create_provider(settings, private_key) as provider:
			collector = create_rate_collector(settings, provider)
			pairs = [pair.strip().upper() for pair in args.pairs] if args.pairs else None
			rates = collector.collect_rates(pairs)
	except RatesClientError as e:
		logger.error(f'{e.__class__.__name__}: {e}')
		print(f'Error: {e}', file=sys.stderr)
		return 1

	responses = [ExchangeRateResponse.from_domain(rate) for rate in rates]
	if args.json:
		print(json.dumps([response.model_dump(mode='json') for response in responses], indent=2))
	else:
		for response in responses:
			print(response.to_line())
	return 0


if __name__ == '__main__':
	sys.exit(main())
