class RatesClientError(Exception):
	pass


class ConfigurationError(RatesClientError):
	pass


class KeyLoadError(RatesClientError):
	pass


class SigningError(RatesClientError):
	pass


class TransportError(RatesClientError):
	pass


class ParseError(RatesClientError):
	pass


class TimeFormatError(RatesClientError):
	pass


class ApiError(RatesClientError):
	"""The API answered with ``success: false``."""

	def __init__(self, message: str, errors: list[dict] | None = None, status_code: int | None = None):
		super().__init__(message)
		self.errors = errors or []
		self.status_code = status_code
