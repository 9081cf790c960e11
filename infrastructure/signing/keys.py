import logging
from pathlib import Path

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from domain.exceptions.rates import KeyLoadError

logger = logging.getLogger(__name__)


def load_private_key(pem: bytes | str, password: str | None = None) -> rsa.RSAPrivateKey:
	"""Parse a PEM private key (PKCS#1 ``RSA PRIVATE KEY`` or PKCS#8)."""
	if isinstance(pem, str):
		pem = pem.encode('utf-8')
	if b'-----BEGIN' not in pem:
		raise KeyLoadError('Unable to PEM decode private key')

	try:
		key = serialization.load_pem_private_key(
			pem, password=password.encode('utf-8') if password else None
		)
	except (ValueError, TypeError, UnsupportedAlgorithm) as e:
		raise KeyLoadError(f'Unable to parse private key: {str(e)}') from e

	if not isinstance(key, rsa.RSAPrivateKey):
		raise KeyLoadError(f'Expected an RSA private key, got {type(key).__name__}')

	logger.debug(f'Loaded {key.key_size}-bit RSA private key')
	return key


def load_private_key_file(path: str | Path, password: str | None = None) -> rsa.RSAPrivateKey:
	path = Path(path)
	try:
		pem = path.read_bytes()
	except OSError as e:
		raise KeyLoadError(f'Unable to read private key file {path}: {e.strerror}') from e
	return load_private_key(pem, password)
