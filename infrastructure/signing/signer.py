import base64
from abc import ABC, abstractmethod
from dataclasses import dataclass

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding, rsa, utils

from domain.exceptions.rates import SigningError


@dataclass(frozen=True)
class SignedRequestContext:
	"""The parts of a request covered by the signature."""

	timestamp: str
	path: str
	body: str = ''

	def canonical_message(self) -> bytes:
		return f'{self.timestamp}{self.path}{self.body}'.encode('utf-8')

	def digest(self) -> bytes:
		hasher = hashes.Hash(hashes.SHA256())
		hasher.update(self.canonical_message())
		return hasher.finalize()


class AsymmetricSigner(ABC):
	"""Signs a SHA-256 digest with one kind of private key."""

	@abstractmethod
	def sign(self, digest: bytes) -> bytes:
		...


class RSASigner(AsymmetricSigner):
	def __init__(self, key: rsa.RSAPrivateKey):
		self.key = key

	def sign(self, digest: bytes) -> bytes:
		return self.key.sign(digest, padding.PKCS1v15(), utils.Prehashed(hashes.SHA256()))


SIGNERS: dict[type, type[AsymmetricSigner]] = {
	rsa.RSAPrivateKey: RSASigner,
}


def signer_for_key(key) -> AsymmetricSigner:
	for key_type, signer_cls in SIGNERS.items():
		if isinstance(key, key_type):
			return signer_cls(key)
	raise SigningError(f'Unsupported key type: {type(key).__name__}')


def sign_request(timestamp: str, path: str, body: str, key) -> str:
	"""
	Sign ``timestamp + path + body`` and return the base64 signature.

	The server rebuilds the same message from the X-API-Timestamp header and
	the request path, so ``timestamp`` must be sent exactly as given here.
	"""
	signer = signer_for_key(key)
	context = SignedRequestContext(timestamp=timestamp, path=path, body=body)
	try:
		signature = signer.sign(context.digest())
	except Exception as e:
		raise SigningError(f'Signing failed: {str(e)}') from e
	return base64.b64encode(signature).decode('ascii')


def verify_signature(public_key: rsa.RSAPublicKey, signature: str, timestamp: str, path: str, body: str = '') -> bool:
	context = SignedRequestContext(timestamp=timestamp, path=path, body=body)
	try:
		public_key.verify(
			base64.b64decode(signature),
			context.digest(),
			padding.PKCS1v15(),
			utils.Prehashed(hashes.SHA256()),
		)
	except (InvalidSignature, ValueError):
		return False
	return True
