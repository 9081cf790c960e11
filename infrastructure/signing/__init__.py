from .keys import load_private_key, load_private_key_file
from .signer import AsymmetricSigner, RSASigner, SignedRequestContext, sign_request, signer_for_key, verify_signature

__all__ = [
	'AsymmetricSigner',
	'RSASigner',
	'SignedRequestContext',
	'load_private_key',
	'load_private_key_file',
	'sign_request',
	'signer_for_key',
	'verify_signature',
]
