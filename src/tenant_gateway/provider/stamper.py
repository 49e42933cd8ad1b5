"""
tenant_gateway.provider.stamper

API-key request stamping for the Turnkey API.

Responsibilities:
- Sign the exact request body with the configured P-256 API private key.
- Encode the signature as the `X-Stamp` header value Turnkey expects.
"""

from __future__ import annotations

import base64
import json
from dataclasses import dataclass

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec

STAMP_HEADER = "X-Stamp"
SIGNATURE_SCHEME = "SIGNATURE_SCHEME_TK_API_P256"


@dataclass(frozen=True, slots=True)
class ApiKeyStamper:
    # Both keys are hex: compressed public point, raw private scalar.
    public_key: str
    private_key: str

    def _signing_key(self) -> ec.EllipticCurvePrivateKey:
        return ec.derive_private_key(int(self.private_key, 16), ec.SECP256R1())

    def stamp(self, payload: bytes) -> tuple[str, str]:
        signature = self._signing_key().sign(payload, ec.ECDSA(hashes.SHA256()))
        stamp = {
            "publicKey": self.public_key,
            "scheme": SIGNATURE_SCHEME,
            "signature": signature.hex(),
        }
        encoded = base64.urlsafe_b64encode(json.dumps(stamp).encode("utf-8"))
        return STAMP_HEADER, encoded.rstrip(b"=").decode("ascii")


# --- Module Notes -----------------------------------------------------------
# The signature covers the serialized body byte-for-byte, so callers must send the
# same bytes they stamped (see `TurnkeyClient._post`).
