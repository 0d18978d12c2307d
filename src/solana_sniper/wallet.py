import logging
import re

from solders.keypair import Keypair
from solders.signature import Signature

from . import env
from .errors import InvalidWalletError

LOG = logging.getLogger(__name__)

MIN_PRIVATE_KEY_LENGTH = 85
_BASE58 = re.compile(r"[123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz]+")


def keypair_from_secret(secret: str) -> Keypair:
    """Decode a base58 keypair secret.

    The secret itself never appears in log lines or exception messages.
    """
    secret = secret.strip()
    if len(secret) < MIN_PRIVATE_KEY_LENGTH:
        LOG.error(f"❌ Please check wallet priv key: Invalid length => {len(secret)}")
        raise InvalidWalletError(f"private key too short: {len(secret)} < {MIN_PRIVATE_KEY_LENGTH}")
    if not _BASE58.fullmatch(secret):
        LOG.error("❌ Please check wallet priv key: not base58")
        raise InvalidWalletError("private key is not base58 encoded")
    try:
        # Signature parsing is a checked base58 decode of exactly 64 bytes;
        # Keypair.from_base58_string panics instead of raising on bad input.
        raw = bytes(Signature.from_string(secret))
        return Keypair.from_bytes(raw)
    except ValueError:
        LOG.error("❌ Please check wallet priv key: not a valid keypair")
        raise InvalidWalletError("private key does not decode to a keypair") from None


def import_wallet() -> Keypair:
    return keypair_from_secret(env.required("PRIVATE_KEY"))
