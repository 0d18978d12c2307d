"""Fatal startup errors.

Anything raised from this module means the agent must not become active. The
command line entry point logs the message and exits with a non-zero status.
"""


class FatalConfigError(RuntimeError):
    """Base class for configuration problems that abort startup."""


class MissingEnvironmentError(FatalConfigError):
    def __init__(self, key: str) -> None:
        super().__init__(f"environment variable not present: {key}")
        self.key = key


class InvalidWalletError(FatalConfigError):
    """Raised when PRIVATE_KEY cannot be turned into a signing keypair."""


class ClientConstructionError(FatalConfigError):
    """Raised when an RPC endpoint cannot back a client."""


class ConfigNotInitializedError(FatalConfigError):
    def __init__(self) -> None:
        super().__init__("Config not initialized")
