import os
import unittest
from unittest.mock import patch

from solana.rpc.api import Client
from solana.rpc.async_api import AsyncClient
from solana.rpc.commitment import Processed

from solana_sniper.clients import (
    create_nonblocking_rpc_client,
    create_nozomi_nonblocking_rpc_client,
    create_rpc_client,
    validate_endpoint,
)
from solana_sniper.errors import ClientConstructionError, MissingEnvironmentError

ENDPOINTS = {"RPC_HTTP": "https://rpc.example.com", "NOZOMI_URL": "http://nozomi.example.com:8080"}


class ValidateEndpointTests(unittest.TestCase):
    def test_accepts_http_and_https(self) -> None:
        self.assertEqual(validate_endpoint(" https://rpc.example.com "), "https://rpc.example.com")
        self.assertEqual(validate_endpoint("http://127.0.0.1:8899"), "http://127.0.0.1:8899")

    def test_rejects_malformed_endpoints(self) -> None:
        for endpoint in ("", "rpc.example.com", "ws://rpc.example.com", "https://"):
            with self.subTest(endpoint=endpoint):
                with self.assertRaises(ClientConstructionError):
                    validate_endpoint(endpoint)


class ClientFactoryTests(unittest.TestCase):
    def test_builds_three_processed_clients(self) -> None:
        with patch.dict(os.environ, ENDPOINTS, clear=True):
            blocking = create_rpc_client()
            nonblocking = create_nonblocking_rpc_client()
            nozomi = create_nozomi_nonblocking_rpc_client()

        self.assertIsInstance(blocking, Client)
        self.assertIsInstance(nonblocking, AsyncClient)
        self.assertIsInstance(nozomi, AsyncClient)
        self.assertIsNot(nonblocking, nozomi)
        for client in (blocking, nonblocking, nozomi):
            self.assertEqual(client.commitment, Processed)

    def test_clients_have_no_request_timeout(self) -> None:
        with patch.dict(os.environ, ENDPOINTS, clear=True), \
                patch("solana_sniper.clients.Client") as blocking_cls, \
                patch("solana_sniper.clients.AsyncClient") as async_cls:
            create_rpc_client()
            create_nonblocking_rpc_client()
            create_nozomi_nonblocking_rpc_client()

        blocking_cls.assert_called_once_with(ENDPOINTS["RPC_HTTP"], commitment=Processed, timeout=None)
        self.assertEqual(async_cls.call_count, 2)
        for call in async_cls.call_args_list:
            self.assertIsNone(call.kwargs["timeout"])
            self.assertEqual(call.kwargs["commitment"], Processed)

    def test_malformed_endpoint_propagates(self) -> None:
        with patch.dict(os.environ, {"RPC_HTTP": "not a url", "NOZOMI_URL": ENDPOINTS["NOZOMI_URL"]}, clear=True):
            with self.assertRaises(ClientConstructionError):
                create_rpc_client()

    def test_missing_relay_endpoint_is_fatal(self) -> None:
        with patch.dict(os.environ, {"RPC_HTTP": ENDPOINTS["RPC_HTTP"]}, clear=True):
            with self.assertRaises(MissingEnvironmentError):
                create_nozomi_nonblocking_rpc_client()


if __name__ == "__main__":
    unittest.main()
