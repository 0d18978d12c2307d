import os
import unittest
from unittest.mock import patch

from solana_sniper import config
from solana_sniper.cli import main


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        config._reset()

    def tearDown(self) -> None:
        config._reset()

    def test_missing_required_variable_exits_non_zero(self) -> None:
        with patch.dict(os.environ, {}, clear=True), patch("solana_sniper.cli.load_env_file") as load_env:
            with self.assertLogs("solana_sniper", level="ERROR") as logs:
                status = main([])

        self.assertEqual(status, 1)
        load_env.assert_called_once_with(None)
        self.assertTrue(any("YELLOWSTONE_GRPC_HTTP" in line for line in logs.output))
        self.assertFalse(config.is_initialized())

    def test_success_exits_zero(self) -> None:
        async def fake_initialize():
            return object()

        with patch("solana_sniper.cli.load_env_file"), patch("solana_sniper.cli.initialize", new=fake_initialize):
            self.assertEqual(main(["--log-level", "WARNING"]), 0)


if __name__ == "__main__":
    unittest.main()
