import unittest
from unittest import mock

import httpx
from typer.testing import CliRunner

from cli.main import app
from core.config import DEFAULT_LIST_ADDRESS
from core.domain.errors import DecodeError, TransportError
from core.domain.models import ServerDirectory

SAMPLE = ServerDirectory.model_validate(
    {
        "list": [
            {"address": "1.2.3.4", "port": 30000, "name": "Foo", "mods": ["a", "b"]},
            {"address": "5.6.7.8", "port": 30001, "name": "Bar"},
        ]
    }
)


class TestCli(unittest.TestCase):

    def setUp(self):
        self.runner = CliRunner()
        patcher = mock.patch("cli.main.fetch_directory", return_value=SAMPLE)
        self.fetch = patcher.start()
        self.addCleanup(patcher.stop)

    def test_projects_key(self):
        result = self.runner.invoke(app, ["name"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.stdout, "1.2.3.4:30000\tFoo\n5.6.7.8:30001\tBar\n")
        self.assertEqual(self.fetch.call_args.args, (DEFAULT_LIST_ADDRESS,))

    def test_projects_array_key(self):
        result = self.runner.invoke(app, ["mods"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.stdout, "1.2.3.4:30000\ta\n1.2.3.4:30000\tb\n")

    def test_show_keys(self):
        result = self.runner.invoke(app, ["--show-keys"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.stdout, "available keys: address, mods, name, port\n")

    def test_show_keys_then_key(self):
        result = self.runner.invoke(app, ["-s", "name"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(
            result.stdout.splitlines(),
            ["available keys: address, mods, name, port", "1.2.3.4:30000\tFoo", "5.6.7.8:30001\tBar"],
        )

    def test_unknown_key_after_keys_listing(self):
        result = self.runner.invoke(app, ["--show-keys", "missing"])
        self.assertEqual(result.exit_code, 1)
        self.assertTrue(result.stdout.startswith("available keys: address, mods, name, port\n"))
        self.assertIn("invalid key", result.output)
        self.assertNotIn("\t", result.stdout)

    def test_no_arguments_prints_help_without_fetching(self):
        result = self.runner.invoke(app, [])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Usage", result.output)
        self.fetch.assert_not_called()

    def test_address_option(self):
        result = self.runner.invoke(app, ["--address", "http://localhost:8000/list", "name"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(self.fetch.call_args.args, ("http://localhost:8000/list",))

    def test_empty_address_is_not_replaced_by_default(self):
        result = self.runner.invoke(app, ["--address", "", "name"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(self.fetch.call_args.args, ("",))

    def test_timeout_option(self):
        result = self.runner.invoke(app, ["--timeout", "2.5", "name"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(self.fetch.call_args.kwargs["settings"].http_timeout_seconds, 2.5)

    def test_invalid_timeout(self):
        result = self.runner.invoke(app, ["--timeout", "0", "name"])
        self.assertNotEqual(result.exit_code, 0)
        self.fetch.assert_not_called()

    def test_transport_error(self):
        self.fetch.side_effect = TransportError("request to x failed: boom")
        result = self.runner.invoke(app, ["name"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("boom", result.output)
        self.assertNotIn("\t", result.output)

    def test_decode_error(self):
        self.fetch.side_effect = DecodeError("unexpected server list payload")
        result = self.runner.invoke(app, ["--show-keys"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("unexpected server list payload", result.output)
        self.assertNotIn("available keys", result.output)


class TestCliOverHttp(unittest.TestCase):
    """Runs the real fetcher against an in-memory transport."""

    def setUp(self):
        self.runner = CliRunner()
        self.requests = []

    def _patch_client(self, handler):
        def fake_build_client(settings=None):
            def recording(request):
                self.requests.append(str(request.url))
                return handler(request)

            return httpx.Client(transport=httpx.MockTransport(recording))

        patcher = mock.patch("adapters.server_list.build_client", fake_build_client)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_end_to_end(self):
        self._patch_client(
            lambda request: httpx.Response(
                200,
                json={"list": [{"address": "srv", "port": 1, "version": "5.8.0"}, {"name": "no version"}]},
            )
        )
        result = self.runner.invoke(app, ["-a", "http://list.local/list", "version"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.stdout, "srv:1\t5.8.0\n")
        self.assertEqual(self.requests, ["http://list.local/list"])

    def test_http_failure_exits_non_zero(self):
        self._patch_client(lambda request: httpx.Response(404))
        result = self.runner.invoke(app, ["-a", "http://list.local/missing", "name"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("404", result.output)

    def test_malformed_address_is_reported(self):
        self._patch_client(lambda request: httpx.Response(200, json={"list": []}))
        result = self.runner.invoke(app, ["-a", "http://[::1", "name"])
        self.assertEqual(result.exit_code, 1)
        self.assertIsInstance(result.exception, SystemExit)
        self.assertIn("error:", result.output)
        self.assertEqual(self.requests, [])

    def test_non_finite_number_exits_non_zero(self):
        self._patch_client(
            lambda request: httpx.Response(200, content=b'{"list":[{"address":"h","port":1,"x":NaN}]}')
        )
        result = self.runner.invoke(app, ["x"])
        self.assertEqual(result.exit_code, 1)
        self.assertNotIn("\t", result.output)

    def test_bad_shape_exits_non_zero(self):
        self._patch_client(lambda request: httpx.Response(200, json=[{"name": "x"}]))
        result = self.runner.invoke(app, ["name"])
        self.assertEqual(result.exit_code, 1)
        self.assertNotIn("\t", result.output)


if __name__ == "__main__":
    unittest.main()
