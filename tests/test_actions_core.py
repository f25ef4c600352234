"""Tests for the GitHub Actions host bindings (actions_core.py)."""

import io
import os
import tempfile
import unittest
from unittest.mock import patch

import actions_core


class TestGetInput(unittest.TestCase):
    @patch.dict(os.environ, {"INPUT_RESOURCE_ID": "  TSK-1 \n"}, clear=True)
    def test_trims_by_default(self):
        self.assertEqual(actions_core.get_input("resource_id"), "TSK-1")

    @patch.dict(os.environ, {"INPUT_BODY_TEXT": "  hello \n"}, clear=True)
    def test_trim_can_be_disabled(self):
        self.assertEqual(
            actions_core.get_input("body_text", trim_whitespace=False), "  hello \n"
        )

    @patch.dict(os.environ, {"INPUT_MY_INPUT": "value"}, clear=True)
    def test_spaces_map_to_underscores(self):
        self.assertEqual(actions_core.get_input("my input"), "value")

    @patch.dict(os.environ, {}, clear=True)
    def test_missing_optional_input(self):
        self.assertEqual(actions_core.get_input("workspace_slug"), "")

    @patch.dict(os.environ, {}, clear=True)
    def test_missing_required_input(self):
        with self.assertRaises(actions_core.InputError) as ctx:
            actions_core.get_input("api_key", required=True)
        self.assertEqual(str(ctx.exception), "Input required and not supplied: api_key")


class TestSetOutput(unittest.TestCase):
    def test_appends_to_github_output_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "output")
            with patch.dict(os.environ, {"GITHUB_OUTPUT": path}):
                actions_core.set_output("comment_id", "comment-123")

            with open(path, encoding="utf-8") as fh:
                lines = fh.read().splitlines()

        self.assertEqual(len(lines), 3)
        name, delimiter = lines[0].split("<<")
        self.assertEqual(name, "comment_id")
        self.assertEqual(lines[1], "comment-123")
        self.assertEqual(lines[2], delimiter)

    @patch.dict(os.environ, {}, clear=True)
    @patch("sys.stdout", new_callable=io.StringIO)
    def test_legacy_command_without_output_file(self, mock_stdout):
        actions_core.set_output("comment_id", "comment-123")
        self.assertEqual(
            mock_stdout.getvalue(), "::set-output name=comment_id::comment-123\n"
        )


class TestSetFailed(unittest.TestCase):
    @patch("sys.stdout", new_callable=io.StringIO)
    def test_emits_escaped_error_command(self, mock_stdout):
        with self.assertLogs("colabra-comment-action", level="DEBUG") as logs:
            actions_core.set_failed("100% broken\nsecond line")

        self.assertEqual(mock_stdout.getvalue(), "::error::100%25 broken%0Asecond line\n")
        self.assertEqual([r.levelname for r in logs.records], ["DEBUG"])
        self.assertIn("100% broken", logs.output[0])


class TestIsDebug(unittest.TestCase):
    @patch.dict(os.environ, {"RUNNER_DEBUG": "1"}, clear=True)
    def test_runner_debug(self):
        self.assertTrue(actions_core.is_debug())

    @patch.dict(os.environ, {"ACTIONS_STEP_DEBUG": "true"}, clear=True)
    def test_step_debug(self):
        self.assertTrue(actions_core.is_debug())

    @patch.dict(os.environ, {}, clear=True)
    def test_disabled(self):
        self.assertFalse(actions_core.is_debug())


if __name__ == "__main__":
    unittest.main()
