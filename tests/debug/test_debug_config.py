"""
Tests for the Playdate debug configuration model.
"""

import json

import pytest

from playdatekit.core.exceptions import ConfigParseError, InvalidRequestError
from playdatekit.debug.config import (
    DEFAULT_GAME_PATH,
    DEFAULT_SOURCE_PATH,
    PlaydateDebugConfig,
    RequestKind,
    classify_request,
    substitute_placeholder,
)


class TestParsing:
    """Test PlaydateDebugConfig parsing and defaults."""

    def test_defaults(self):
        config = PlaydateDebugConfig.from_json('{"request": "launch"}')

        assert config.request == "launch"
        assert config.game_path == DEFAULT_GAME_PATH
        assert config.source_path == DEFAULT_SOURCE_PATH
        assert config.sdk_path is None

    def test_all_fields(self):
        config = PlaydateDebugConfig.from_dict(
            {
                "request": "attach",
                "gamePath": "/g.pdx",
                "sourcePath": "/src",
                "sdkPath": "/sdk",
            }
        )

        assert config == PlaydateDebugConfig("attach", "/g.pdx", "/src", "/sdk")

    def test_explicit_null_leaves_field_unset(self):
        config = PlaydateDebugConfig.from_json('{"request": "launch", "gamePath": null}')

        assert config.game_path is None
        assert config.source_path == DEFAULT_SOURCE_PATH

    @pytest.mark.parametrize(
        "text",
        [
            "not json",
            "[]",
            "{}",
            '{"request": 1}',
            '{"request": "launch", "gamePath": 3}',
        ],
    )
    def test_malformed(self, text):
        with pytest.raises(ConfigParseError, match="Failed to parse debug configuration"):
            PlaydateDebugConfig.from_json(text)


class TestSerialization:
    def test_to_dict_omits_unset_fields(self):
        config = PlaydateDebugConfig("launch", game_path=None, source_path="/src")

        assert config.to_dict() == {"request": "launch", "sourcePath": "/src"}

    def test_to_json(self):
        config = PlaydateDebugConfig("attach", "/g", "/s", "/sdk")

        assert json.loads(config.to_json()) == {
            "request": "attach",
            "gamePath": "/g",
            "sourcePath": "/s",
            "sdkPath": "/sdk",
        }


class TestPlaceholder:
    """Test worktree-root substitution."""

    def test_replaces_every_occurrence(self):
        assert (
            substitute_placeholder("$ZED_WORKTREE_ROOT/a/$ZED_WORKTREE_ROOT", "/p")
            == "/p/a//p"
        )

    def test_no_placeholder_unchanged(self):
        assert substitute_placeholder("/abs/Game.pdx", "/p") == "/abs/Game.pdx"

    def test_substitute_worktree_root(self):
        config = PlaydateDebugConfig.from_json('{"request": "launch"}')
        config.substitute_worktree_root("/proj")

        assert config.game_path == "/proj/builds/Game.pdx"
        assert config.source_path == "/proj/source"

    def test_sdk_path_not_substituted(self):
        config = PlaydateDebugConfig("launch", sdk_path="$ZED_WORKTREE_ROOT/sdk")
        config.substitute_worktree_root("/proj")

        assert config.sdk_path == "$ZED_WORKTREE_ROOT/sdk"


class TestClassifyRequest:
    def test_launch(self):
        assert classify_request(PlaydateDebugConfig("launch")) is RequestKind.LAUNCH

    def test_attach(self):
        assert classify_request(PlaydateDebugConfig("attach")) is RequestKind.ATTACH

    @pytest.mark.parametrize("request_type", ["Launch", "run", ""])
    def test_invalid(self, request_type):
        with pytest.raises(InvalidRequestError) as exc_info:
            classify_request(PlaydateDebugConfig(request_type))

        assert str(exc_info.value) == (
            f"Invalid request type '{request_type}'. Expected 'launch' or 'attach'"
        )
