"""
Tests for the PlaydateExtension facade.
"""

import json
from pathlib import Path
from unittest.mock import Mock

import pytest
import responses

from playdatekit.core.exceptions import (
    DownloadError,
    InvalidRequestError,
    ToolNotFoundError,
    UnsupportedAdapterError,
    UnsupportedServerError,
)
from playdatekit.core.platform import DownloadedFileType
from playdatekit.debug.config import RequestKind
from playdatekit.debug.resolver import DebugTaskDefinition
from playdatekit.extension import Command, PlaydateExtension
from playdatekit.lsp.labels import Completion, CompletionKind, Symbol, SymbolKind

LSP = PlaydateExtension.LSP_SERVER_ID
ADAPTER = PlaydateExtension.ADAPTER_NAME


@pytest.fixture
def fetch():
    return Mock()


@pytest.fixture
def extension(temp_dir, linux_x64, fetch):
    return PlaydateExtension(
        work_dir=temp_dir,
        platform=linux_x64,
        fetch=fetch,
        runner=Mock(return_value=b"2.5.0\n"),
    )


class TestLanguageServerCommand:
    """Test language server command resolution."""

    def test_path_binary(self, extension, make_worktree):
        worktree = make_worktree(binaries={"lua-language-server": "/usr/bin/lls"})

        assert extension.language_server_command(LSP, worktree) == Command("/usr/bin/lls")

    @responses.activate
    def test_downloads_release(self, extension, worktree, fetch, temp_dir):
        responses.add(
            responses.GET,
            "https://api.github.com/repos/LuaLS/lua-language-server/releases",
            json=[
                {
                    "tag_name": "3.13.5",
                    "assets": [
                        {
                            "name": "lua-language-server-3.13.5-linux-x64.tar.gz",
                            "browser_download_url": "https://dl/lls.tar.gz",
                        }
                    ],
                }
            ],
        )

        command = extension.language_server_command(LSP, worktree)
        again = extension.language_server_command(LSP, worktree)

        expected = temp_dir.absolute() / "lua-language-server-3.13.5"
        assert command.command == str(expected / "bin" / "lua-language-server")
        assert command.args == []
        assert command.env == {}
        assert again == command
        assert len(responses.calls) == 1
        fetch.assert_called_once_with(
            "https://dl/lls.tar.gz", expected, DownloadedFileType.GZIP_TAR
        )

    def test_unsupported_server(self, extension, worktree):
        with pytest.raises(UnsupportedServerError, match="other-server"):
            extension.language_server_command("other-server", worktree)


class TestLanguageServerSettings:
    def test_initialization_options(self, extension, worktree):
        options = extension.language_server_initialization_options(LSP, worktree)

        assert options["Lua"]["diagnostics"]["severity"]["unknown-symbol"] == "Warning"

    def test_other_server_gets_nothing(self, extension, worktree):
        assert extension.language_server_initialization_options("x", worktree) is None
        assert extension.language_server_workspace_configuration("x", worktree) is None

    def test_workspace_configuration(self, extension, make_worktree, temp_dir):
        worktree = make_worktree(
            env=[("PLAYDATE_SDK_PATH", "/sdk")], binaries={"pdc": "/sdk/bin/pdc"}
        )

        settings = extension.language_server_workspace_configuration(LSP, worktree)

        assert settings["Lua"]["workspace"]["library"] == [
            "/sdk/CoreLibs",
            str(temp_dir.absolute() / "playdate-luacats-2.5.0-luacats1" / "library"),
        ]

    def test_workspace_configuration_without_sdk(self, extension, make_worktree):
        """Test a missing SDK drops CoreLibs but keeps the type definitions."""
        worktree = make_worktree(env=[], binaries={"pdc": "/usr/bin/pdc"})

        settings = extension.language_server_workspace_configuration(LSP, worktree)

        library = settings["Lua"]["workspace"]["library"]
        assert len(library) == 1
        assert library[0].endswith(str(Path("playdate-luacats-2.5.0-luacats1") / "library"))

    def test_workspace_configuration_without_pdc(self, extension, worktree):
        with pytest.raises(ToolNotFoundError, match="pdc"):
            extension.language_server_workspace_configuration(LSP, worktree)

    def test_workspace_configuration_download_failure(self, extension, make_worktree, fetch):
        fetch.side_effect = DownloadError("404")
        worktree = make_worktree(binaries={"pdc": "/usr/bin/pdc"})

        with pytest.raises(DownloadError, match="v2.5.0-luacats1"):
            extension.language_server_workspace_configuration(LSP, worktree)


class TestCodeLabels:
    def test_completion(self, extension):
        label = extension.label_for_completion(
            LSP, Completion("sprite.new()", kind=CompletionKind.FUNCTION)
        )

        assert label.filter_range == (0, 10)

    def test_symbol(self, extension):
        label = extension.label_for_symbol(LSP, Symbol("draw", SymbolKind.METHOD))

        assert label.code == "let a = draw()"


class TestDebugAdapter:
    """Test debug adapter entry points."""

    def test_get_dap_binary_launch(self, extension, make_worktree):
        worktree = make_worktree(root="/proj", env=[("HOME", "/home/u")])
        task = DebugTaskDefinition("Run", ADAPTER, '{"request": "launch"}')

        binary = extension.get_dap_binary(ADAPTER, task, None, worktree)

        assert binary.command == "/home/u/.local/share/playdate-sdk/bin/PlaydateSimulator"
        assert binary.arguments == ["/proj/builds/Game.pdx"]
        assert json.loads(binary.request_args.configuration)["sdkPath"] == (
            "/home/u/.local/share/playdate-sdk"
        )

    def test_user_adapter_path_ignored(self, extension, make_worktree):
        worktree = make_worktree(env=[("PLAYDATE_SDK_PATH", "/sdk")])
        task = DebugTaskDefinition("Run", ADAPTER, '{"request": "launch"}')

        binary = extension.get_dap_binary(ADAPTER, task, "/custom/adapter", worktree)

        assert binary.command == "/sdk/bin/PlaydateSimulator"

    def test_get_dap_binary_unsupported_adapter(self, extension, worktree):
        task = DebugTaskDefinition("Run", "lldb", '{"request": "launch"}')

        with pytest.raises(UnsupportedAdapterError, match="lldb"):
            extension.get_dap_binary("lldb", task, None, worktree)

    def test_dap_request_kind(self, extension):
        assert extension.dap_request_kind(ADAPTER, {"request": "launch"}) is RequestKind.LAUNCH
        assert extension.dap_request_kind(ADAPTER, {"request": "attach"}) is RequestKind.ATTACH

    def test_dap_request_kind_invalid(self, extension):
        with pytest.raises(InvalidRequestError):
            extension.dap_request_kind(ADAPTER, {"request": "Launch"})

    def test_dap_request_kind_unsupported_adapter(self, extension):
        with pytest.raises(UnsupportedAdapterError):
            extension.dap_request_kind("codelldb", {"request": "launch"})
