"""CLI argument parsing and dispatch."""

from adserver.interface import cli


def test_serve_arguments():
    args = cli.build_parser().parse_args(["serve", "--host", "127.0.0.1", "--port", "9000"])
    assert args.command == "serve"
    assert args.host == "127.0.0.1"
    assert args.port == 9000


def test_dispatch_serve(monkeypatch):
    calls = []
    monkeypatch.setattr(cli, "serve", lambda host, port: calls.append((host, port)))
    cli.main(["serve", "--port", "9001"])
    assert calls == [(None, 9001)]


def test_dispatch_mcp(monkeypatch):
    calls = []
    monkeypatch.setattr(cli, "serve_mcp", lambda: calls.append("mcp"))
    cli.main(["mcp"])
    assert calls == ["mcp"]


def test_no_command_prints_help(capsys):
    cli.main([])
    assert "serve" in capsys.readouterr().out
