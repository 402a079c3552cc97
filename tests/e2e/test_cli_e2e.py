"""E2E smoke tests for the command line entrypoint."""

from __future__ import annotations

import json
from pathlib import Path

import main

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures" / "sample_properties"


def test_cli_prints_properties_with_origins(capsys):
    path = FIXTURES_DIR / "application.properties"

    exit_code = main.main([str(path)])

    lines = capsys.readouterr().out.splitlines()
    assert exit_code == 0
    assert lines == [
        f"app.name=demo  # file [{path}] - 1:10",
        f"server.port=8080  # file [{path}] - 3:15",
        f"server.hosts[0]=alpha  # file [{path}] - 4:16",
        f"server.hosts[1]=beta  # file [{path}] - 4:23",
        f"greeting=Hello World  # file [{path}] - 5:10",
    ]


def test_cli_prints_xml_without_origins(capsys):
    exit_code = main.main([str(FIXTURES_DIR / "application.xml"), "--name", "xml"])

    assert exit_code == 0
    assert capsys.readouterr().out.splitlines() == ["app.name=demo", "server.port=8080"]


def test_cli_empty_file_prints_nothing(capsys):
    exit_code = main.main([str(FIXTURES_DIR / "empty.properties")])

    assert exit_code == 0
    assert capsys.readouterr().out == ""


def test_cli_uses_settings_file(tmp_path, capsys):
    settings_path = tmp_path / "settings.yaml"
    settings_path.write_text("loader:\n  expand_lists: false\n", encoding="utf-8")
    props = tmp_path / "list.properties"
    props.write_text("hosts[]=a,b\n", encoding="utf-8")

    exit_code = main.main([str(props), "--settings", str(settings_path)])

    assert exit_code == 0
    assert capsys.readouterr().out.startswith("hosts[]=a,b  # ")


def test_cli_missing_file_fails(tmp_path, capsys):
    assert main.main([str(tmp_path / "missing.properties")]) == 1
    assert capsys.readouterr().out == ""


def test_cli_unsupported_extension_fails(tmp_path):
    path = tmp_path / "app.yaml"
    path.write_text("a: 1\n", encoding="utf-8")

    assert main.main([str(path)]) == 1


def test_cli_malformed_file_fails(tmp_path):
    path = tmp_path / "bad.properties"
    path.write_text("a=\\uZZZZ\n", encoding="utf-8")

    assert main.main([str(path)]) == 1


def test_cli_invalid_settings_fails(tmp_path):
    settings_path = tmp_path / "settings.yaml"
    settings_path.write_text("observability:\n  log_level: LOUD\n", encoding="utf-8")

    exit_code = main.main(
        [str(FIXTURES_DIR / "application.properties"), "--settings", str(settings_path)]
    )

    assert exit_code == 1


def test_cli_explicit_missing_settings_fails(tmp_path):
    exit_code = main.main(
        [str(FIXTURES_DIR / "application.properties"), "--settings", str(tmp_path / "no.yaml")]
    )

    assert exit_code == 1


def test_cli_directory_is_not_a_property_file(tmp_path, capsys):
    assert main.main([str(tmp_path)]) == 1
    assert capsys.readouterr().out == ""


def test_cli_plain_output_has_no_origins(capsys):
    exit_code = main.main([str(FIXTURES_DIR / "application.properties"), "--plain"])

    assert exit_code == 0
    assert capsys.readouterr().out.splitlines() == [
        "app.name=demo",
        "server.port=8080",
        "server.hosts[0]=alpha",
        "server.hosts[1]=beta",
        "greeting=Hello World",
    ]


def test_cli_json_output_includes_origins(capsys):
    path = FIXTURES_DIR / "application.properties"

    exit_code = main.main([str(path), "--json", "--name", "app"])

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert [source["name"] for source in payload] == ["app"]
    assert payload[0]["origin_tracked"] is True
    assert payload[0]["properties"]["server.port"] == "8080"
    assert payload[0]["origins"]["server.port"] == {
        "resource": f"file [{path}]",
        "line": 3,
        "column": 15,
    }


def test_cli_json_output_for_xml(capsys):
    exit_code = main.main([str(FIXTURES_DIR / "application.xml"), "--json"])

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert payload == [
        {
            "name": "application.xml",
            "origin_tracked": False,
            "properties": {"app.name": "demo", "server.port": "8080"},
        }
    ]


def test_cli_json_output_for_empty_file(capsys):
    assert main.main([str(FIXTURES_DIR / "empty.properties"), "--json"]) == 0
    assert json.loads(capsys.readouterr().out) == []
