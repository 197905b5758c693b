import json

import pytest

from openantrag.cli.display_cli import main, run_display

from conftest import SAMPLE_PROPOSALS


def test_run_display_prints_html(stub_client, capsys) -> None:
    exit_code = run_display("XX", 3, None, False, False, None, client=stub_client)

    assert exit_code == 0
    out = capsys.readouterr().out
    assert "<h2>Anträge Landtag XX</h2>" in out
    assert ">C</a>" in out


def test_run_display_json_with_steps(stub_client, capsys) -> None:
    exit_code = run_display("XX", 3, None, True, True, None, client=stub_client)

    assert exit_code == 0
    output = json.loads(capsys.readouterr().out)
    assert output["display_name"] == "Landtag XX"
    assert output["proposals"] == SAMPLE_PROPOSALS
    assert output["process_steps"] == [{"Id": 1}, {"Id": 2}]


def test_run_display_writes_output_file(stub_client, tmp_path) -> None:
    target = tmp_path / "out" / "xx.html"

    exit_code = run_display("XX", 3, "#eef", False, False, str(target), client=stub_client)

    assert exit_code == 0
    assert 'style="background-color:#eef"' in target.read_text(encoding="utf-8")


def test_run_display_returns_1_when_proposals_fail(offline_client, capsys) -> None:
    exit_code = run_display("XX", 3, None, False, False, None, client=offline_client)

    assert exit_code == 1
    assert capsys.readouterr().out == ""


def test_main_rejects_non_positive_count() -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--parliament", "XX", "--count", "0"])

    assert exc_info.value.code == 2
