import json
from pathlib import Path

import pytest

import domrecon.__main__ as cli
from domrecon.__main__ import build_parser, main
from domrecon.models import DiscoveredElement, DiscoveryReport
from domrecon.scanner import ScanResult


@pytest.fixture(autouse=True)
def _isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DOMRECON_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.delenv("DOMRECON_OUTPUT_DIR", raising=False)


def _write_report(path: Path) -> None:
    path.write_text(
        json.dumps(
            {
                "url": "https://www.example.com",
                "scannedAt": "2026-01-18T00:00:00.000Z",
                "counts": {"button": 1, "link": 0, "input": 0, "select": 0, "textarea": 0, "other": 0},
                "elements": [
                    {
                        "type": "button",
                        "tagName": "button",
                        "accessibleName": "Submit",
                        "testId": "submit-btn",
                        "css": "button.primary",
                    }
                ],
            }
        ),
        encoding="utf-8",
    )


def test_parser_requires_subcommand() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_scan_defaults() -> None:
    args = build_parser().parse_args(["scan", "https://example.com"])
    assert args.command == "scan"
    assert args.output is None
    assert args.headed is None


def test_gen_writes_page_model(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    report_path = tmp_path / "report.json"
    _write_report(report_path)
    out_dir = tmp_path / "models"

    assert main(["gen", "-i", str(report_path), "-o", str(out_dir), "--title", "Home"]) == 0

    written = list(out_dir.glob("page-model-example.com-*.json"))
    assert len(written) == 1
    payload = json.loads(written[0].read_text(encoding="utf-8"))
    assert payload["title"] == "Home"
    assert payload["elements"][0]["id"] == "button-submit-btn-0"
    assert payload["elements"][0]["locators"] == [
        {"strategy": "testId", "value": "submit-btn"},
        {"strategy": "css", "value": "button.primary"},
    ]
    assert "[gen] page model written to" in capsys.readouterr().out


def test_gen_reports_missing_input(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["gen", "-i", str(tmp_path / "nope.json"), "-o", str(tmp_path)]) == 1
    assert "nope.json" in capsys.readouterr().err


def test_gen_reports_malformed_url(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    report_path = tmp_path / "report.json"
    report_path.write_text(json.dumps({"url": "nonsense", "elements": []}), encoding="utf-8")

    assert main(["gen", "-i", str(report_path), "-o", str(tmp_path)]) == 1
    assert "Invalid URL" in capsys.readouterr().err


def test_scan_reports_invalid_url(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["scan", "mailto:someone@example.com", "-o", str(tmp_path)]) == 1
    assert "Invalid URL" in capsys.readouterr().err


def test_gen_rejects_undecodable_and_miscounted_reports(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    not_utf8 = tmp_path / "latin1.json"
    not_utf8.write_bytes(b"\xff\xfe{}")
    assert main(["gen", "-i", str(not_utf8), "-o", str(tmp_path)]) == 1
    assert "UTF-8" in capsys.readouterr().err

    bad_count = tmp_path / "bad-count.json"
    bad_count.write_text(json.dumps({"url": "https://example.com", "counts": {"button": "many"}, "elements": []}), encoding="utf-8")
    assert main(["gen", "-i", str(bad_count), "-o", str(tmp_path)]) == 1
    assert "counts.button" in capsys.readouterr().err


def test_scan_prints_page_title(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    report = DiscoveryReport(
        url="https://example.com/",
        scanned_at="2026-01-18T00:00:00.000Z",
        counts={"button": 0, "link": 1, "input": 0, "select": 0, "textarea": 0, "other": 0},
        elements=(DiscoveredElement(type="link", tag_name="a", href="/"),),
    )
    monkeypatch.setattr(cli, "scan_url", lambda url, settings: ScanResult(report=report, title="Example Domain"))

    assert main(["scan", "https://example.com", "-o", str(tmp_path / "reports")]) == 0

    out = capsys.readouterr().out
    assert "[recon] title: Example Domain" in out
    assert len(list((tmp_path / "reports").glob("recon-report-*-example-*.json"))) == 1
