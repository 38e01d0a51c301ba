import json

import pytest

from parking_windows import cli


@pytest.fixture
def features_file(tmp_path):
    path = tmp_path / "features.json"
    path.write_text(
        json.dumps(
            {
                "features": [
                    {"properties": {"rule_simplified": "Free Parking From Nov 12 Mon 9:00am Until Nov 13 Tue 7:30am."}},
                    {"properties": {"rule_simplified": "Free Parking From Nov 19 Mon 9:00am Until Nov 20 Tue 7:30am."}},
                ]
            }
        )
    )
    return str(path)


@pytest.fixture
def calendar_file(tmp_path):
    path = tmp_path / "calendar.json"
    path.write_text(
        json.dumps(
            {
                "days": [
                    {
                        "today_id": "20231123",
                        "items": [{"type": "Alternate Side Parking", "status": "SUSPENDED", "details": "Suspended."}],
                    }
                ]
            }
        )
    )
    return str(path)


def test_report_from_files(features_file, calendar_file, capsys):
    code = cli.main(
        ["report", "--features-file", features_file, "--calendar-file", calendar_file, "--place", "Union Square"]
    )
    assert code == 0
    out = capsys.readouterr().out
    assert out == (
        "The best time to park near Union Square is Monday at 09:00am, with alternate-side parking "
        "restrictions ending on 2 nearby streets.\n\n"
        "By the way, alternate side parking is suspended on Thursday, 11/23.\n"
    )


def test_best_times_requires_location():
    with pytest.raises(SystemExit):
        cli.parse_args(["best-times"])


def test_bad_payload_prints_apology(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"unexpected": True}))
    assert cli.main(["best-times", "--features-file", str(path)]) == 1
    assert capsys.readouterr().out.strip() == cli.config.FAILURE_MESSAGE


@pytest.mark.parametrize("flag, command", [("--features-file", "best-times"), ("--calendar-file", "suspensions")])
def test_missing_input_file_prints_apology(tmp_path, capsys, flag, command):
    missing = tmp_path / "missing.json"
    assert cli.main([command, flag, str(missing)]) == 1
    assert capsys.readouterr().out.strip() == cli.config.FAILURE_MESSAGE
