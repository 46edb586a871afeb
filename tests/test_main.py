import json

import pytest

from orders_analyzer import main as main_module
from orders_analyzer.main import main


def write_config(tmp_path, **overrides):
    config = {
        "source_path": "source.txt",
        "date_policy": "truncate",
        "source_timezone": None,
        "report_timezone": None,
        "log_level": "WARNING",
    }
    config.update(overrides)
    path = tmp_path / "analyzer_config.json"
    path.write_text(json.dumps(config))
    return str(path)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_missing_file(workdir, capsys):
    status = main()

    assert status == 1
    assert capsys.readouterr().out == "Data file does not exists\n"


def test_malformed_json(workdir, capsys):
    (workdir / "source.txt").write_text("[{not json", encoding="utf-8")

    status = main()

    out = capsys.readouterr().out
    assert status == 1
    assert out.startswith("Expecting property name enclosed in double quotes")
    assert "SUNDAY" not in out


def test_report_is_printed(workdir, capsys):
    orders = [
        {
            "orderId": 1,
            "creationDate": "2024-03-10T09:00:00",
            "orderLines": [
                {"productId": 1, "name": "Pen", "quantity": 7, "unitPrice": "19.99"}
            ],
        },
        {
            "orderId": 2,
            "creationDate": "2024-03-15T18:30:00",
            "orderLines": [
                {"productId": 2, "name": "Ink", "quantity": 2, "unitPrice": "4.50"},
                {"productId": 1, "name": "Pen", "quantity": 1, "unitPrice": "19.99"},
            ],
        },
    ]
    (workdir / "source.txt").write_text(json.dumps(orders), encoding="utf-8")

    status = main()

    assert status == 0
    assert capsys.readouterr().out == (
        "{SUNDAY=7, MONDAY=0, TUESDAY=0, WEDNESDAY=0, "
        "THURSDAY=0, FRIDAY=3, SATURDAY=0}\n"
    )


def test_truncated_report(workdir, capsys):
    orders = [
        {"orderId": 1, "creationDate": "2024-03-10T09:00:00", "orderLines": [
            {"productId": 1, "name": "Pen", "quantity": 2, "unitPrice": "1"}]},
        {"orderId": 2, "creationDate": "not-a-date", "orderLines": [
            {"productId": 1, "name": "Pen", "quantity": 5, "unitPrice": "1"}]},
        {"orderId": 3, "creationDate": "2024-03-11T09:00:00", "orderLines": [
            {"productId": 1, "name": "Pen", "quantity": 9, "unitPrice": "1"}]},
    ]
    (workdir / "source.txt").write_text(json.dumps(orders), encoding="utf-8")

    status = main()

    assert status == 0
    assert capsys.readouterr().out.startswith("{SUNDAY=2, MONDAY=0,")


def test_strict_policy_reports_bad_date(workdir, capsys):
    orders = [{"orderId": 9, "creationDate": "not-a-date", "orderLines": []}]
    (workdir / "source.txt").write_text(json.dumps(orders), encoding="utf-8")

    status = main(write_config(workdir, date_policy="strict"))

    assert status == 1
    assert "Order 9" in capsys.readouterr().out


def test_configured_source_path(workdir, capsys):
    (workdir / "exports").mkdir()
    (workdir / "exports" / "orders.json").write_text("[]", encoding="utf-8")

    status = main(write_config(workdir, source_path="exports/orders.json"))

    assert status == 0
    assert capsys.readouterr().out == (
        "{SUNDAY=0, MONDAY=0, TUESDAY=0, WEDNESDAY=0, "
        "THURSDAY=0, FRIDAY=0, SATURDAY=0}\n"
    )


def test_non_utf8_file(workdir, capsys):
    (workdir / "source.txt").write_bytes(
        b'[{"orderId": 1, "creationDate": "2024-03-10T09:00:00", "orderLines": '
        b'[{"productId": 1, "name": "Caf\xe9", "quantity": 1, "unitPrice": "1"}]}]'
    )

    status = main()

    out = capsys.readouterr().out
    assert status == 1
    assert "can't decode byte 0xe9" in out
    assert "SUNDAY" not in out


def test_date_out_of_range_in_local_zone(workdir, capsys, local_zone):
    local_zone("EST+05")
    orders = [
        {"orderId": 1, "creationDate": "2024-03-10T12:00:00", "orderLines": [
            {"productId": 1, "name": "Pen", "quantity": 4, "unitPrice": "1"}]},
        {"orderId": 2, "creationDate": "0001-01-01T00:00:00", "orderLines": [
            {"productId": 1, "name": "Pen", "quantity": 5, "unitPrice": "1"}]},
    ]
    (workdir / "source.txt").write_text(json.dumps(orders), encoding="utf-8")

    status = main()

    assert status == 0
    assert capsys.readouterr().out.startswith("{SUNDAY=4, MONDAY=0,")


def test_order_total_overflow_is_reported(workdir, capsys):
    orders = [
        {"orderId": 5, "creationDate": "2024-03-10T12:00:00", "orderLines": [
            {"productId": 1, "name": "Pen", "quantity": 2**62, "unitPrice": "1"},
            {"productId": 2, "name": "Ink", "quantity": 2**62, "unitPrice": "1"}]},
    ]
    (workdir / "source.txt").write_text(json.dumps(orders), encoding="utf-8")

    status = main()

    assert status == 1
    assert "Order 5 total quantity" in capsys.readouterr().out


def test_entry_point_logger_follows_module_name():
    assert main_module.logger.name == "orders_analyzer.main"
