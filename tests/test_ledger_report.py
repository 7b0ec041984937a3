import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "scripts"))

import ledger_report


def test_report_prints_bucket_totals(tmp_path, capsys):
    path = tmp_path / "orders.json"
    path.write_text(json.dumps([
        {"id": "a", "invoiceNumber": "6311", "timestamp": 1, "customerName": "x",
         "requestedWeight": 2, "preparationType": "fillet", "paymentStatus": "پرداخت شده"},
        {"id": "b", "invoiceNumber": "6312", "timestamp": 2, "customerName": "y",
         "requestedWeight": 1, "preparationType": "cleaned", "paymentStatus": "unpaid", "isFree": True},
    ]), encoding="utf-8")

    assert ledger_report.main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "archived" in out
    assert "archived paid_card" in out
    assert "view: office=0, active=1, archived=1" in out


def test_report_fails_on_bad_record(tmp_path, capsys):
    path = tmp_path / "orders.json"
    path.write_text(json.dumps([{"id": "a"}]), encoding="utf-8")
    assert ledger_report.main([str(path)]) == 1
    assert "Error while loading orders" in capsys.readouterr().out
