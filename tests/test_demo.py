import runpy
from pathlib import Path

import pytest

DEMO = Path(__file__).parent.parent / "create_cluster_demo.py"


def test_demo_missing_key_logs_traceback(tmp_path, monkeypatch, caplog):
    # The placeholder key path does not exist in an empty directory
    monkeypatch.chdir(tmp_path)

    with pytest.raises(SystemExit) as exc:
        runpy.run_path(str(DEMO), run_name="__main__")

    assert exc.value.code == 1
    records = [r for r in caplog.records if "Could not load credentials" in r.getMessage()]
    assert len(records) == 1
    assert records[0].exc_info[0] is FileNotFoundError
    assert "<<path_to_service_key>>.json" in records[0].getMessage()
