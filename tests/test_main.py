"""
Tests for the sample program in `docstore.main`.
"""

import logging

from pytest_mock import MockerFixture

from docstore import main as demo
from docstore.exceptions import DatabaseConnectionError


def test_run_walks_one_task_through_crud(crud, collection, mocker: MockerFixture, caplog):
    spy = mocker.spy(collection, "update_one")
    with caplog.at_level(logging.INFO):
        assert demo.run(crud) == 0

    assert collection.docs == []
    _, update = spy.call_args.args
    assert update["$set"]["completed"] is True
    assert "Number of documents updated: 1" in caplog.text
    assert "Number of documents deleted: 1" in caplog.text


def test_main_reports_connection_failure(mocker: MockerFixture, monkeypatch, tmp_path):
    monkeypatch.setattr("sys.argv", ["docstore-demo", str(tmp_path / "missing.json")])
    mocker.patch.object(demo, "connect_from_config", side_effect=DatabaseConnectionError(message="refused"))
    assert demo.main() == 1


def test_main_closes_connection(mocker: MockerFixture, monkeypatch, tmp_path, connection, mongo_client):
    monkeypatch.setattr("sys.argv", ["docstore-demo", str(tmp_path / "missing.json")])
    mocker.patch.object(demo, "connect_from_config", return_value=connection)

    assert demo.main() == 0
    assert connection.is_closed
    mongo_client.close.assert_called_once()
