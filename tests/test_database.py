import pytest

from app.db import database


class FakeConnector:
    """Cloud SQL Connector の代わり（作成数と close を記録）"""

    created = 0

    def __init__(self):
        FakeConnector.created += 1
        self.closed = False
        self.connections = []

    def connect(self, instance, driver, **kwargs):
        self.connections.append((instance, driver, kwargs))
        return object()

    def close(self):
        self.closed = True


@pytest.fixture()
def fake_connector(monkeypatch):
    FakeConnector.created = 0
    monkeypatch.setattr("google.cloud.sql.connector.Connector", FakeConnector)
    monkeypatch.setattr(database, "_connector", None)
    monkeypatch.setattr(database.settings, "INSTANCE_CONNECTION_NAME", "proj:region:inst")
    yield
    database.close_connector()


def test_connections_share_one_connector(fake_connector):
    database.getconnection()
    database.getconnection()
    database.getconnection()

    connector = database.get_connector()
    assert FakeConnector.created == 1
    assert len(connector.connections) == 3
    assert connector.connections[0][:2] == ("proj:region:inst", "pymysql")


def test_close_connector_closes_and_resets(fake_connector):
    database.getconnection()
    connector = database.get_connector()

    database.close_connector()

    assert connector.closed
    assert database._connector is None
    # 閉じた後は新しく作られる
    database.getconnection()
    assert FakeConnector.created == 2


def test_close_connector_without_connection_is_noop(monkeypatch):
    monkeypatch.setattr(database, "_connector", None)

    database.close_connector()

    assert database._connector is None
