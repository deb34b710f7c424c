import pytest
from click.testing import CliRunner

from usha.data.store import HistoryStore


@pytest.fixture()
def db_path(tmp_path):
    return tmp_path / "data" / "history.db"


@pytest.fixture()
def store(db_path):
    """Initialized store on a temporary database file."""
    with HistoryStore(db_path) as history:
        history.initialize()
        yield history


@pytest.fixture()
def bare_store(db_path):
    """Store whose tables were never created."""
    with HistoryStore(db_path) as history:
        yield history


@pytest.fixture()
def cli_env(tmp_path):
    # Keep the CLI away from the real ~/.usha
    return {
        "USHA_DB": str(tmp_path / "data" / "history.db"),
        "USHA_CONFIG": str(tmp_path / "data" / "config.json"),
        "USHA_IGNORE": str(tmp_path / "data" / "ignore"),
    }


@pytest.fixture()
def runner():
    return CliRunner()


def set_entered_on(store, cwd, cmd, timestamp):
    """Backdate an entry to a UTC 'YYYY-MM-DD HH:MM:SS' timestamp."""
    store.conn.execute(
        "UPDATE history SET entered_on = ? WHERE cwd = ? AND cmd = ?",
        (timestamp, cwd, cmd),
    )
    store.conn.commit()


def age_entry(store, cwd, cmd, days):
    """Move an entry `days` days into the past relative to the store clock."""
    store.conn.execute(
        "UPDATE history SET entered_on = datetime('now', ?) WHERE cwd = ? AND cmd = ?",
        (f"-{days} days", cwd, cmd),
    )
    store.conn.commit()


def localtime(store, timestamp):
    return store.conn.execute("SELECT datetime(?, 'localtime')", (timestamp,)).fetchone()[0]
