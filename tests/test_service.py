import pytest

from usha.core.errors import PathError
from usha.core.models import SearchResult
from usha.services.history import HistoryService


@pytest.fixture()
def service(store):
    return HistoryService(store, ignore=["ls"])


@pytest.fixture()
def project(tmp_path):
    root = tmp_path / "project"
    (root / "src").mkdir(parents=True)
    return root.resolve()


@pytest.mark.parametrize(
    "cmd, expected",
    [
        ("", False),
        ("   ", False),
        ("exit", False),
        ("usha search -n 3", False),
        ("ls -la", False),
        ("lsof -i", True),
        ("git status", True),
        ("  git status", True),
    ],
)
def test_should_record(service, cmd, expected):
    assert service.should_record(cmd) is expected


def test_filtered_command_is_not_stored(service, store):
    assert service.record("/w", "exit") is False
    assert store.get_entry("/w", "exit") is None


def test_record_forwards_checksum(service, store):
    assert service.record("/w", "make", checksum="1") is True
    assert service.record("/w", "make", checksum="1") is False
    assert store.get_entry("/w", "make").count == 1


def test_search_canonicalizes_directory(service, project, monkeypatch):
    service.record(str(project), "make test")
    monkeypatch.chdir(project / "src")

    assert service.search(directory="..") == [SearchResult(cmd="make test", count=1)]


def test_search_follows_symlinks(service, project, tmp_path):
    service.record(str(project), "make test")
    link = tmp_path / "link"
    link.symlink_to(project, target_is_directory=True)

    assert [r.cmd for r in service.search(directory=str(link))] == ["make test"]


def test_recursive_search_from_parent(service, project):
    service.record(str(project / "src"), "pytest")

    assert service.search(directory=str(project)) == []
    assert [r.cmd for r in service.search(directory=str(project), recurse=True)] == ["pytest"]


def test_missing_directory_raises_path_error(service, tmp_path):
    with pytest.raises(PathError):
        service.search(directory=str(tmp_path / "missing"))


def test_file_is_not_a_directory(service, tmp_path):
    target = tmp_path / "notes.txt"
    target.write_text("x")

    with pytest.raises(PathError):
        service.search(directory=str(target))


def test_most_recent_includes_timestamp(service):
    service.record("/w", "make")

    (result,) = service.search(most_recent=True)
    assert result.cmd == "make"
    assert result.count == 1
    assert result.timestamp is not None


def test_clean_delegates_to_store(service):
    service.record("/w", "make")
    assert service.clean(0) == 1
