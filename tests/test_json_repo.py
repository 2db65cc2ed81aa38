import pytest

from core import config
from core.errors import FormArchiveError, FormStorageError
from core.storage.form_store import FormStore
from core.storage.json_repo import FormArchiveRepository


def _backups(path):
    return sorted(path.parent.glob(f"{path.stem}.*.bak.json"))


def test_save_then_load(tmp_path, abc_store):
    repo = FormArchiveRepository(tmp_path / "forms.json")
    assert not repo.exists()
    repo.save(abc_store)
    assert repo.exists()
    loaded = repo.load()
    assert loaded.display_names() == ["Charlie", "Alice", "Bob"]
    assert all(f.ssn == config.REDACTED_SSN for f in loaded)


def test_save_creates_parent_directory(tmp_path, abc_store):
    repo = FormArchiveRepository(tmp_path / "Forms" / "batch.json")
    repo.save(abc_store)
    assert repo.exists()


def test_missing_file_is_storage_error(tmp_path):
    repo = FormArchiveRepository(tmp_path / "nope.json")
    with pytest.raises(FormStorageError) as exc_info:
        repo.load()
    assert isinstance(exc_info.value, OSError)
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)


def test_corrupt_file_is_archive_error(tmp_path):
    path = tmp_path / "forms.json"
    path.write_text("{ definitely not an archive", encoding="utf-8")
    with pytest.raises(FormArchiveError):
        FormArchiveRepository(path).load()


def test_unchanged_content_is_not_rewritten(tmp_path, abc_store):
    path = tmp_path / "forms.json"
    repo = FormArchiveRepository(path)
    repo.save(abc_store)
    repo.save(abc_store)
    assert _backups(path) == []


def test_overwrite_keeps_rotating_backups(tmp_path):
    path = tmp_path / "forms.json"
    repo = FormArchiveRepository(path, backup_keep=2)
    store = FormStore()
    for _ in range(4):
        store.new_form()
        repo.save(store)
    assert len(_backups(path)) == 2
    assert len(repo.load()) == 5


def test_backups_can_be_disabled(tmp_path):
    path = tmp_path / "forms.json"
    repo = FormArchiveRepository(path, backup_enabled=False)
    store = FormStore()
    repo.save(store)
    store.new_form()
    repo.save(store)
    assert _backups(path) == []


def test_failed_write_leaves_no_temp_file(tmp_path, abc_store):
    target = tmp_path / "forms.json"
    target.mkdir()
    repo = FormArchiveRepository(target, backup_enabled=False)
    with pytest.raises(FormStorageError):
        repo.save(abc_store)
    assert [p.name for p in tmp_path.iterdir()] == ["forms.json"]
