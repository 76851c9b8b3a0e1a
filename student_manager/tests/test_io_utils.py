# tests/test_io_utils.py
import json
import pytest
from gradebook.errors import DataValidationError, FileProcessingError
from gradebook.io_utils import load_students_from_json, save_students_to_json
from gradebook.store import StudentStore

def write_json(path, document):
    path.write_text(json.dumps(document, ensure_ascii=False), encoding="utf-8")

def test_json_roundtrip(sample_store, tmp_path):
    """Тестирует полный цикл: запись в JSON и чтение обратно."""
    filepath = tmp_path / "students.json"
    save_students_to_json(filepath, sample_store)

    loaded_store = StudentStore()
    assert load_students_from_json(filepath, loaded_store) == 3

    for original, read in zip(sample_store, loaded_store):
        assert original.id == read.id
        assert original.name == read.name
        assert original.grades == read.grades
        assert original.average == pytest.approx(read.average)

def test_saved_document_layout(tmp_path):
    store = StudentStore()
    store.add(1, "Анна")
    store.add_grade(1, 80)
    store.add_grade(1, 72.3333)
    filepath = tmp_path / "students.json"
    save_students_to_json(filepath, store)

    document = json.loads(filepath.read_text(encoding="utf-8"))
    assert document == {
        "students": [
            {"id": 1, "name": "Анна", "grades": [80.0, 72.33], "average": 76.17},
        ]
    }

def test_save_creates_parent_dirs(tmp_path):
    filepath = tmp_path / "data" / "nested" / "students.json"
    save_students_to_json(filepath, StudentStore())
    assert json.loads(filepath.read_text(encoding="utf-8")) == {"students": []}

def test_save_failure_keeps_existing_file(tmp_path, monkeypatch):
    filepath = tmp_path / "students.json"
    filepath.write_text("старое содержимое", encoding="utf-8")

    def broken_replace(src, dst):
        raise PermissionError("запрещено")

    monkeypatch.setattr("gradebook.io_utils.os.replace", broken_replace)
    with pytest.raises(FileProcessingError):
        save_students_to_json(filepath, StudentStore())

    assert filepath.read_text(encoding="utf-8") == "старое содержимое"
    assert list(tmp_path.iterdir()) == [filepath]

def test_missing_file_means_empty_store(tmp_path):
    store = StudentStore()
    assert load_students_from_json(tmp_path / "nope.json", store) == 0
    assert store.count() == 0

def test_persisted_average_is_ignored(tmp_path):
    filepath = tmp_path / "students.json"
    write_json(filepath, {"students": [{"id": 1, "name": "A", "grades": [50, 70], "average": 99.0}]})
    store = StudentStore()
    load_students_from_json(filepath, store)
    assert store.find(1).average == 60.0

def test_malformed_entries_are_skipped(tmp_path):
    filepath = tmp_path / "students.json"
    write_json(filepath, {"students": [
        {"id": 1, "name": "Хороший", "grades": [80, "abc", None, 90]},
        {"id": "2", "name": "Строковый ID"},
        {"id": True, "name": "Булев ID"},
        {"id": 3, "name": ""},
        {"id": 4},
        "не объект",
        {"id": 1, "name": "Дубликат", "grades": [10]},
        {"id": 5, "name": "Без оценок"},
        {"id": 6, "name": "Оценки не список", "grades": "80, 90"},
    ]})
    store = StudentStore()
    assert load_students_from_json(filepath, store) == 3

    assert [s.id for s in store] == [1, 5, 6]
    assert store.find(1).grades == [80.0, 90.0]
    assert store.find(1).name == "Хороший"
    assert store.find(5).grades == []
    assert store.find(6).grades == []

def test_long_name_truncated_on_load(tmp_path):
    filepath = tmp_path / "students.json"
    write_json(filepath, {"students": [{"id": 1, "name": "n" * 70, "grades": []}]})
    store = StudentStore()
    load_students_from_json(filepath, store)
    assert len(store.find(1).name) == 49

def test_invalid_json_raises(tmp_path):
    filepath = tmp_path / "students.json"
    filepath.write_text("{ это не json", encoding="utf-8")
    with pytest.raises(DataValidationError):
        load_students_from_json(filepath, StudentStore())

@pytest.mark.parametrize("document", [[], {"students": {}}, {"people": []}])
def test_wrong_top_level_raises(tmp_path, document):
    filepath = tmp_path / "students.json"
    write_json(filepath, document)
    with pytest.raises(DataValidationError):
        load_students_from_json(filepath, StudentStore())

def test_unreadable_path_raises(tmp_path):
    # Каталог вместо файла
    with pytest.raises(FileProcessingError):
        load_students_from_json(tmp_path, StudentStore())

def test_saved_numbers_have_two_decimals(tmp_path):
    store = StudentStore()
    store.add(1, 'Анна "Ася"')
    store.add_grade(1, 80)
    store.add_grade(1, 72.3333)
    filepath = tmp_path / "students.json"
    save_students_to_json(filepath, store)

    text = filepath.read_text(encoding="utf-8")
    assert '"grades": [80.00, 72.33]' in text
    assert '"average": 76.17' in text
    assert json.loads(text)["students"][0]["name"] == 'Анна "Ася"'

def test_save_keeps_file_permissions(tmp_path):
    filepath = tmp_path / "students.json"
    filepath.write_text('{"students": []}', encoding="utf-8")
    filepath.chmod(0o644)

    save_students_to_json(filepath, StudentStore())

    assert filepath.stat().st_mode & 0o777 == 0o644

def test_non_finite_grades_are_skipped(tmp_path):
    filepath = tmp_path / "students.json"
    filepath.write_text(
        '{"students": [{"id": 1, "name": "A", "grades": [NaN, 80, Infinity, -Infinity]}]}',
        encoding="utf-8")
    store = StudentStore()
    assert load_students_from_json(filepath, store) == 1
    assert store.find(1).grades == [80.0]
    assert store.find(1).average == 80.0

def test_huge_integer_grade_is_skipped(tmp_path):
    filepath = tmp_path / "students.json"
    huge = "1" + "0" * 400
    filepath.write_text(
        '{"students": [{"id": 1, "name": "A", "grades": [%s, 80]},'
        ' {"id": 2, "name": "B", "grades": [60]}]}' % huge,
        encoding="utf-8")
    store = StudentStore()
    assert load_students_from_json(filepath, store) == 2
    assert store.find(1).grades == [80.0]
    assert store.find(2).average == 60.0
