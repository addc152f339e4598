# ==============================================
# Tests for Persistence (KeyValueStore + SubjectPersistence)
# ==============================================

import json
import shutil

import pytest

from bunkit.exceptions import KeyValueStoreError
from bunkit.persistence.key_value_store import KeyValueStore
from bunkit.persistence.subject_persistence import SubjectPersistence, decode_subjects
from bunkit.subjects.subject import Subject


@pytest.fixture
def persistence(key_value_store):
    return SubjectPersistence(key_value_store)


@pytest.fixture
def subjects():
    return [
        Subject(name="Maths", attended=9, total=10),
        Subject(name="Physics", attended=6, total=8),
        Subject(name="Chemistry", attended=0, total=0),
    ]


class TestKeyValueStore:

    def test_creates_parent_directory(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "store.json"
        KeyValueStore(str(path))
        assert path.parent.is_dir()

    def test_missing_file_reads_empty(self, key_value_store):
        assert key_value_store.get("subjects") is None
        assert key_value_store.get("subjects", []) == []
        assert not key_value_store.contains("subjects")

    def test_set_and_get(self, key_value_store, data_file):
        key_value_store.set("subjects", [1, 2])
        key_value_store.set("other", {"a": 1})

        assert key_value_store.get("subjects") == [1, 2]
        assert json.loads(data_file.read_text(encoding="utf-8")) == {
            "subjects": [1, 2],
            "other": {"a": 1},
        }

    def test_delete(self, key_value_store):
        key_value_store.set("subjects", [])
        key_value_store.delete("subjects")
        key_value_store.delete("never-set")
        assert not key_value_store.contains("subjects")

    def test_clear_removes_file(self, key_value_store, data_file):
        key_value_store.set("subjects", [])
        key_value_store.clear()
        assert not data_file.exists()

    def test_corrupt_file_raises_on_read(self, key_value_store, data_file):
        data_file.write_text("{not json", encoding="utf-8")
        with pytest.raises(KeyValueStoreError):
            key_value_store.get("subjects")

    def test_non_object_file_raises_on_read(self, key_value_store, data_file):
        data_file.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(KeyValueStoreError):
            key_value_store.get("subjects")

    def test_set_replaces_corrupt_file(self, key_value_store, data_file):
        data_file.write_text("{not json", encoding="utf-8")
        key_value_store.set("subjects", [])
        assert key_value_store.get("subjects") == []

    def test_unserializable_value_raises(self, key_value_store, data_file):
        key_value_store.set("subjects", [1])
        with pytest.raises(KeyValueStoreError):
            key_value_store.set("subjects", {1, 2})
        assert key_value_store.get("subjects") == [1]

    def test_lone_surrogate_raises_store_error(self, key_value_store, data_file):
        with pytest.raises(KeyValueStoreError):
            key_value_store.set("subjects", ["Phys\udcffics"])
        assert list(data_file.parent.iterdir()) == []

    def test_missing_directory_raises_store_error(self, key_value_store, data_file):
        shutil.rmtree(data_file.parent)
        with pytest.raises(KeyValueStoreError):
            key_value_store.set("subjects", [1])

    def test_no_temp_files_left(self, key_value_store, data_file):
        key_value_store.set("subjects", [1])
        assert [p.name for p in data_file.parent.iterdir()] == [data_file.name]


class TestSubjectPersistence:

    def test_round_trip(self, persistence, subjects):
        assert persistence.save(subjects) is True
        assert persistence.load() == subjects

    def test_round_trip_empty(self, persistence):
        persistence.save([])
        assert persistence.load() == []

    def test_layout_under_subjects_key(self, persistence, subjects, data_file):
        persistence.save(subjects)
        stored = json.loads(data_file.read_text(encoding="utf-8"))
        assert list(stored) == ["subjects"]
        assert stored["subjects"][1] == {
            "id": subjects[1].id,
            "name": "Physics",
            "attended": 6,
            "total": 8,
        }

    def test_save_overwrites_wholesale(self, persistence, subjects):
        persistence.save(subjects)
        persistence.save(subjects[:1])
        assert persistence.load() == subjects[:1]

    def test_custom_key(self, key_value_store, subjects):
        persistence = SubjectPersistence(key_value_store, key="courses")
        persistence.save(subjects)
        assert key_value_store.contains("courses")
        assert not key_value_store.contains("subjects")

    def test_missing_key_loads_empty(self, persistence):
        assert persistence.load() == []

    def test_corrupt_file_loads_empty(self, persistence, data_file):
        data_file.write_text("garbage", encoding="utf-8")
        assert persistence.load() == []

    def test_one_bad_element_discards_all(self, persistence, key_value_store, subjects):
        payload = [s.to_dict() for s in subjects]
        payload[2]["total"] = "zero"
        key_value_store.set("subjects", payload)
        assert persistence.load() == []

    def test_wrong_type_under_key_loads_empty(self, persistence, key_value_store):
        key_value_store.set("subjects", {"id": "x"})
        assert persistence.load() == []

    def test_unencodable_name_is_swallowed(self, persistence, subjects, data_file):
        persistence.save(subjects)
        broken = subjects + [Subject(name="Phys\udcffics", attended=1, total=1)]

        assert persistence.save(broken) is False

        assert persistence.load() == subjects
        assert [p.name for p in data_file.parent.iterdir()] == [data_file.name]

    def test_missing_directory_is_swallowed(self, persistence, subjects, data_file):
        shutil.rmtree(data_file.parent)

        assert persistence.save(subjects) is False

        assert not data_file.parent.exists()


class TestDecodeSubjects:

    def test_accepts_json_text(self, subjects):
        text = json.dumps([s.to_dict() for s in subjects])
        assert decode_subjects(text) == subjects
        assert decode_subjects(text.encode("utf-8")) == subjects
