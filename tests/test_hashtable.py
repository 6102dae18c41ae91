import pytest
from pathgraph.hashtable import HashtableMap
from pathgraph.errors import DuplicateKeyError, NotFoundError, NullKeyError


class TestHashtableMap:
    def test_put_and_get(self):
        m = HashtableMap()
        m.put("A", 1)
        m.put("B", 2)
        assert m.get("A") == 1
        assert m.get("B") == 2
        assert m.contains_key("A")
        assert m.get_size() == 2

    def test_default_capacity(self):
        m = HashtableMap()
        assert m.get_capacity() == 64
        assert m.get_size() == 0

    def test_default_capacity_from_environment(self, monkeypatch):
        monkeypatch.setenv("PATHGRAPH_DEFAULT_CAPACITY", "8")
        assert HashtableMap().get_capacity() == 8

    def test_invalid_capacity_raises_value_error(self):
        with pytest.raises(ValueError):
            HashtableMap(0)
        with pytest.raises(ValueError):
            HashtableMap(-4)

    def test_none_value_is_allowed(self):
        m = HashtableMap()
        m.put("A", None)
        assert m.contains_key("A")
        assert m.get("A") is None

    def test_put_none_key_raises_null_key_error(self):
        m = HashtableMap()
        with pytest.raises(NullKeyError, match="Key cannot be None."):
            m.put(None, 1)
        assert m.get_size() == 0

    def test_null_key_error_is_a_type_error(self):
        m = HashtableMap()
        with pytest.raises(TypeError):
            m.put(None, 1)

    def test_duplicate_key_rejected_and_mapping_kept(self):
        m = HashtableMap()
        m.put("A", 1)
        with pytest.raises(DuplicateKeyError, match="Key A already exists."):
            m.put("A", 2)
        assert m.get("A") == 1
        assert m.get_size() == 1

    def test_get_missing_key_raises_not_found(self):
        m = HashtableMap()
        with pytest.raises(NotFoundError, match="Key Z does not exist."):
            m.get("Z")

    def test_contains_key_does_not_mutate(self):
        m = HashtableMap(4)
        m.put(1, "one")
        assert not m.contains_key(2)
        assert not m.contains_key(None)
        assert m.get_size() == 1
        assert m.get_capacity() == 4

    def test_remove_returns_value(self):
        m = HashtableMap()
        m.put("A", 1)
        m.put("B", 2)
        assert m.remove("A") == 1
        assert not m.contains_key("A")
        assert m.get_size() == 1
        with pytest.raises(NotFoundError):
            m.get("A")

    def test_remove_missing_key_raises_not_found(self):
        m = HashtableMap()
        m.put("A", 1)
        with pytest.raises(NotFoundError, match="Key B does not exist."):
            m.remove("B")
        assert m.get_size() == 1

    def test_remove_none_key_raises_null_key_error(self):
        m = HashtableMap()
        with pytest.raises(NullKeyError):
            m.remove(None)

    def test_colliding_keys_share_a_bucket(self):
        m = HashtableMap(10)
        # 1, 11 and 21 all hash to bucket 1
        m.put(1, "a")
        m.put(11, "b")
        m.put(21, "c")
        assert m.get(1) == "a"
        assert m.get(11) == "b"
        assert m.get(21) == "c"
        assert m.remove(11) == "b"
        assert m.get(1) == "a"
        assert m.get(21) == "c"
        assert not m.contains_key(11)

    def test_negative_hashes(self):
        m = HashtableMap(7)
        for key in (-1, -8, -15, 3):
            m.put(key, key * 2)
        for key in (-1, -8, -15, 3):
            assert m.get(key) == key * 2

    def test_resize_when_load_factor_reaches_threshold(self):
        m = HashtableMap(5)
        for i in range(3):
            m.put(i, i)
        assert m.get_capacity() == 5
        m.put(3, 3)  # 4 / 5 == 0.8
        assert m.get_capacity() == 10
        assert m.get_size() == 4

    def test_load_factor_below_threshold_after_every_put(self):
        m = HashtableMap(2)
        for i in range(200):
            m.put(f"key{i}", i)
            assert m.get_size() / m.get_capacity() < 0.8
        assert m.get_capacity() == 256
        for i in range(200):
            assert m.get(f"key{i}") == i

    def test_resize_keeps_colliding_entries_reachable(self):
        m = HashtableMap(4)
        m.put(0, "a")
        m.put(4, "b")
        m.put(8, "c")  # 3 / 4 < 0.8, all in bucket 0
        assert m.get_capacity() == 4
        m.put(12, "d")  # triggers resize to 8
        assert m.get_capacity() == 8
        assert [m.get(k) for k in (0, 4, 8, 12)] == ["a", "b", "c", "d"]

    def test_clear_keeps_capacity(self):
        m = HashtableMap(4)
        for i in range(10):
            m.put(i, i)
        capacity = m.get_capacity()
        m.clear()
        assert m.get_size() == 0
        assert m.get_capacity() == capacity
        assert m.get_keys() == []
        assert not m.contains_key(3)
        m.put(3, "again")
        assert m.get(3) == "again"

    def test_get_keys(self):
        m = HashtableMap()
        keys = {"A", "B", "C", "D"}
        for key in keys:
            m.put(key, key.lower())
        assert sorted(m.get_keys()) == sorted(keys)

    def test_python_protocol(self):
        m = HashtableMap()
        m.put("A", 1)
        m.put("B", 2)
        assert len(m) == 2
        assert "A" in m
        assert "Z" not in m
        assert set(m) == {"A", "B"}

    def test_tuple_keys(self):
        m = HashtableMap()
        m.put(("A", "B"), 1.5)
        assert m.contains_key(("A", "B"))
        assert not m.contains_key(("B", "A"))
