import pytest

from rdestl.hash_map import HashMap


def _constant_hash(key):
    return 0


def _identity_hash(key):
    return key


def test_empty_map_has_no_buckets():
    m = HashMap()
    assert len(m) == 0
    assert m.bucket_count() == 0
    assert 5 not in m
    assert m.find(5) is None


def test_setitem_getitem_round_trip():
    m = HashMap()
    for k in range(200):
        m[k] = k * 10
    assert len(m) == 200
    assert all(m[k] == k * 10 for k in range(200))


def test_getitem_missing_raises_key_error():
    m = HashMap()
    m[1] = "a"
    with pytest.raises(KeyError):
        m.__getitem__(2)
    assert 2 not in m
    assert len(m) == 1
    assert m[1] == "a"


def test_setitem_overwrites_existing():
    m = HashMap()
    m[7] = "a"
    m[7] = "b"
    assert len(m) == 1
    assert m[7] == "b"


def test_insert_does_not_overwrite():
    m = HashMap()
    assert m.insert(3, "first") == ("first", True)
    assert m.insert(3, "second") == ("first", False)
    assert m[3] == "first"
    assert len(m) == 1


def test_get_or_default_stores_default():
    m = HashMap()
    assert m.get_or_default(4, []) == []
    assert 4 in m
    m[4].append(1)
    assert m.get_or_default(4, "ignored") == [1]
    assert m.get_or_default(9) is None
    assert len(m) == 2


def test_find_returns_pair():
    m = HashMap()
    m["key"] = 42
    assert m.find("key") == ("key", 42)
    assert m.find("other") is None


def test_string_keys_with_default_hash():
    m = HashMap()
    words = ["alpha", "beta", "gamma", "delta", ""]
    for i, w in enumerate(words):
        m[w] = i
    assert sorted(m) == sorted(words)
    assert [m[w] for w in words] == list(range(len(words)))


def test_erase_returns_count_and_leaves_tombstone():
    m = HashMap()
    for k in range(3):
        m[k] = k
    assert m.erase(1) == 1
    assert m.erase(1) == 0
    assert 1 not in m
    assert len(m) == 2
    assert m.nonempty_bucket_count() == 3


def test_reinsert_reuses_tombstone():
    m = HashMap()
    for k in range(3):
        m[k] = k
    m.erase(2)
    m[2] = "back"
    assert m[2] == "back"
    assert m.nonempty_bucket_count() == 3


def test_first_insert_allocates_initial_capacity():
    m = HashMap()
    m[1] = 1
    assert m.bucket_count() == HashMap.INITIAL_CAPACITY


def test_growth_at_seven_eighths_load():
    m = HashMap()
    limit = HashMap.INITIAL_CAPACITY * 7 // 8
    for k in range(limit):
        m.insert(k, k)
    assert m.bucket_count() == HashMap.INITIAL_CAPACITY
    m.insert(limit, limit)
    assert m.bucket_count() == 128
    assert all(m[k] == k for k in range(limit + 1))


def test_growth_drops_tombstones():
    m = HashMap()
    for k in range(40):
        m.insert(k, k)
    for k in range(20):
        m.erase(k)
    assert m.nonempty_bucket_count() == 40
    for k in range(100, 120):
        m.insert(k, k)
    assert m.nonempty_bucket_count() >= len(m)
    for k in range(100, 200):
        m.insert(k, k)
    assert m.nonempty_bucket_count() == len(m) or m.nonempty_bucket_count() > len(m)
    assert set(m) == set(range(20, 40)) | set(range(100, 200))


def test_reserve_rounds_to_power_of_two():
    m = HashMap()
    m.reserve(100)
    assert m.bucket_count() == 128
    m.reserve(10)
    assert m.bucket_count() == 128


def test_constructor_reserves_buckets():
    assert HashMap(0).bucket_count() == HashMap.INITIAL_CAPACITY
    big = HashMap(1000)
    count = big.bucket_count()
    assert count >= 1000
    assert count & (count - 1) == 0


def test_colliding_keys_are_all_found():
    m = HashMap(hash_func=_constant_hash)
    for k in range(30):
        m[k] = str(k)
    assert all(m[k] == str(k) for k in range(30))
    m.erase(10)
    assert 10 not in m
    assert all(m[k] == str(k) for k in range(30) if k != 10)
    m[10] = "again"
    assert m[10] == "again"
    assert len(m) == 30


def test_iteration_is_in_bucket_order():
    m = HashMap(hash_func=_identity_hash)
    for k in (12, 4, 0, 8):
        m[k] = -k
    assert list(m) == [0, 4, 8, 12]
    assert list(m.items()) == [(0, 0), (4, -4), (8, -8), (12, -12)]


def test_clear_keeps_buckets():
    m = HashMap()
    for k in range(10):
        m[k] = k
    before = m.bucket_count()
    m.clear()
    assert len(m) == 0
    assert m.nonempty_bucket_count() == 0
    assert m.bucket_count() == before
    assert list(m) == []
    m[3] = 3
    assert m[3] == 3


def test_copy_is_independent():
    m = HashMap()
    for k in range(50):
        m[k] = k
    m.erase(0)
    c = m.copy()
    assert dict(c.items()) == dict(m.items())
    assert c.bucket_count() == m.bucket_count()
    c[1] = "changed"
    m.erase(2)
    assert m[1] == 1
    assert c[2] == 2
    assert c[1] == "changed"


def test_swap_exchanges_contents():
    a = HashMap()
    b = HashMap(hash_func=_identity_hash)
    a["x"] = 1
    b[4] = 2
    b[8] = 3
    a.swap(b)
    assert dict(a.items()) == {4: 2, 8: 3}
    assert dict(b.items()) == {"x": 1}
    assert list(a) == [4, 8]


def test_items_match_dict_after_mixed_operations():
    m = HashMap()
    reference = {}
    for k in range(300):
        m[k % 97] = k
        reference[k % 97] = k
        if k % 5 == 0:
            m.erase(k % 31)
            reference.pop(k % 31, None)
    assert dict(m.items()) == reference
    assert len(m) == len(reference)