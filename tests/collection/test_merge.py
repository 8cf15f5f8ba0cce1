"""Tests for merging collections.

Critical Invariants:
- Merged length is the sum of input lengths, even when keys are shared
- Later inputs overwrite earlier ones on shared keys
- The merged collection owns its own item dict
"""

import warnings

import pytest

from idcollection import CollectionSettings, IdentityCollection, MergeOvercountWarning, merge


@pytest.fixture
def quiet():
    """Settings with the overcount warning disabled."""
    return CollectionSettings(warn_on_merge_overcount=False)


def make(*ids, tag="x"):
    c = IdentityCollection()
    c.add(*({"_id": i, "tag": tag} for i in ids))
    return c


class TestMergeUnion:
    def test_disjoint_collections(self):
        """Disjoint inputs give an exact length and no warning."""
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            merged = merge(make(1, 2), make(3))

        assert merged.length == 3
        assert list(merged.items) == ["1", "2", "3"]

    def test_later_collection_overwrites_shared_key(self, quiet):
        merged = merge(make(1, 2, tag="first"), make(2, tag="second"), settings=quiet)

        assert merged.items["2"]["tag"] == "second"
        assert merged.items["1"]["tag"] == "first"

    def test_merged_items_are_independent(self):
        a = make(1)
        b = make(2)

        merged = merge(a, b)
        merged.add({"_id": 9})

        assert merged.items is not a.items
        assert "9" not in a.items
        assert "9" not in b.items

    def test_uses_identity_fn_of_first_collection(self):
        def by_code(item):
            return item["code"]

        a = IdentityCollection(by_code)
        a.add({"code": "A"})
        b = IdentityCollection(by_code)
        b.add({"code": "B"})

        merged = merge(a, b)

        assert merged.identity_fn is by_code
        assert merged.has({"code": "B"})

    def test_single_collection_copy(self):
        a = make(1, 2)

        merged = merge(a)

        assert merged.items == a.items
        assert merged.length == 2

    def test_no_collections(self):
        merged = merge()

        assert merged.length == 0
        assert merged.items == {}

    def test_static_merge_on_class(self, quiet):
        merged = IdentityCollection.merge(make(1), make(1, 2), settings=quiet)

        assert merged.length == 3
        assert list(merged.items) == ["1", "2"]


class TestMergeOvercount:
    def test_shared_key_overcounts_length(self):
        """CRITICAL: length is the summed input length, not the distinct key count."""
        a = make(1, 2)
        b = make(2, 3)

        with pytest.warns(MergeOvercountWarning, match="distinct keys"):
            merged = merge(a, b)

        assert merged.length == a.length + b.length == 4
        assert len(merged.items) == 3
        assert merged.length > len(merged.items), "Overcount must be preserved"

    def test_warning_can_be_disabled(self, quiet):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            merged = merge(make(1), make(1), settings=quiet)

        assert merged.length == 2

    def test_warning_disabled_via_environment(self, monkeypatch):
        monkeypatch.setenv("IDCOLLECTION_WARN_ON_MERGE_OVERCOUNT", "false")

        with warnings.catch_warnings():
            warnings.simplefilter("error")
            merged = merge(make(1), make(1))

        assert merged.length == 2

    def test_overcounted_collection_still_removes(self, quiet):
        """Removal decrements the summed length per removed item."""
        merged = merge(make(1), make(1), settings=quiet)

        assert merged.remove(1) == {"_id": 1, "tag": "x"}
        assert merged.length == 1
        assert merged.items == {}
        assert merged.remove(1) == []
