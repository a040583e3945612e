"""Tests for the share-file loader."""

import json
import pytest
from polysecret.loader import load, loads, parse, ShareSet
from polysecret.shamir import EncodedShare, reconstruct_encoded
from polysecret.errors import LoadError


class TestParse:

    def test_sample_document(self, sample_document):
        share_set = parse(sample_document)
        assert share_set.n == 4
        assert share_set.k == 3
        assert share_set.shares == [
            EncodedShare(1, 10, "4"),
            EncodedShare(2, 2, "111"),
            EncodedShare(3, 10, "12"),
            EncodedShare(6, 4, "213"),
        ]

    def test_sample_reconstructs(self, sample_document):
        s = parse(sample_document)
        assert reconstruct_encoded(s.n, s.k, s.shares) == 3

    def test_sorted_by_x(self):
        doc = {
            "keys": {"n": 3, "k": 2},
            "10": {"base": "10", "value": "1"},
            "2": {"base": "10", "value": "2"},
            "7": {"base": "10", "value": "3"},
        }
        assert [s.x for s in parse(doc).shares] == [2, 7, 10]

    def test_integer_fields_accepted(self):
        doc = {"keys": {"n": "2", "k": "1"}, "1": {"base": 16, "value": "ff"}}
        share_set = parse(doc)
        assert (share_set.n, share_set.k) == (2, 1)
        assert share_set.shares[0].base == 16

    def test_non_share_keys_ignored(self):
        doc = {
            "keys": {"n": 1, "k": 1},
            "comment": "ignored",
            "1": {"base": "10", "value": "5"},
        }
        assert len(parse(doc).shares) == 1

    def test_semantic_errors_deferred(self):
        # base 40 is structurally fine; the core rejects it later
        doc = {"keys": {"n": 1, "k": 1}, "1": {"base": "40", "value": "5"}}
        assert parse(doc).shares[0].base == 40


class TestParseErrors:

    def test_not_an_object(self):
        with pytest.raises(LoadError):
            parse([1, 2, 3])

    def test_missing_keys(self):
        with pytest.raises(LoadError, match="keys"):
            parse({"1": {"base": "10", "value": "4"}})

    @pytest.mark.parametrize("missing", ["n", "k"])
    def test_missing_n_or_k(self, sample_document, missing):
        del sample_document["keys"][missing]
        with pytest.raises(LoadError, match=f"'{missing}'"):
            parse(sample_document)

    @pytest.mark.parametrize("value", ["four", 2.5, True, None])
    def test_non_integer_k(self, sample_document, value):
        sample_document["keys"]["k"] = value
        with pytest.raises(LoadError):
            parse(sample_document)

    @pytest.mark.parametrize("field", ["base", "value"])
    def test_share_missing_field(self, sample_document, field):
        del sample_document["2"][field]
        with pytest.raises(LoadError, match="share 2"):
            parse(sample_document)

    def test_non_integer_base(self, sample_document):
        sample_document["3"]["base"] = "ten"
        with pytest.raises(LoadError):
            parse(sample_document)

    def test_no_shares(self):
        with pytest.raises(LoadError, match="no shares"):
            parse({"keys": {"n": 1, "k": 1}})

    def test_share_not_object(self, sample_document):
        sample_document["1"] = "4"
        with pytest.raises(LoadError):
            parse(sample_document)


class TestFiles:

    def test_load(self, write_share_file, sample_document):
        path = write_share_file(sample_document)
        share_set = load(path)
        assert isinstance(share_set, ShareSet)
        assert len(share_set.shares) == 4

    def test_loads(self, sample_document):
        assert loads(json.dumps(sample_document)).k == 3

    def test_empty_file(self, write_share_file):
        path = write_share_file("  \n")
        with pytest.raises(LoadError, match="empty") as exc:
            load(path)
        assert exc.value.source == str(path)

    def test_invalid_json(self, write_share_file):
        with pytest.raises(LoadError, match="invalid JSON"):
            load(write_share_file("{not json"))

    def test_missing_file(self, tmp_path):
        with pytest.raises(LoadError, match="cannot read"):
            load(tmp_path / "absent.json")

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"keys": {"n": 1, "k": 1}, "1": {"base": "10", "value": "\xe9"}}')
        with pytest.raises(LoadError, match="UTF-8") as exc:
            load(path)
        assert exc.value.source == str(path)

    def test_nested_too_deeply(self):
        with pytest.raises(LoadError, match="invalid JSON"):
            loads("[" * 200000)
