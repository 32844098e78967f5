"""Tests for the operation journal."""

from modarith.service.journal import GENESIS_HASH, Journal


def test_record_and_verify():
    journal = Journal()
    journal.record("inverse", "ok", {"a": "633", "modulus": "2801", "inverse": "177"})
    journal.record("inverse", "absent", {"a": "4", "modulus": "8", "inverse": None})
    assert len(journal) == 2
    assert journal.verify_chain()


def test_empty_chain():
    assert Journal().verify_chain()


def test_chain_links():
    journal = Journal()
    e1 = journal.record("a", "ok", {})
    e2 = journal.record("b", "ok", {})
    assert e1.prev_hash == GENESIS_HASH
    assert e2.prev_hash == e1.entry_hash


def test_tampering_detected():
    journal = Journal()
    journal.record("mulmod", "ok", {"result": "6"})
    journal.record("mulmod", "ok", {"result": "7"})
    journal._entries[0].data["result"] = "8"
    assert not journal.verify_chain()


def test_entries_are_plain_dicts():
    journal = Journal()
    journal.record("egcd", "rejected", {"error": "gcd(0, 0) is undefined"})
    [entry] = journal.entries()
    assert entry["operation"] == "egcd"
    assert entry["outcome"] == "rejected"
    assert len(entry["entry_hash"]) == 64
