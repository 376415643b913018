import asyncio
import time

from asset_view import AssetRecord, AssetSorter, SorterConfig
from asset_view.sort import collation_key

from conftest import asset_payload


def _records(*hosts: str) -> list[AssetRecord]:
    return [AssetRecord.model_validate(asset_payload(index, host)) for index, host in enumerate(hosts, 1)]


def test_sort_orders_hosts_with_locale_comparison() -> None:
    records = _records("b", "a", "B")

    ordered = asyncio.run(AssetSorter(SorterConfig(delay_ms=0)).sort(records))

    assert [record.host for record in ordered] == ["a", "b", "B"]


def test_sort_is_stable_on_equal_hosts() -> None:
    records = _records("web", "db", "web", "db")

    ordered = asyncio.run(AssetSorter(SorterConfig(delay_ms=0)).sort(records))

    assert [(record.host, record.id) for record in ordered] == [
        ("db", 2),
        ("db", 4),
        ("web", 1),
        ("web", 3),
    ]


def test_sort_returns_new_sequence_without_mutating_input() -> None:
    records = _records("c", "a", "b")

    ordered = asyncio.run(AssetSorter(SorterConfig(delay_ms=0)).sort(records))

    assert [record.host for record in records] == ["c", "a", "b"]
    assert isinstance(ordered, tuple)


def test_sort_waits_for_configured_minimum_delay() -> None:
    started = time.monotonic()
    asyncio.run(AssetSorter(SorterConfig(delay_ms=50)).sort(_records("b", "a")))

    assert time.monotonic() - started >= 0.045


def test_collation_key_ignores_accents_and_case_at_primary_level() -> None:
    hosts = ["édge", "Zeta", "alpha", "edge"]

    assert sorted(hosts, key=collation_key) == ["alpha", "edge", "édge", "Zeta"]


def test_collation_key_orders_punctuation_before_digits_and_letters() -> None:
    hosts = ["host1", "hostb", "host_a", "host-z", "host 9"]

    assert sorted(hosts, key=collation_key) == ["host 9", "host-z", "host_a", "host1", "hostb"]
