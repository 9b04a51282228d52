import asyncio

from configurator.core.store.memory import InMemoryKeyValueStore
from configurator.core.store.ports import KeyValueStore


def test_memory_store_satisfies_protocol():
    assert isinstance(InMemoryKeyValueStore(), KeyValueStore)


def test_get_unknown_key_returns_none(memory_store):
    assert asyncio.run(memory_store.get("__config", "missing")) is None


def test_set_then_get(memory_store):
    ack = asyncio.run(memory_store.set("__config", {"port": 1}, "server"))

    assert ack is True
    assert asyncio.run(memory_store.get("__config", "server")) == {"port": 1}
    assert memory_store.has("__config", "server")


def test_namespaces_are_isolated(memory_store):
    asyncio.run(memory_store.set("a", 1, "k"))
    asyncio.run(memory_store.set("b", 2, "k"))

    assert asyncio.run(memory_store.get("a", "k")) == 1
    assert asyncio.run(memory_store.get("b", "k")) == 2
    assert memory_store.keys("a") == ["k"]


def test_values_are_copied_on_write_and_read(memory_store):
    value = {"items": [1, 2]}
    asyncio.run(memory_store.set("ns", value, "k"))
    value["items"].append(3)

    loaded = asyncio.run(memory_store.get("ns", "k"))
    loaded["items"].append(4)

    assert asyncio.run(memory_store.get("ns", "k")) == {"items": [1, 2]}


def test_has_distinguishes_stored_none_from_missing(memory_store):
    asyncio.run(memory_store.set("ns", None, "k"))

    assert memory_store.has("ns", "k")
    assert not memory_store.has("ns", "other")
    assert memory_store.keys("ns") == ["k"]
    assert memory_store.keys("empty") == []
