import asyncio
from pathlib import Path

import pytest
import yaml

from configurator.core.errors import StoreFormatError
from configurator.core.store.ports import KeyValueStore
from configurator.core.store.yaml_file import YamlFileKeyValueStore


def test_yaml_store_satisfies_protocol(tmp_path: Path):
    assert isinstance(YamlFileKeyValueStore(root_dir=tmp_path), KeyValueStore)


def test_missing_namespace_reads_none(tmp_path: Path):
    store = YamlFileKeyValueStore(root_dir=tmp_path)
    assert asyncio.run(store.get("__config", "server")) is None


def test_set_writes_yaml_document(tmp_path: Path):
    store = YamlFileKeyValueStore(root_dir=tmp_path / "nested")

    ack = asyncio.run(store.set("__config", {"port": 8080, "mode": "a"}, "server"))

    assert ack is True
    path = tmp_path / "nested" / "__config.yaml"
    assert path.exists()
    assert yaml.safe_load(path.read_text(encoding="utf-8")) == {
        "server": {"port": 8080, "mode": "a"}
    }
    assert not (tmp_path / "nested" / "__config.yaml.tmp").exists()


def test_round_trip_and_key_isolation(tmp_path: Path):
    store = YamlFileKeyValueStore(root_dir=tmp_path)

    async def scenario():
        await store.set("__config", True, "server.flag")
        await store.set("__config", "b", "server.mode")
        return await store.get("__config", "server.flag"), await store.get("__config", "server.mode")

    assert asyncio.run(scenario()) == (True, "b")


def test_concurrent_writes_on_different_keys_are_kept(tmp_path: Path):
    store = YamlFileKeyValueStore(root_dir=tmp_path)

    async def scenario():
        await asyncio.gather(*(store.set("ns", i, f"k{i}") for i in range(10)))
        return [await store.get("ns", f"k{i}") for i in range(10)]

    assert asyncio.run(scenario()) == list(range(10))


def test_non_mapping_document_raises(tmp_path: Path):
    (tmp_path / "ns.yaml").write_text("- a\n- b\n", encoding="utf-8")
    store = YamlFileKeyValueStore(root_dir=tmp_path)

    with pytest.raises(StoreFormatError):
        asyncio.run(store.get("ns", "k"))


@pytest.mark.parametrize("namespace", ["", "../escape", "a/b", ".hidden"])
def test_invalid_namespace_raises(tmp_path: Path, namespace):
    store = YamlFileKeyValueStore(root_dir=tmp_path)
    with pytest.raises(ValueError, match="invalid namespace"):
        store.namespace_path(namespace)
