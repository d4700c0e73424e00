import pytest

from toolchat.generic_service import DataService, GenericService, MemoryDataService


def test_memory_store_round_trip():
    store = MemoryDataService("initial data")
    assert store.get_data() == "initial data"
    store.set_data("next")
    assert store.get_data() == "next"


def test_service_reads_store():
    service = GenericService(MemoryDataService("initial data"))
    assert service.get_data() == "initial data"


def test_set_data_echoes_without_storing():
    service = GenericService(MemoryDataService("initial data"))
    assert service.set_data("abc") == "Current memory: abc"
    assert service.get_data() == "initial data"


def test_data_service_is_abstract():
    with pytest.raises(TypeError):
        DataService()


def test_info():
    info = GenericService(MemoryDataService("x")).info()
    assert info["instructions"] == "generic data service"
    assert info["tools"]["get_data"] == "get memory from service"