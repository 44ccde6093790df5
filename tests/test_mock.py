import pytest

from icingaclient.mock import MockClient
from icingaclient.models import (
    Action,
    ClientConfig,
    Host,
    HostGroup,
    IcingaError,
    NotFoundError,
    QueryFilter,
    Service,
)


def test_host_lifecycle():
    client = MockClient()
    client.create_host(Host(name="h1", address="10.0.0.1"))
    assert client.get_host("h1").address == "10.0.0.1"
    client.update_host(Host(name="h1", address="10.0.0.2"))
    assert [h.address for h in client.list_hosts("")] == ["10.0.0.2"]
    client.delete_host("h1")
    with pytest.raises(NotFoundError, match="host not found"):
        client.get_host("h1")


def test_missing_host_is_an_icinga_error():
    with pytest.raises(IcingaError, match="host not found"):
        MockClient().get_host("absent")


def test_host_group_lifecycle():
    client = MockClient()
    client.create_host_group(HostGroup(name="g1"))
    assert client.get_host_group("g1") == HostGroup(name="g1")
    client.update_host_group(HostGroup(name="g1", zone="z"))
    assert client.list_host_groups("")[0].zone == "z"
    client.delete_host_group("g1")
    with pytest.raises(NotFoundError, match="hostgroup not found"):
        client.get_host_group("g1")


def test_service_keyed_by_full_name():
    client = MockClient()
    service = Service(name="s1", host_name="h1")
    client.create_service(service)
    assert client.get_service("h1!s1") == service
    client.update_service(Service(name="s1", host_name="h1", notes="n"))
    assert [s.notes for s in client.list_services(QueryFilter())] == ["n"]
    client.delete_service("h1!s1")
    with pytest.raises(NotFoundError, match="service not found"):
        client.get_service("h1!s1")


def test_process_check_result_appends_actions():
    client = MockClient()
    service = Service(name="s1", host_name="h1")
    client.process_check_result(service, Action(exit_status=0))
    client.process_check_result(service, Action(exit_status=2))
    assert [a.exit_status for a in client.actions["h1!s1"]] == [0, 2]


def test_list_downtimes_is_empty():
    assert MockClient().list_downtimes(QueryFilter(filter="x")) == []


def test_delete_missing_is_harmless():
    client = MockClient()
    client.create_host(Host(name="keep"))
    client.delete_host("missing")
    assert [h.name for h in client.list_hosts("")] == ["keep"]


def test_stored_host_is_isolated_from_caller():
    client = MockClient()
    host = Host(name="h1", address="a")
    client.create_host(host)
    host.address = "changed"
    assert client.get_host("h1").address == "a"


def test_client_config_is_empty():
    assert MockClient().get_client_config() == ClientConfig()


def test_test_api_requires_hostname():
    client = MockClient()
    client.set_url("/v1/no-host")
    with pytest.raises(IcingaError, match="URL without hostname not supported"):
        client.test_api()
    client.set_url("https://icinga.example.com:5665")
    client.test_api()
    assert client.url == "https://icinga.example.com:5665"