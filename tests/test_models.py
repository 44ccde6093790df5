from icingaclient.models import (
    Action,
    ClientConfig,
    Downtime,
    Host,
    HostGroup,
    QueryFilter,
    Service,
    flatten,
)


def test_flatten_leaves_flat_mapping_unchanged():
    data = {"a": 1, "b": "two", "c": True}
    assert flatten(data) == data


def test_flatten_nested_mappings_use_dotted_keys():
    data = {"outer": {"inner": {"leaf": 5}}, "top": "x"}
    assert flatten(data) == {"outer.inner.leaf": 5, "top": "x"}


def test_flatten_lists_use_indexed_keys_without_recursion():
    data = {"items": ["a", {"k": 1}]}
    assert flatten(data) == {"items[0]": "a", "items[1]": {"k": 1}}


def test_flatten_empty_list_yields_nothing():
    assert flatten({"items": [], "other": None}) == {"other": None}


def test_query_filter_to_dict():
    assert QueryFilter(filter='host.name=="web"').to_dict() == {"filter": 'host.name=="web"'}


def test_client_config_defaults_are_empty():
    config = ClientConfig()
    assert (config.url, config.zone, config.debug, config.tls_config) == ("", "", False, None)


def test_action_to_dict_omits_empty_optional_fields():
    action = Action(exit_status=2, plugin_output="CRITICAL", ttl=300)
    assert action.to_dict() == {
        "exit_status": 2,
        "plugin_output": "CRITICAL",
        "ttl": 300,
        "filter": "",
        "type": "",
    }


def test_action_to_dict_includes_set_optional_fields():
    action = Action(
        performance_data=["load=1"],
        check_command=["check_load"],
        check_source="agent",
        execution_start="1",
        execution_end="2",
        type="Service",
    )
    payload = action.to_dict()
    assert payload["performance_data"] == ["load=1"]
    assert payload["check_command"] == ["check_load"]
    assert payload["check_source"] == "agent"
    assert payload["execution_start"] == "1"
    assert payload["execution_end"] == "2"
    assert payload["type"] == "Service"


def test_downtime_round_trip():
    downtime = Downtime(
        active=True,
        author="admin",
        comment="maintenance",
        end_time=200.0,
        fixed=True,
        host="web",
        name="web!dt",
        service="http",
        start_time=100.0,
        type="Downtime",
        zone="master",
    )
    assert Downtime.from_dict(downtime.to_dict()) == downtime


def test_downtime_wire_keys():
    payload = Downtime(host="web", service="http").to_dict()
    assert payload["host_name"] == "web"
    assert payload["service_name"] == "http"
    assert "name" not in payload


def test_downtime_from_dict_tolerates_nulls():
    downtime = Downtime.from_dict({"author": None, "end_time": None})
    assert downtime == Downtime()


def test_host_round_trip():
    host = Host(
        name="web",
        display_name="Web",
        address="192.0.2.10",
        check_command="hostalive",
        notes="n",
        notes_url="u",
        vars={"os": "Linux"},
        groups=["linux"],
        zone="master",
    )
    assert Host.from_dict(host.to_dict()) == host


def test_host_to_dict_omits_empty_fields_but_keeps_vars():
    payload = Host(display_name="Web").to_dict()
    assert "name" not in payload
    assert "groups" not in payload
    assert "zone" not in payload
    assert payload["vars"] is None
    assert payload["notes"] == ""


def test_host_group_uses_display_name_key():
    group = HostGroup(name="linux", vars={"a": 1})
    payload = group.to_dict()
    assert payload["display_name"] == "linux"
    assert HostGroup.from_dict(payload) == group


def test_host_group_empty_name_omitted():
    assert "display_name" not in HostGroup().to_dict()


def test_service_full_name():
    assert Service(host_name="web", name="http").full_name() == "web!http"


def test_service_to_dict_flattens_vars():
    service = Service(
        name="http",
        host_name="web",
        vars={"http": {"port": 80}, "tags": ["a", "b"]},
    )
    payload = service.to_dict()
    assert "vars" not in payload
    assert payload["vars.http.port"] == 80
    assert payload["vars.tags[0]"] == "a"
    assert payload["vars.tags[1]"] == "b"


def test_service_to_dict_omits_zero_state_and_empty_templates():
    payload = Service(host_name="web").to_dict()
    assert "state" not in payload
    assert "last_state_change" not in payload
    assert "templates" not in payload
    assert payload["check_interval"] == 0.0


def test_service_round_trip_without_vars():
    service = Service(
        name="http",
        display_name="HTTP",
        host_name="web",
        check_command="http",
        enable_active_checks=True,
        check_interval=60.0,
        retry_interval=30.0,
        max_check_attempts=3.0,
        state=2.0,
        templates=["generic-service"],
    )
    assert Service.from_dict(service.to_dict()) == service


def test_service_from_dict_reads_nested_vars():
    service = Service.from_dict({"host_name": "web", "vars": {"a": 1}})
    assert service.vars == {"a": 1}