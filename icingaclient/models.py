"""Data types exchanged with the Icinga 2 REST API."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

Vars = dict[str, Any]


class IcingaError(Exception):
    """Raised when the Icinga 2 API reports a failure."""


class NotFoundError(IcingaError):
    """Raised when a requested object does not exist."""


def _get(data: Mapping[str, Any], key: str, default: Any) -> Any:
    value = data.get(key)
    return default if value is None else value


def _put_if(payload: dict[str, Any], key: str, value: Any) -> None:
    """Add ``value`` under ``key`` unless it is empty or zero."""
    if value:
        payload[key] = value


def flatten(mapping: Mapping[str, Any]) -> dict[str, Any]:
    """Flatten nested mappings into dotted keys and lists into indexed keys.

    Nested mappings are flattened recursively as ``parent.child``; list items
    become ``key[i]`` and are not flattened further.
    """
    flat: dict[str, Any] = {}
    for key, value in mapping.items():
        if isinstance(value, Mapping):
            for child_key, child_value in flatten(value).items():
                flat[f"{key}.{child_key}"] = child_value
        elif isinstance(value, (list, tuple)):
            for index, item in enumerate(value):
                flat[f"{key}[{index}]"] = item
        else:
            flat[key] = value
    return flat


@dataclass
class QueryFilter:
    """A filter expression sent in the body of an object query."""

    filter: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"filter": self.filter}


@dataclass
class ClientConfig:
    """Connection settings of a client."""

    url: str = ""
    username: str = ""
    password: str = ""
    debug: bool = False
    disable_keep_alives: bool = False
    zone: str = ""
    tls_config: Any = None


@dataclass
class Action:
    """A passive check result to submit for a service."""

    exit_status: int = 0
    plugin_output: str = ""
    performance_data: list[str] = field(default_factory=list)
    check_command: list[str] = field(default_factory=list)
    check_source: str = ""
    execution_start: str = ""
    execution_end: str = ""
    ttl: int = 0
    filter: str = ""
    type: str = ""

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "exit_status": self.exit_status,
            "plugin_output": self.plugin_output,
        }
        _put_if(payload, "performance_data", list(self.performance_data))
        _put_if(payload, "check_command", list(self.check_command))
        _put_if(payload, "check_source", self.check_source)
        _put_if(payload, "execution_start", self.execution_start)
        _put_if(payload, "execution_end", self.execution_end)
        payload["ttl"] = self.ttl
        payload["filter"] = self.filter
        payload["type"] = self.type
        return payload


@dataclass
class Downtime:
    """A scheduled downtime of a host or service."""

    active: bool = False
    author: str = ""
    comment: str = ""
    end_time: float = 0.0
    fixed: bool = False
    host: str = ""
    name: str = ""
    service: str = ""
    start_time: float = 0.0
    type: str = ""
    zone: str = ""

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "active": self.active,
            "author": self.author,
            "comment": self.comment,
            "end_time": self.end_time,
            "fixed": self.fixed,
            "host_name": self.host,
        }
        _put_if(payload, "name", self.name)
        payload["service_name"] = self.service
        payload["start_time"] = self.start_time
        payload["type"] = self.type
        payload["zone"] = self.zone
        return payload

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Downtime:
        return cls(
            active=bool(_get(data, "active", False)),
            author=_get(data, "author", ""),
            comment=_get(data, "comment", ""),
            end_time=float(_get(data, "end_time", 0.0)),
            fixed=bool(_get(data, "fixed", False)),
            host=_get(data, "host_name", ""),
            name=_get(data, "name", ""),
            service=_get(data, "service_name", ""),
            start_time=float(_get(data, "start_time", 0.0)),
            type=_get(data, "type", ""),
            zone=_get(data, "zone", ""),
        )


@dataclass
class Host:
    """An Icinga 2 host object."""

    name: str = ""
    display_name: str = ""
    address: str = ""
    address6: str = ""
    check_command: str = ""
    notes: str = ""
    notes_url: str = ""
    check_period: str = ""
    vars: Vars | None = None
    groups: list[str] = field(default_factory=list)
    zone: str = ""

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        _put_if(payload, "name", self.name)
        payload["display_name"] = self.display_name
        _put_if(payload, "address", self.address)
        _put_if(payload, "address6", self.address6)
        _put_if(payload, "check_command", self.check_command)
        payload["notes"] = self.notes
        payload["notes_url"] = self.notes_url
        _put_if(payload, "check_period", self.check_period)
        payload["vars"] = self.vars
        _put_if(payload, "groups", list(self.groups))
        _put_if(payload, "zone", self.zone)
        return payload

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Host:
        vars_ = data.get("vars")
        return cls(
            name=_get(data, "name", ""),
            display_name=_get(data, "display_name", ""),
            address=_get(data, "address", ""),
            address6=_get(data, "address6", ""),
            check_command=_get(data, "check_command", ""),
            notes=_get(data, "notes", ""),
            notes_url=_get(data, "notes_url", ""),
            check_period=_get(data, "check_period", ""),
            vars=dict(vars_) if vars_ is not None else None,
            groups=list(_get(data, "groups", [])),
            zone=_get(data, "zone", ""),
        )


@dataclass
class HostGroup:
    """An Icinga 2 host group; its name travels as ``display_name``."""

    name: str = ""
    vars: Vars | None = None
    zone: str = ""

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        _put_if(payload, "display_name", self.name)
        payload["vars"] = self.vars
        _put_if(payload, "zone", self.zone)
        return payload

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> HostGroup:
        vars_ = data.get("vars")
        return cls(
            name=_get(data, "display_name", ""),
            vars=dict(vars_) if vars_ is not None else None,
            zone=_get(data, "zone", ""),
        )


@dataclass
class Service:
    """An Icinga 2 service object."""

    name: str = ""
    display_name: str = ""
    host_name: str = ""
    check_command: str = ""
    enable_active_checks: bool = False
    notes: str = ""
    notes_url: str = ""
    action_url: str = ""
    vars: Vars | None = None
    zone: str = ""
    check_interval: float = 0.0
    retry_interval: float = 0.0
    max_check_attempts: float = 0.0
    check_period: str = ""
    state: float = 0.0
    last_state_change: float = 0.0
    templates: list[str] = field(default_factory=list)

    def full_name(self) -> str:
        """Return the ``host!service`` name Icinga uses for this service."""
        return f"{self.host_name}!{self.name}"

    def to_dict(self) -> dict[str, Any]:
        """Serialise the service with its variables as flat ``vars.*`` keys."""
        payload: dict[str, Any] = {}
        _put_if(payload, "name", self.name)
        payload["display_name"] = self.display_name
        payload["host_name"] = self.host_name
        payload["check_command"] = self.check_command
        payload["enable_active_checks"] = self.enable_active_checks
        payload["notes"] = self.notes
        payload["notes_url"] = self.notes_url
        payload["action_url"] = self.action_url
        _put_if(payload, "zone", self.zone)
        payload["check_interval"] = self.check_interval
        payload["retry_interval"] = self.retry_interval
        payload["max_check_attempts"] = self.max_check_attempts
        _put_if(payload, "check_period", self.check_period)
        _put_if(payload, "state", self.state)
        _put_if(payload, "last_state_change", self.last_state_change)
        _put_if(payload, "templates", list(self.templates))
        for key, value in flatten(self.vars or {}).items():
            payload[f"vars.{key}"] = value
        return payload

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Service:
        vars_ = data.get("vars")
        return cls(
            name=_get(data, "name", ""),
            display_name=_get(data, "display_name", ""),
            host_name=_get(data, "host_name", ""),
            check_command=_get(data, "check_command", ""),
            enable_active_checks=bool(_get(data, "enable_active_checks", False)),
            notes=_get(data, "notes", ""),
            notes_url=_get(data, "notes_url", ""),
            action_url=_get(data, "action_url", ""),
            vars=dict(vars_) if vars_ is not None else None,
            zone=_get(data, "zone", ""),
            check_interval=float(_get(data, "check_interval", 0.0)),
            retry_interval=float(_get(data, "retry_interval", 0.0)),
            max_check_attempts=float(_get(data, "max_check_attempts", 0.0)),
            check_period=_get(data, "check_period", ""),
            state=float(_get(data, "state", 0.0)),
            last_state_change=float(_get(data, "last_state_change", 0.0)),
            templates=list(_get(data, "templates", [])),
        )