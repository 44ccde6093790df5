"""HTTP client for the Icinga 2 REST API."""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Protocol, runtime_checkable

import requests

from .models import (
    Action,
    ClientConfig,
    Downtime,
    Host,
    HostGroup,
    IcingaError,
    NotFoundError,
    QueryFilter,
    Service,
)

_log = logging.getLogger(__name__)

_NOT_OK = "did not get 200 OK"


@runtime_checkable
class Client(Protocol):
    """Operations offered by every Icinga 2 client."""

    def get_host(self, name: str) -> Host: ...

    def create_host(self, host: Host) -> None: ...

    def list_hosts(self, query: str) -> list[Host]: ...

    def delete_host(self, name: str) -> None: ...

    def update_host(self, host: Host) -> None: ...

    def get_host_group(self, name: str) -> HostGroup: ...

    def create_host_group(self, host_group: HostGroup) -> None: ...

    def list_host_groups(self, query: str) -> list[HostGroup]: ...

    def delete_host_group(self, name: str) -> None: ...

    def update_host_group(self, host_group: HostGroup) -> None: ...

    def list_downtimes(self, query: QueryFilter) -> list[Downtime]: ...

    def get_service(self, name: str) -> Service: ...

    def create_service(self, service: Service) -> None: ...

    def list_services(self, query: QueryFilter) -> list[Service]: ...

    def delete_service(self, name: str) -> None: ...

    def update_service(self, service: Service) -> None: ...

    def process_check_result(self, service: Service, action: Action) -> None: ...

    def get_client_config(self) -> ClientConfig: ...

    def test_api(self) -> None: ...

    def set_url(self, url: str) -> None: ...


def _decode(response: requests.Response) -> dict[str, Any]:
    if not response.content:
        return {}
    try:
        data = response.json()
    except ValueError as exc:
        raise IcingaError(f"invalid JSON in response from {response.url}") from exc
    return data if isinstance(data, dict) else {}


def _attrs(data: dict[str, Any]) -> list[dict[str, Any]]:
    return [entry.get("attrs") or {} for entry in data.get("results") or []]


def _failure_report(data: dict[str, Any]) -> str:
    report = ""
    for entry in data.get("results") or []:
        if float(entry.get("code") or 0) >= 400.0:
            status = entry.get("status") or ""
            errors = " ".join(entry.get("errors") or [])
            report += f"{status} {errors} "
    return report


class WebClient:
    """Client talking to a live Icinga 2 API over HTTP.

    ``tls_config`` is handed to the HTTP session as its ``verify`` setting:
    a CA bundle path, or ``False`` to skip certificate checks.
    """

    def __init__(
        self,
        url: str = "",
        username: str = "",
        password: str = "",
        *,
        debug: bool = False,
        disable_keep_alives: bool = False,
        zone: str = "",
        tls_config: Any = None,
        session: requests.Session | None = None,
    ) -> None:
        self.url = url.rstrip("/")
        self.username = username
        self.password = password
        self.debug = debug
        self.disable_keep_alives = disable_keep_alives
        self.zone = zone
        self.tls_config = tls_config
        self._session = session or requests.Session()
        self._session.auth = (username, password)
        if tls_config is not None:
            self._session.verify = tls_config
        if disable_keep_alives:
            self._session.headers["Connection"] = "close"

    def get_client_config(self) -> ClientConfig:
        return ClientConfig(
            url=self.url,
            username=self.username,
            password=self.password,
            debug=self.debug,
            disable_keep_alives=self.disable_keep_alives,
            zone=self.zone,
            tls_config=self.tls_config,
        )

    def set_url(self, url: str) -> None:
        self.url = url

    def _send(
        self,
        method: str,
        url: str,
        payload: Any = None,
        *,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
        result: bool = True,
        error: bool = True,
    ) -> tuple[requests.Response, dict[str, Any], dict[str, Any]]:
        if self.debug:
            _log.debug("%s %s payload=%r", method, url, payload)
        try:
            response = self._session.request(
                method, url, json=payload, params=params, headers=headers
            )
        except requests.RequestException as exc:
            raise IcingaError(f"{method} {url}: {exc}") from exc
        if self.debug:
            _log.debug("%s %s -> %s", method, url, response.status_code)
        status = response.status_code
        decoded_result: dict[str, Any] = {}
        decoded_error: dict[str, Any] = {}
        if result and 200 <= status < 300:
            decoded_result = _decode(response)
        elif error and status >= 400:
            decoded_error = _decode(response)
        return response, decoded_result, decoded_error

    @staticmethod
    def _handle_results(
        kind: str,
        path: str,
        response: requests.Response,
        results: dict[str, Any],
        errors: dict[str, Any],
    ) -> None:
        report = _failure_report(results) + _failure_report(errors)
        if response.status_code >= 400:
            raise IcingaError(
                f"{kind} {path} : {response.status_code} {response.reason} - {report}"
            )
        if report:
            raise IcingaError(f"{kind} {path} : {report}\n")

    def test_api(self) -> None:
        """Contact the API root; raise if the server cannot be reached."""
        self._send("GET", self.url + "/v1")

    def create_object(self, path: str, payload: dict[str, Any]) -> None:
        response, results, errors = self._send(
            "PUT", self.url + "/v1/objects" + path, payload
        )
        self._handle_results("create", path, response, results, errors)

    def update_object(self, path: str, payload: dict[str, Any]) -> None:
        response, results, errors = self._send(
            "POST", self.url + "/v1/objects" + path, payload
        )
        self._handle_results("update", path, response, results, errors)

    def filtered_query(
        self, url: str, query: QueryFilter
    ) -> tuple[requests.Response, dict[str, Any]]:
        """Send a GET carrying ``query`` as JSON body; return response and decoded result."""
        response, results, _ = self._send(
            "GET",
            url,
            query.to_dict(),
            headers={"Accept": "application/json"},
            error=False,
        )
        return response, results

    def process_check_result(self, service: Service, action: Action) -> None:
        path = self.url + "/v1/actions/process-check-result"
        action = dataclasses.replace(
            action,
            filter=f'host.name=="{service.host_name}"&&service.name=="{service.name}"',
            type="Service",
        )
        response, results, errors = self._send("POST", path, action.to_dict())
        self._handle_results("process-check-result", path, response, results, errors)

    def list_downtimes(self, query: QueryFilter) -> list[Downtime]:
        response, data = self.filtered_query(self.url + "/v1/objects/downtimes", query)
        if response.status_code != 200:
            raise IcingaError(_NOT_OK)
        downtimes = (Downtime.from_dict(attrs) for attrs in _attrs(data))
        return [
            dt
            for dt in downtimes
            if dt.type == "Downtime" and (not self.zone or self.zone == dt.zone)
        ]

    def _get_single(self, path: str, kind: str) -> dict[str, Any]:
        response, data, _ = self._send("GET", self.url + path, error=False)
        if response.status_code != 200:
            raise IcingaError(_NOT_OK)
        found = _attrs(data)
        if not found:
            raise NotFoundError(f"{kind} not found")
        return found[0]

    def _in_zone(self, zone: str) -> bool:
        return not self.zone or self.zone == zone

    def get_host(self, name: str) -> Host:
        return Host.from_dict(self._get_single("/v1/objects/hosts/" + name, "host"))

    def create_host(self, host: Host) -> None:
        attrs = dataclasses.replace(host, name="")
        self.create_object(
            "/hosts/" + host.name,
            {"templates": ["generic-host"], "attrs": attrs.to_dict()},
        )

    def list_hosts(self, query: str) -> list[Host]:
        _, data, _ = self._send("GET", self.url + "/v1/objects/hosts?" + query, error=False)
        hosts = (Host.from_dict(attrs) for attrs in _attrs(data))
        return [host for host in hosts if self._in_zone(host.zone)]

    def delete_host(self, name: str) -> None:
        self._send(
            "DELETE",
            self.url + "/v1/objects/hosts/" + name,
            params={"cascade": "1"},
            result=False,
            error=False,
        )

    def update_host(self, host: Host) -> None:
        attrs = dataclasses.replace(host, name="", groups=[])
        self.update_object("/hosts/" + host.name, {"templates": None, "attrs": attrs.to_dict()})

    def get_host_group(self, name: str) -> HostGroup:
        return HostGroup.from_dict(
            self._get_single("/v1/objects/hostgroups/" + name, "hostgroup")
        )

    def create_host_group(self, host_group: HostGroup) -> None:
        self.create_object(
            "/hostgroups/" + host_group.name,
            {"templates": None, "attrs": host_group.to_dict()},
        )

    def list_host_groups(self, query: str) -> list[HostGroup]:
        _, data, _ = self._send(
            "GET", self.url + "/v1/objects/hostgroups?" + query, error=False
        )
        groups = (HostGroup.from_dict(attrs) for attrs in _attrs(data))
        return [group for group in groups if self._in_zone(group.zone)]

    def delete_host_group(self, name: str) -> None:
        self._send(
            "DELETE",
            self.url + "/v1/objects/hostgroups/" + name,
            result=False,
            error=False,
        )

    def update_host_group(self, host_group: HostGroup) -> None:
        self.update_object(
            "/hostgroups/" + host_group.name,
            {"templates": None, "attrs": host_group.to_dict()},
        )

    def get_service(self, name: str) -> Service:
        return Service.from_dict(
            self._get_single("/v1/objects/services/" + name, "service")
        )

    def create_service(self, service: Service) -> None:
        attrs = dataclasses.replace(service, name="")
        self.create_object(
            "/services/" + service.full_name(),
            {"templates": list(service.templates) or None, "attrs": attrs.to_dict()},
        )

    def list_services(self, query: QueryFilter) -> list[Service]:
        response, data = self.filtered_query(self.url + "/v1/objects/services", query)
        if response.status_code != 200:
            raise IcingaError(_NOT_OK)
        services = (Service.from_dict(attrs) for attrs in _attrs(data))
        return [svc for svc in services if self._in_zone(svc.zone)]

    def delete_service(self, name: str) -> None:
        self._send(
            "DELETE",
            self.url + "/v1/objects/services/" + name,
            params={"cascade": "1"},
            result=False,
            error=False,
        )

    def update_service(self, service: Service) -> None:
        attrs = dataclasses.replace(service, name="")
        self.update_object(
            "/services/" + service.full_name(),
            {"templates": None, "attrs": attrs.to_dict()},
        )