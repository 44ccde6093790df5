"""In-memory client for tests and dry runs."""

from __future__ import annotations

import copy
import threading
from urllib.parse import urlparse

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


class MockClient:
    """Client that keeps objects in dictionaries instead of calling an API."""

    def __init__(self) -> None:
        self.host_groups: dict[str, HostGroup] = {}
        self.hosts: dict[str, Host] = {}
        self.services: dict[str, Service] = {}
        self.actions: dict[str, list[Action]] = {}
        self.url = ""
        self.templates: list[str] = []
        self._lock = threading.Lock()

    def get_client_config(self) -> ClientConfig:
        return ClientConfig()

    def set_url(self, url: str) -> None:
        self.url = url

    def test_api(self) -> None:
        """Check that the configured URL names a host."""
        try:
            parsed = urlparse(self.url)
        except ValueError as exc:
            raise IcingaError(str(exc)) from exc
        if not parsed.netloc.rpartition("@")[2]:
            raise IcingaError(f"URL without hostname not supported: {self.url}")

    def process_check_result(self, service: Service, action: Action) -> None:
        with self._lock:
            self.actions.setdefault(service.full_name(), []).append(copy.copy(action))

    def list_downtimes(self, query: QueryFilter) -> list[Downtime]:
        return []

    def get_host(self, name: str) -> Host:
        try:
            return copy.copy(self.hosts[name])
        except KeyError:
            raise NotFoundError("host not found") from None

    def create_host(self, host: Host) -> None:
        with self._lock:
            self.hosts[host.name] = copy.copy(host)

    def list_hosts(self, query: str) -> list[Host]:
        return [copy.copy(host) for host in self.hosts.values()]

    def delete_host(self, name: str) -> None:
        with self._lock:
            self.hosts.pop(name, None)

    def update_host(self, host: Host) -> None:
        with self._lock:
            self.hosts[host.name] = copy.copy(host)

    def get_host_group(self, name: str) -> HostGroup:
        try:
            return copy.copy(self.host_groups[name])
        except KeyError:
            raise NotFoundError("hostgroup not found") from None

    def create_host_group(self, host_group: HostGroup) -> None:
        with self._lock:
            self.host_groups[host_group.name] = copy.copy(host_group)

    def list_host_groups(self, query: str) -> list[HostGroup]:
        return [copy.copy(group) for group in self.host_groups.values()]

    def delete_host_group(self, name: str) -> None:
        with self._lock:
            self.host_groups.pop(name, None)

    def update_host_group(self, host_group: HostGroup) -> None:
        with self._lock:
            self.host_groups[host_group.name] = copy.copy(host_group)

    def get_service(self, name: str) -> Service:
        try:
            return copy.copy(self.services[name])
        except KeyError:
            raise NotFoundError("service not found") from None

    def create_service(self, service: Service) -> None:
        with self._lock:
            self.services[service.full_name()] = copy.copy(service)

    def list_services(self, query: QueryFilter) -> list[Service]:
        return [copy.copy(svc) for svc in self.services.values()]

    def delete_service(self, name: str) -> None:
        with self._lock:
            self.services.pop(name, None)

    def update_service(self, service: Service) -> None:
        with self._lock:
            self.services[service.full_name()] = copy.copy(service)