"""
Typed resource descriptors for the objects the provisioner creates.

Each record renders the wire manifest through `to_dict()`; nothing else in
the package builds raw manifest dicts.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

APP_LABELS = {"app": "server"}
SERVER_IMAGE = "raihankhanraka/ecommerce-api:v1.1"
SERVER_PORT = 8080
NODE_PORT = 30184
INGRESS_HOST = "raka.com"


@dataclass(frozen=True)
class ContainerPort:
    name: str
    container_port: int
    protocol: str = "TCP"

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "protocol": self.protocol, "containerPort": self.container_port}


@dataclass(frozen=True)
class Container:
    name: str
    image: str
    ports: List[ContainerPort] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"name": self.name, "image": self.image}
        if self.ports:
            out["ports"] = [p.to_dict() for p in self.ports]
        return out


@dataclass(frozen=True)
class Deployment:
    name: str
    replicas: int
    labels: Dict[str, str]
    containers: List[Container]

    api_version = "apps/v1"
    kind = "Deployment"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "apiVersion": self.api_version,
            "kind": self.kind,
            "metadata": {"name": self.name},
            "spec": {
                "replicas": self.replicas,
                "selector": {"matchLabels": dict(self.labels)},
                "template": {
                    "metadata": {"labels": dict(self.labels)},
                    "spec": {"containers": [c.to_dict() for c in self.containers]},
                },
            },
        }


@dataclass(frozen=True)
class ServicePort:
    port: int
    target_port: int
    protocol: str = "TCP"
    node_port: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"protocol": self.protocol}
        if self.node_port is not None:
            out["nodePort"] = self.node_port
        out["targetPort"] = self.target_port
        out["port"] = self.port
        return out


@dataclass(frozen=True)
class Service:
    name: str
    selector: Dict[str, str]
    ports: List[ServicePort]
    type: Optional[str] = None

    api_version = "v1"
    kind = "Service"

    def to_dict(self) -> Dict[str, Any]:
        spec: Dict[str, Any] = {"selector": dict(self.selector)}
        # left unset, the API server defaults to ClusterIP
        if self.type:
            spec["type"] = self.type
        spec["ports"] = [p.to_dict() for p in self.ports]
        return {
            "apiVersion": self.api_version,
            "kind": self.kind,
            "metadata": {"name": self.name},
            "spec": spec,
        }


@dataclass(frozen=True)
class IngressPath:
    path: str
    service_name: str
    service_port: int
    path_type: str = "Prefix"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pathType": self.path_type,
            "path": self.path,
            "backend": {
                "service": {
                    "name": self.service_name,
                    "port": {"number": self.service_port},
                },
            },
        }


@dataclass(frozen=True)
class IngressRule:
    host: str
    paths: List[IngressPath]

    def to_dict(self) -> Dict[str, Any]:
        return {"host": self.host, "http": {"paths": [p.to_dict() for p in self.paths]}}


@dataclass(frozen=True)
class Ingress:
    name: str
    rules: List[IngressRule]

    api_version = "networking.k8s.io/v1"
    kind = "Ingress"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "apiVersion": self.api_version,
            "kind": self.kind,
            "metadata": {"name": self.name},
            "spec": {"rules": [r.to_dict() for r in self.rules]},
        }


def server_deployment():
    return Deployment(
        name="apiserver",
        replicas=2,
        labels=dict(APP_LABELS),
        containers=[
            Container(
                name="ecommerce",
                image=SERVER_IMAGE,
                ports=[ContainerPort(name="http", container_port=SERVER_PORT)],
            )
        ],
    )


def server_service():
    return Service(
        name="server-svc",
        selector=dict(APP_LABELS),
        ports=[ServicePort(port=SERVER_PORT, target_port=SERVER_PORT)],
    )


def nodeport_service():
    return Service(
        name="nodeport-svc",
        selector=dict(APP_LABELS),
        type="NodePort",
        ports=[ServicePort(port=SERVER_PORT, target_port=SERVER_PORT, node_port=NODE_PORT)],
    )


def server_ingress(backend="server-svc"):
    paths = [IngressPath(path=p, service_name=backend, service_port=SERVER_PORT) for p in ("/login", "/products")]
    return Ingress(name="server-ingress", rules=[IngressRule(host=INGRESS_HOST, paths=paths)])
