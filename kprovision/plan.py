"""
Ordered provisioning plan.

Steps run strictly in list order; each carries the error class raised when
its create call fails:

- deployment  apps/v1 Deployment            -> CreateDeploymentError
- service     v1 Service                    -> CreateServiceError
- nodeport    v1 Service (type NodePort)    -> CreateServiceError
- ingress     networking.k8s.io/v1 Ingress  -> CreateIngressError
"""
from dataclasses import dataclass
from typing import Any, Dict, Type

from kprovision import manifests
from kprovision.errors import (
    CreateDeploymentError, CreateIngressError, CreateServiceError, ProvisionError
)


@dataclass(frozen=True)
class ProvisionStep:
    label: str
    api_version: str
    kind: str
    manifest: Any
    error: Type[ProvisionError]

    @property
    def name(self):
        return self.manifest.name

    def body(self) -> Dict[str, Any]:
        return self.manifest.to_dict()

    def __str__(self):
        return f"{self.label}: {self.api_version} {self.kind} {self.name}"


def _step(label, manifest, error):
    return ProvisionStep(label, manifest.api_version, manifest.kind, manifest, error)


def plan_steps():
    service = manifests.server_service()
    return [
        _step("deployment", manifests.server_deployment(), CreateDeploymentError),
        _step("service", service, CreateServiceError),
        _step("nodeport", manifests.nodeport_service(), CreateServiceError),
        _step("ingress", manifests.server_ingress(backend=service.name), CreateIngressError),
    ]
