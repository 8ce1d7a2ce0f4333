from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


def env_str(name: str, default: str, *, strip: bool = True) -> str:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip() if strip else value


def env_optional_str(name: str, default: Optional[str] = None, *, strip: bool = True) -> Optional[str]:
    value = os.environ.get(name)
    if value is None:
        return default
    value = value.strip() if strip else value
    return value or default


def default_kubeconfig() -> str:
    """Per-user kubeconfig location, or "" when no home directory resolves."""
    home = env_optional_str("HOME") or env_optional_str("USERPROFILE")
    if not home:
        return ""
    return str(Path(home) / ".kube" / "config")


@dataclass(frozen=True)
class ProvisionerConfig:
    """Runtime configuration for a provisioning run.

    Env vars:
    - KUBECONFIG: kubeconfig path list; only the first entry is used
    - KPROVISION_CONTEXT: kube context name
    - KPROVISION_NAMESPACE: target namespace

    Command-line flags override every value read here.
    """

    kubeconfig: str
    context: Optional[str]
    namespace: str

    DEFAULT_NAMESPACE: str = "default"

    @classmethod
    def from_env(cls) -> "ProvisionerConfig":
        kubeconfig = default_kubeconfig()
        paths = env_optional_str("KUBECONFIG")
        if paths:
            first = paths.split(os.pathsep)[0].strip()
            kubeconfig = first or kubeconfig
        return cls(
            kubeconfig=kubeconfig,
            context=env_optional_str("KPROVISION_CONTEXT"),
            namespace=env_str("KPROVISION_NAMESPACE", cls.DEFAULT_NAMESPACE) or cls.DEFAULT_NAMESPACE,
        )

    def with_overrides(self, *, kubeconfig=None, context=None, namespace=None) -> "ProvisionerConfig":
        return ProvisionerConfig(
            kubeconfig=self.kubeconfig if kubeconfig is None else kubeconfig,
            context=self.context if context is None else (context or None),
            namespace=namespace or self.namespace,
        )
