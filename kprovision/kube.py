from __future__ import annotations

import logging
from typing import Optional

import yaml
from kubernetes import client, config
from kubernetes.config.config_exception import ConfigException
from kubernetes.dynamic import DynamicClient

from kprovision.errors import ClientConstructionError, ConfigResolutionError

logger = logging.getLogger("kprovision.kube")

LOAD_ERRORS = (ConfigException, OSError, yaml.YAMLError)


def resolve_config(kubeconfig: Optional[str], context: Optional[str] = None) -> client.Configuration:
    """Resolve cluster access configuration.

    The kubeconfig file is tried first; an empty path skips straight to the
    in-cluster service-account config. When neither resolves the run cannot
    continue, so a ConfigResolutionError is raised carrying both causes.
    """

    configuration = client.Configuration()
    file_error = None

    if kubeconfig:
        try:
            config.load_kube_config(config_file=kubeconfig, context=context, client_configuration=configuration)
            logger.debug("loaded kubeconfig %s (context=%s)", kubeconfig, context or "current")
            return configuration
        except LOAD_ERRORS as exc:
            logger.warning("kubeconfig %s not usable, trying in-cluster config: %s", kubeconfig, exc)
            file_error = exc

    try:
        config.load_incluster_config(client_configuration=configuration)
    except LOAD_ERRORS as exc:
        if file_error is not None:
            message = f"kubeconfig {kubeconfig!r} failed ({file_error}) and in-cluster config failed"
        else:
            message = "no kubeconfig given and in-cluster config failed"
        raise ConfigResolutionError(message, cause=exc) from exc

    logger.debug("loaded in-cluster config for %s", configuration.host)
    return configuration


def build_client(configuration: client.Configuration) -> DynamicClient:
    """Create the schema-agnostic client; this performs API discovery."""
    try:
        return DynamicClient(client.ApiClient(configuration=configuration))
    except Exception as exc:
        raise ClientConstructionError("failed to build dynamic client", cause=exc) from exc
