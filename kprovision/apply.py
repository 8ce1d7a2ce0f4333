import logging

from colorama import Fore, Style
from kubernetes.client.exceptions import ApiException
from kubernetes.dynamic.exceptions import ResourceNotFoundError
from urllib3.exceptions import HTTPError

logger = logging.getLogger("kprovision.apply")


def _created_name(obj, fallback):
    try:
        return obj.metadata.name
    except AttributeError:
        return fallback


def apply_steps(dyn_client, steps, namespace="default", echo=print):
    """Create each step's object in order, stopping at the first failure.

    Objects created before a failing step stay in the cluster.
    """
    created = []
    for step in steps:
        echo(f"creating {step.label} {step.name}")
        try:
            resource = dyn_client.resources.get(api_version=step.api_version, kind=step.kind)
            obj = resource.create(body=step.body(), namespace=namespace)
        except (ApiException, ResourceNotFoundError, HTTPError) as exc:
            logger.debug("create %s failed after %d created: %r", step, len(created), exc)
            raise step.error(f"failed to create {step.label} {step.name}", cause=exc) from exc

        name = _created_name(obj, step.name)
        created.append(name)
        echo(Fore.GREEN + f"{step.label.capitalize()} {name} created" + Style.RESET_ALL)
    return created
