from types import SimpleNamespace

import pytest
from kubernetes.client.exceptions import ApiException


class FakeResource:
    def __init__(self, cluster, api_version, kind):
        self.cluster = cluster
        self.api_version = api_version
        self.kind = kind

    def create(self, body, namespace=None):
        name = body["metadata"]["name"]
        key = (self.kind, namespace, name)
        self.cluster.calls.append(key)
        if self.kind in self.cluster.fail_kinds:
            raise ApiException(status=500, reason="Internal Server Error")
        if key in self.cluster.objects:
            raise ApiException(status=409, reason="AlreadyExists")
        self.cluster.objects[key] = body
        return SimpleNamespace(metadata=SimpleNamespace(name=name, namespace=namespace))


class FakeResources:
    def __init__(self, cluster):
        self.cluster = cluster

    def get(self, api_version=None, kind=None):
        self.cluster.lookups.append((api_version, kind))
        return FakeResource(self.cluster, api_version, kind)


class FakeDynamicClient:
    """Stands in for kubernetes.dynamic.DynamicClient, keeping created objects in memory."""

    def __init__(self, fail_kinds=()):
        self.objects = {}
        self.calls = []
        self.lookups = []
        self.fail_kinds = set(fail_kinds)
        self.resources = FakeResources(self)

    def of_kind(self, kind):
        return {name: body for (k, _, name), body in self.objects.items() if k == kind}


@pytest.fixture
def fake_client():
    return FakeDynamicClient()
