"""Provisioning failures, one class per exit status."""


class ProvisionError(Exception):
    exit_code = 1
    step = "provision"

    def __init__(self, message, cause=None):
        super().__init__(message)
        self.cause = cause

    def describe(self):
        if self.cause is not None:
            return f"{self.step}: {self} -- {self.cause}"
        return f"{self.step}: {self}"


class ConfigResolutionError(ProvisionError):
    exit_code = 2
    step = "config"


class ClientConstructionError(ProvisionError):
    exit_code = 3
    step = "client"


class CreateDeploymentError(ProvisionError):
    exit_code = 4
    step = "create-deployment"


class CreateServiceError(ProvisionError):
    exit_code = 5
    step = "create-service"


class CreateIngressError(ProvisionError):
    exit_code = 6
    step = "create-ingress"
