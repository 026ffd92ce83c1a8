from dataclasses import dataclass


@dataclass
class DomainError(Exception):
    """Base class for all domain-level errors.

    These represent failures that occur within the bridge's core logic,
    independent of transport concerns. Adapters raise subclasses of this;
    the generator turns them into readable assistant replies and the HTTP
    layer maps the ones that escape to status codes.
    """

    message: str
    code: str = 'domain_error'


@dataclass
class ConfigError(DomainError):
    """Raised when the system is misconfigured.

    Use this for missing or invalid environment variables such as the
    worker URL.
    """

    code: str = 'missing or misconfigured setting'


@dataclass
class BackendError(DomainError):  # non-2xx from the worker
    status_code: int = 0
    code: str = 'backend_error'


@dataclass
class ModelNotFound(DomainError):  # 404
    code: str = 'model_not_found'
