from beanwire._internal.markers import (
    CONTROLLER,
    DEFAULT_STEREOTYPES,
    Stereotype,
    capability_name,
    component,
    controller,
    inject,
    repository,
    service,
    stereotypes_of,
)

__all__ = [
    "CONTROLLER",
    "DEFAULT_STEREOTYPES",
    "Stereotype",
    "capability_name",
    "component",
    "controller",
    "inject",
    "repository",
    "service",
    "stereotypes_of",
]
