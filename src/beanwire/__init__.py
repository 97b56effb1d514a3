import logging

from beanwire.bean_factory import BeanFactory, BeanFactoryState
from beanwire.bean_set import BeanDefinition, BeanSet
from beanwire.exceptions import (
    BeanwireAmbiguousBindingError,
    BeanwireConstructorInferenceError,
    BeanwireCyclicDependencyError,
    BeanwireError,
    BeanwireInstantiateBeansError,
    BeanwireInvalidBeanError,
    BeanwireNotRegisteredBeanError,
    BeanwireScanError,
)
from beanwire.lock_mode import LockMode
from beanwire.markers import (
    CONTROLLER,
    Stereotype,
    component,
    controller,
    inject,
    repository,
    service,
)
from beanwire.scanner import BeanScanner

__all__ = [
    "CONTROLLER",
    "BeanDefinition",
    "BeanFactory",
    "BeanFactoryState",
    "BeanScanner",
    "BeanSet",
    "BeanwireAmbiguousBindingError",
    "BeanwireConstructorInferenceError",
    "BeanwireCyclicDependencyError",
    "BeanwireError",
    "BeanwireInstantiateBeansError",
    "BeanwireInvalidBeanError",
    "BeanwireNotRegisteredBeanError",
    "BeanwireScanError",
    "LockMode",
    "Stereotype",
    "component",
    "controller",
    "inject",
    "repository",
    "service",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
