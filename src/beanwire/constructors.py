from beanwire._internal.constructors import (
    ConstructorParameter,
    InjectableConstructor,
    InjectableConstructorLookup,
)

__all__ = ["ConstructorParameter", "InjectableConstructor", "InjectableConstructorLookup"]
