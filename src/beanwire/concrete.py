from beanwire._internal.concrete import ConcreteTypeResolver

__all__ = ["ConcreteTypeResolver"]
