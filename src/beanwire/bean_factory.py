from beanwire._internal.bean_factory import BeanFactory, BeanFactoryState

__all__ = ["BeanFactory", "BeanFactoryState"]
