from beanwire._internal.bean_set import BeanDefinition, BeanSet, BeanSetEntry

__all__ = ["BeanDefinition", "BeanSet", "BeanSetEntry"]
