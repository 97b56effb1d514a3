from beanwire._internal.scanner import BeanScanner

__all__ = ["BeanScanner"]
