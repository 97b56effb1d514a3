"""Sample application package discovered by ``BeanScanner``."""
