from __future__ import annotations

import inspect
from dataclasses import dataclass
from inspect import Parameter
from typing import Any, get_type_hints

from beanwire._internal.bean_set import BeanDefinition
from beanwire._internal.integrations.pydantic_settings import is_pydantic_settings_subclass
from beanwire._internal.markers import is_inject_marked
from beanwire.exceptions import BeanwireConstructorInferenceError

_MISSING_ANNOTATION = object()


@dataclass(frozen=True, slots=True)
class ConstructorParameter:
    """Represent one injected constructor parameter."""

    name: str
    provides: Any
    positional_only: bool = False


@dataclass(frozen=True, slots=True)
class InjectableConstructor:
    """Ordered description of the constructor that receives bean dependencies."""

    bean_type: type[Any]
    parameters: tuple[ConstructorParameter, ...]

    @property
    def parameter_types(self) -> tuple[Any, ...]:
        return tuple(parameter.provides for parameter in self.parameters)

    def invoke(self, arguments: list[Any]) -> Any:
        """Call the bean class with resolved arguments in parameter order.

        Args:
            arguments: Resolved dependencies, one per parameter.

        """
        args: list[Any] = []
        kwargs: dict[str, Any] = {}
        for parameter, argument in zip(self.parameters, arguments, strict=True):
            if parameter.positional_only:
                args.append(argument)
            else:
                kwargs[parameter.name] = argument
        return self.bean_type(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class InjectableConstructorLookup:
    """Locate the injectable constructor of a bean.

    Lookup order is: explicit ``BeanDefinition.dependencies``, an ``__init__``
    marked with ``@inject``, and, when ``autowire`` is enabled, any signature
    with at least one required parameter. Pydantic settings classes always
    fall back to their zero-argument constructor so they load from the
    environment.
    """

    autowire: bool = True

    def find(self, definition: BeanDefinition) -> InjectableConstructor | None:
        """Return the injectable constructor for a bean, or ``None``.

        Args:
            definition: Bean set entry of the concrete class to construct.

        Raises:
            BeanwireConstructorInferenceError: A required parameter has no
                usable type annotation.

        """
        bean_type = definition.bean_type
        if definition.dependencies is not None:
            return self._from_explicit_dependencies(bean_type, definition.dependencies)
        if is_pydantic_settings_subclass(bean_type):
            return None

        init = getattr(bean_type, "__init__", None)
        if init is not None and is_inject_marked(init):
            return self._from_signature(bean_type)
        if self.autowire:
            constructor = self._from_signature(bean_type)
            if constructor.parameters:
                return constructor
        return None

    def _from_explicit_dependencies(
        self,
        bean_type: type[Any],
        dependencies: tuple[Any, ...],
    ) -> InjectableConstructor:
        parameters = tuple(
            ConstructorParameter(name=f"arg{index}", provides=provides, positional_only=True)
            for index, provides in enumerate(dependencies)
        )
        return InjectableConstructor(bean_type=bean_type, parameters=parameters)

    def _from_signature(self, bean_type: type[Any]) -> InjectableConstructor:
        try:
            signature = inspect.signature(bean_type)
        except (TypeError, ValueError):
            return InjectableConstructor(bean_type=bean_type, parameters=())
        annotations, annotation_error = self._resolved_type_hints(bean_type)

        parameters: list[ConstructorParameter] = []
        for parameter in signature.parameters.values():
            # Defaults, *args and **kwargs are left to the constructor.
            if not self._is_required_parameter(parameter):
                continue
            provides = self._resolve_parameter_annotation(
                bean_type=bean_type,
                parameter=parameter,
                annotations=annotations,
                annotation_error=annotation_error,
            )
            parameters.append(
                ConstructorParameter(
                    name=parameter.name,
                    provides=provides,
                    positional_only=parameter.kind is Parameter.POSITIONAL_ONLY,
                ),
            )
        return InjectableConstructor(bean_type=bean_type, parameters=tuple(parameters))

    def _resolve_parameter_annotation(
        self,
        *,
        bean_type: type[Any],
        parameter: Parameter,
        annotations: dict[str, Any],
        annotation_error: Exception | None,
    ) -> Any:
        annotation = annotations.get(parameter.name, _MISSING_ANNOTATION)
        if annotation is not _MISSING_ANNOTATION:
            return annotation

        raw_annotation = parameter.annotation
        if raw_annotation is not Parameter.empty and not isinstance(raw_annotation, str):
            return raw_annotation

        error_message = (
            f"Unable to infer dependency for required parameter '{parameter.name}' "
            f"in constructor of '{bean_type.__qualname__}'. Add a type annotation "
            "or declare explicit dependencies."
        )
        if annotation_error is None:
            raise BeanwireConstructorInferenceError(error_message)
        msg = f"{error_message} Original annotation error: {annotation_error}"
        raise BeanwireConstructorInferenceError(msg) from annotation_error

    def _resolved_type_hints(
        self,
        bean_type: type[Any],
    ) -> tuple[dict[str, Any], Exception | None]:
        annotations: dict[str, Any] = {}
        annotation_error: Exception | None = None

        for callable_member_name in ("__new__", "__init__"):
            callable_member = getattr(bean_type, callable_member_name)
            try:
                member_annotations = get_type_hints(callable_member)
            except (AttributeError, NameError, SyntaxError, TypeError) as error:
                if annotation_error is None:
                    annotation_error = error
                continue
            for parameter_name, parameter_annotation in member_annotations.items():
                annotations.setdefault(parameter_name, parameter_annotation)

        annotations.pop("return", None)
        return annotations, annotation_error

    def _is_required_parameter(self, parameter: Parameter) -> bool:
        return (
            parameter.default is Parameter.empty
            and parameter.kind is not Parameter.VAR_POSITIONAL
            and parameter.kind is not Parameter.VAR_KEYWORD
        )


__all__ = ["ConstructorParameter", "InjectableConstructor", "InjectableConstructorLookup"]
