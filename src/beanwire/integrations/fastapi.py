from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeVar

try:
    from fastapi import APIRouter, FastAPI
except ModuleNotFoundError as exc:  # pragma: no cover - exercised in optional import scenarios
    message = "FastAPI integration requires fastapi. Install with 'beanwire[fastapi]'."
    raise ModuleNotFoundError(message) from exc

if TYPE_CHECKING:
    from beanwire.bean_factory import BeanFactory

T = TypeVar("T")

logger = logging.getLogger(__name__)

_REQUEST_MAPPING_ATTR = "__beanwire_request_mapping__"


@dataclass(frozen=True, slots=True)
class RequestMapping:
    """Routing metadata attached to a controller class or method."""

    path: str
    methods: tuple[str, ...]
    route_kwargs: dict[str, Any] = field(default_factory=dict)


def request_mapping(
    path: str = "",
    *,
    methods: Sequence[str] = ("GET",),
    **route_kwargs: Any,
) -> Callable[[T], T]:
    """Map a controller class or one of its methods to a URL path.

    On a class, ``path`` becomes the router prefix and ``route_kwargs`` are
    passed to ``APIRouter`` (for example ``tags``). On a method, ``path`` and
    ``methods`` describe one route and ``route_kwargs`` are passed to
    ``APIRouter.add_api_route`` (for example ``status_code``).

    Examples:
        .. code-block:: python

            @controller
            @request_mapping("/users", tags=["users"])
            class UserController:
                def __init__(self, service: UserService) -> None:
                    self.service = service

                @request_mapping("/{user_id}")
                def get_user(self, user_id: int) -> dict[str, str]:
                    return self.service.describe(user_id)

    Args:
        path: Route path, or router prefix when decorating a class.
        methods: HTTP methods served by a method route. Ignored on classes.
        **route_kwargs: Extra keyword arguments for FastAPI.

    """

    def decorator(target: T) -> T:
        mapping = RequestMapping(
            path=path,
            methods=tuple(method.upper() for method in methods),
            route_kwargs=dict(route_kwargs),
        )
        setattr(target, _REQUEST_MAPPING_ATTR, mapping)
        return target

    return decorator


def _mapped_methods(controller_type: type[Any]) -> dict[str, Callable[..., Any]]:
    # Walk the MRO base-first so overrides keep the position of the original.
    functions: dict[str, Callable[..., Any]] = {}
    for klass in reversed(controller_type.__mro__):
        for name, member in vars(klass).items():
            if inspect.isfunction(member):
                functions[name] = member
    return {
        name: function
        for name, function in functions.items()
        if isinstance(getattr(function, _REQUEST_MAPPING_ATTR, None), RequestMapping)
    }


def build_controller_router(controller: object) -> APIRouter:
    """Build an ``APIRouter`` serving the mapped methods of one controller.

    Endpoints are the controller's bound methods, so every request is served
    by the same singleton bean.

    Args:
        controller: Controller instance, usually taken from
            ``BeanFactory.get_controllers``.

    """
    controller_type = type(controller)
    class_mapping = controller_type.__dict__.get(_REQUEST_MAPPING_ATTR)
    if isinstance(class_mapping, RequestMapping):
        router = APIRouter(prefix=class_mapping.path, **class_mapping.route_kwargs)
    else:
        router = APIRouter()

    for name, function in _mapped_methods(controller_type).items():
        mapping: RequestMapping = getattr(function, _REQUEST_MAPPING_ATTR)
        router.add_api_route(
            mapping.path,
            getattr(controller, name),
            methods=list(mapping.methods),
            **mapping.route_kwargs,
        )
    return router


def include_controllers(app: FastAPI, bean_factory: BeanFactory) -> list[APIRouter]:
    """Include a router for every controller bean into ``app``.

    Args:
        app: FastAPI application to extend.
        bean_factory: Initialized bean factory holding the controllers.

    Returns:
        The routers that were included, in registry order.

    """
    routers: list[APIRouter] = []
    for controller_type, controller in bean_factory.get_controllers().items():
        router = build_controller_router(controller)
        if not router.routes:
            logger.debug("Controller %s has no request mappings", controller_type.__qualname__)
            continue
        app.include_router(router)
        routers.append(router)
        logger.info(
            "Included controller %s with %d routes",
            controller_type.__qualname__,
            len(router.routes),
        )
    return routers


__all__ = ["RequestMapping", "build_controller_router", "include_controllers", "request_mapping"]
