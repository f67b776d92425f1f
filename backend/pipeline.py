"""
Request Pipeline — compose middleware around a terminal handler.

A handler takes a GatewayRequest and returns a GatewayResponse.
A middleware takes the rest of the pipeline and returns a handler of the
same shape, so it can act before delegating, after delegating, or not
delegate at all.

    pipeline = Pipeline(handle).use(error_boundary(logger)).use(logging_middleware(logger)).build()

The first middleware registered is the outermost one: its pre-delegation
code runs first and its post-delegation code runs last.
"""

from typing import Callable, List

from models.request_models import GatewayRequest
from models.response_models import GatewayResponse

Handler = Callable[[GatewayRequest], GatewayResponse]
Middleware = Callable[[Handler], Handler]


def compose(handler: Handler, *middlewares: Middleware) -> Handler:
    """Return middlewares[0](middlewares[1](...middlewares[-1](handler)))."""
    wrapped = handler
    for middleware in reversed(middlewares):
        wrapped = middleware(wrapped)
    return wrapped


class Pipeline:
    """Builder collecting middleware outer to inner around one handler."""

    def __init__(self, handler: Handler):
        self._handler = handler
        self._middlewares: List[Middleware] = []

    def use(self, middleware: Middleware) -> "Pipeline":
        self._middlewares.append(middleware)
        return self

    @property
    def middlewares(self) -> List[Middleware]:
        return list(self._middlewares)

    def build(self) -> Handler:
        return compose(self._handler, *self._middlewares)
