# application/response_transformer.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Iterable, List, Optional

from domain.completed_response import CompletedResponse


class ResponseTransformer(ABC):
    """
    Attempt to transform a completed response, or decline by returning None.
    """

    @abstractmethod
    def transform(self, response: CompletedResponse) -> Optional[CompletedResponse]: ...

    def apply(self, response: CompletedResponse) -> CompletedResponse:
        transformed = self.transform(response)
        return response if transformed is None else transformed


class DecliningTransformer(ResponseTransformer):
    def transform(self, response: CompletedResponse) -> Optional[CompletedResponse]:
        return None


class FunctionTransformer(ResponseTransformer):
    def __init__(self, fn: Callable[[CompletedResponse], Optional[CompletedResponse]]):
        self._fn = fn

    def transform(self, response: CompletedResponse) -> Optional[CompletedResponse]:
        return self._fn(response)


class ChainedTransformer(ResponseTransformer):
    """Applies each transformer in turn; declines only if all of them decline."""

    def __init__(self, transformers: Iterable[ResponseTransformer]):
        self._transformers: List[ResponseTransformer] = list(transformers)

    def transform(self, response: CompletedResponse) -> Optional[CompletedResponse]:
        current = response
        handled = False
        for t in self._transformers:
            out = t.transform(current)
            if out is not None:
                current = out
                handled = True
        return current if handled else None


DECLINING_TRANSFORMER = DecliningTransformer()
