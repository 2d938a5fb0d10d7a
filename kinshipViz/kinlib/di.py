from typing import Any, Callable, Dict, List

from .logging import logger

class Container:
    """Service locator shared by the lineage apps."""
    def __init__(self) -> None:
        self._providers: Dict[str, Callable[[], Any]] = {}
        self._singletons: Dict[str, Any] = {}
    def register(self, key: str, provider: Callable[[], Any], *, singleton: bool = False) -> None:
        if key in self._providers:
            logger.debug(f'replacing provider for {key}')
        self._singletons.pop(key, None)
        if singleton:
            def _cached() -> Any:
                if key not in self._singletons:
                    self._singletons[key] = provider()
                return self._singletons[key]
            self._providers[key] = _cached
        else:
            self._providers[key] = provider
    def resolve(self, key: str) -> Any:
        if key not in self._providers:
            raise KeyError(f'no provider for {key}')
        return self._providers[key]()
    def has(self, key: str) -> bool:
        return key in self._providers
    def keys(self) -> List[str]:
        return sorted(self._providers)

container = Container()
