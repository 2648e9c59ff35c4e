from typing import Generic, TypeVar

T = TypeVar("T")


class AdapterRegistry(Generic[T]):
    """Maps configured engine names to adapter classes."""

    def __init__(self, kind: str, adapters: dict[str, type[T]]) -> None:
        self._kind = kind
        self._adapters = adapters

    @property
    def names(self) -> list[str]:
        return list(self._adapters)

    def create(self, name: str) -> T:
        """Instantiate the adapter registered under ``name`` (case-insensitive).

        Raises:
            ValueError: if no adapter has that name.
        """
        engine = name.lower()
        adapter_cls = self._adapters.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown {self._kind} engine '{engine}'. Choose from: {self.names}"
            )
        return adapter_cls()
