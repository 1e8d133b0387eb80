"""Generic registry with decorator pattern for pluggable backends."""

from typing import TypeVar, Generic, Callable, Any

from diarize_transcribe.core.exceptions import RegistryError

T = TypeVar("T")


class Registry(Generic[T]):
    """
    Maps config keys to backend classes.

    Usage:
        DiarizationRegistry = Registry[BaseDiarizer]("diarization")

        @DiarizationRegistry.register("pyannote")
        class PyAnnoteDiarizer(BaseDiarizer):
            ...

        diarizer = DiarizationRegistry.create("pyannote", config=cfg.diarization)
    """

    def __init__(self, name: str):
        self.name = name
        self._backends: dict[str, type[T]] = {}

    def register(self, key: str) -> Callable[[type[T]], type[T]]:
        """Decorator to register a backend class under `key`."""
        def decorator(cls: type[T]) -> type[T]:
            if key in self._backends:
                raise RegistryError(f"{self.name}: '{key}' already registered")
            self._backends[key] = cls
            return cls
        return decorator

    def unregister(self, key: str) -> None:
        """Remove a backend; unknown keys are ignored."""
        self._backends.pop(key, None)

    def get(self, key: str) -> type[T]:
        """Get the backend class (not an instance) by key."""
        try:
            return self._backends[key]
        except KeyError:
            available = ", ".join(self._backends) or "none"
            raise RegistryError(
                f"{self.name}: '{key}' not found. Available: {available}"
            ) from None

    def create(self, key: str, **kwargs: Any) -> T:
        """Instantiate a registered backend by key."""
        return self.get(key)(**kwargs)

    def list(self) -> list[str]:
        """List registered backend keys."""
        return list(self._backends)

    def __contains__(self, key: str) -> bool:
        return key in self._backends

    def __repr__(self) -> str:
        return f"Registry({self.name}, backends={self.list()})"
