from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class StateStore(Protocol):
    def read(self, key: str) -> Optional[str]:
        """Return the stored text, or ``None`` when nothing is stored under ``key``."""
        ...

    def write(self, key: str, value: str) -> None:
        ...
