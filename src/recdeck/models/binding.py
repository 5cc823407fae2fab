"""Key binding models: which panel key records to which file."""

from collections.abc import Iterable, Iterator
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from recdeck.exceptions import ConfigValidationError


class KeyBinding(BaseModel):
    """Binds one panel key to the audio file it records into."""

    model_config = ConfigDict(frozen=True)

    key: int = Field(ge=0, description="Panel key index")
    path: Path = Field(description="Recording file path for this key")


class KeyBindingTable:
    """
    Immutable lookup of bindings by key index.

    Built once at startup. Keys without a binding are ignored by the
    button state machine.
    """

    def __init__(self, bindings: Iterable[KeyBinding]):
        """
        Build the table.

        Args:
            bindings: Bindings to index

        Raises:
            ConfigValidationError: If a key is bound more than once
        """
        table: dict[int, KeyBinding] = {}
        for binding in bindings:
            if binding.key in table:
                raise ConfigValidationError(
                    field="bindings",
                    value=binding.key,
                    error_msg=f"key {binding.key} is bound more than once",
                )
            table[binding.key] = binding
        self._bindings = table

    def get(self, key: int) -> KeyBinding | None:
        """Get the binding for a key, or None if unbound."""
        return self._bindings.get(key)

    def path_for(self, key: int) -> Path | None:
        """Get the recording path for a key, or None if unbound."""
        binding = self._bindings.get(key)
        return binding.path if binding else None

    def __contains__(self, key: object) -> bool:
        return key in self._bindings

    def __iter__(self) -> Iterator[KeyBinding]:
        return iter(sorted(self._bindings.values(), key=lambda b: b.key))

    def __len__(self) -> int:
        return len(self._bindings)
