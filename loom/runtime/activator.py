"""
Compiled unit activation.

Activation executes compiled output in a fresh module namespace and
picks out the template class it defines. The ``ActiveUnitRegistry``
records which units are active so each one is activated only once.
"""

import types
from pathlib import Path
from typing import Dict, List, Optional, Type, Union

from .store import ArtifactStore
from .template import Template
from ..utils.exceptions import LoadFailureError
from ..utils.logging import get_logger

logger = get_logger(__name__)


class ActiveUnitRegistry:
    """
    Table of activated compiled units, keyed by unit identifier.

    Entries are only ever added. A registry lives as long as its owner
    and may be shared between loaders that should see the same units.
    """

    def __init__(self):
        self._units: Dict[str, Type[Template]] = {}

    def __contains__(self, unit_id: str) -> bool:
        return unit_id in self._units

    def __len__(self) -> int:
        return len(self._units)

    def get(self, unit_id: str) -> Optional[Type[Template]]:
        """Get an active unit, or None if it was never activated."""
        return self._units.get(unit_id)

    def register(self, unit_id: str, unit: Type[Template]) -> None:
        """
        Record a newly activated unit.

        Raises:
            ValueError: If ``unit_id`` is already active
        """
        if unit_id in self._units:
            raise ValueError(f"Compiled unit '{unit_id}' is already active")
        self._units[unit_id] = unit

    def unit_ids(self) -> List[str]:
        """List active unit identifiers in activation order."""
        return list(self._units)


class Activator:
    """Turns compiled output into a runnable template class."""

    def activate(self, unit_id: str, compiled: str, origin: str = "<loom>") -> Type[Template]:
        """
        Execute compiled output and return the unit it defines.

        Args:
            unit_id: Expected class name
            compiled: Compiled module source
            origin: File name used for tracebacks

        Returns:
            The ``Template`` subclass named ``unit_id``

        Raises:
            LoadFailureError: If the output cannot be executed or does
                not define the unit
        """
        module = types.ModuleType(f"loom.compiled.{unit_id}")
        module.__file__ = origin

        try:
            code = compile(compiled, origin, "exec")
            exec(code, module.__dict__)
        except Exception as e:
            raise LoadFailureError(f"Failed to execute compiled template: {e}", unit_id, origin) from e

        unit = module.__dict__.get(unit_id)
        if not (isinstance(unit, type) and issubclass(unit, Template)):
            raise LoadFailureError("Compiled output does not define the template unit", unit_id, origin)

        logger.debug(f"Activated {unit_id[:24]}... from {origin}")
        return unit

    def activate_file(self, unit_id: str, path: Union[str, Path], store: ArtifactStore) -> Type[Template]:
        """
        Activate a stored artifact.

        Raises:
            LoadFailureError: If the artifact is missing, unreadable or invalid
        """
        return self.activate(unit_id, store.read(path), str(path))
