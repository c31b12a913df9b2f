"""
Template loading with a compiled artifact cache.

``TemplateLoader`` is the entry point of the package. For each template
name it decides whether the unit is already active, whether a cached
artifact can be reused, whether that artifact is stale, and whether the
compiled output can be persisted at all.
"""

import hashlib
import tempfile
from pathlib import Path
from typing import Any, Optional, Union

from .compiler import Compiler, TemplateCompiler
from .identity import unit_id_for
from .runtime.activator import Activator, ActiveUnitRegistry
from .runtime.store import ArtifactStore, WriteResult
from .runtime.template import Template
from .sources import SourceProvider
from .utils.exceptions import LoadFailureError
from .utils.config import LoomConfig, get_config
from .utils.logging import LoomLogger

CacheOption = Union[str, Path, bool, None]


def default_cache_dir() -> Path:
    """
    Get the cache directory used when none is configured.

    The directory lives under the system temp directory and is salted
    with the install location of this package, so unrelated installs do
    not share compiled templates. Two projects using the same install
    still share it.
    """
    salt = hashlib.sha256(str(Path(__file__).resolve().parent).encode("utf-8")).hexdigest()[:16]
    return Path(tempfile.gettempdir()) / f"loom_{salt}"


class TemplateLoader:
    """
    Loads templates by name, compiling and caching them as needed.

    The ``cache`` argument takes one of three kinds of value:

    * None (the default): use ``default_cache_dir()``
    * False: disable the artifact cache; every template is compiled
      and activated in memory
    * a directory path: store compiled templates there

    Activated units are recorded in ``registry``. Once a unit is active
    it is returned as-is for the life of the registry, even if its
    source changes later and ``auto_reload`` is on.
    """

    def __init__(
        self,
        provider: SourceProvider,
        compiler: Optional[Compiler] = None,
        cache: CacheOption = None,
        auto_reload: bool = True,
        registry: Optional[ActiveUnitRegistry] = None,
        activator: Optional[Activator] = None,
    ):
        """
        Initialize template loader.

        Args:
            provider: Source provider for template text
            compiler: Template compiler (default: TemplateCompiler)
            cache: Cache directory, None for the default, False to disable
            auto_reload: Recompile cached templates whose source is newer
            registry: Registry of active units, shared if given
            activator: Activator used to make compiled output runnable
        """
        self.provider = provider
        self.compiler = compiler or TemplateCompiler()
        self.auto_reload = auto_reload
        self.registry = registry if registry is not None else ActiveUnitRegistry()
        self.activator = activator or Activator()
        self._log = LoomLogger(__name__)

        if cache is None or cache is True:
            cache = default_cache_dir()

        self.store: Optional[ArtifactStore] = None if cache is False else ArtifactStore(cache)

    @classmethod
    def from_config(
        cls,
        provider: SourceProvider,
        compiler: Optional[Compiler] = None,
        config: Optional[LoomConfig] = None,
        **kwargs: Any,
    ) -> "TemplateLoader":
        """Build a loader from the cache section of a LoomConfig (global config by default)."""
        config = config or get_config()
        return cls(
            provider,
            compiler,
            cache=config.cache_option(),
            auto_reload=config.cache.auto_reload,
            **kwargs,
        )

    @property
    def cache_enabled(self) -> bool:
        return self.store is not None

    def load(self, name: str) -> str:
        """
        Load a template by name.

        Args:
            name: Template name

        Returns:
            Identifier of the now active compiled unit

        Raises:
            SourceNotFoundError: If the provider cannot find the template
            CompilationError: If the template fails to compile
            LoadFailureError: If the compiled unit cannot be activated
        """
        unit_id = unit_id_for(name)

        if unit_id in self.registry:
            self._log.log_cache_hit(name, unit_id)
            return unit_id

        if self.store is None:
            source, _ = self.provider.get_source(name)
            return self._activate_compiled(name, unit_id, self._compile(source, name))

        path = self.store.path_for(name)

        if not self.store.exists(path):
            self._log.log_cache_miss(name, str(path))
            source, modified_at = self.provider.get_source(name)
            if modified_at is None:
                return self._activate_compiled(name, unit_id, self._compile(source, name))

            if not self._compile_and_store(name, unit_id, path, source):
                return unit_id

        elif self.auto_reload:
            source, modified_at = self.provider.get_source(name)
            try:
                artifact_mtime = self.store.last_write_time(path)
            except FileNotFoundError as e:
                # removed by another writer after the existence check
                raise LoadFailureError("Cached artifact disappeared", unit_id, str(path)) from e
            if modified_at is not None and artifact_mtime < modified_at:
                self._log.log_stale(name, artifact_mtime, modified_at)
                if not self._compile_and_store(name, unit_id, path, source):
                    return unit_id
            else:
                self._log.log_cache_hit(name, unit_id)

        else:
            self._log.log_cache_hit(name, unit_id)

        unit = self.activator.activate_file(unit_id, path, self.store)
        self.registry.register(unit_id, unit)
        return unit_id

    def get_template(self, name: str) -> Template:
        """Load a template and return an instance of its compiled unit."""
        unit_id = self.load(name)
        return self.registry.get(unit_id)()

    def render(self, name: str, /, **context: Any) -> str:
        """Load and render a template."""
        return self.get_template(name).render(**context)

    def is_active(self, name: str) -> bool:
        """Check whether a template's unit has been activated."""
        return unit_id_for(name) in self.registry

    def _compile(self, source: str, name: str) -> str:
        self._log.log_compile(name, len(source))
        return self.compiler.compile(source, name)

    def _compile_and_store(self, name: str, unit_id: str, path: Path, source: str) -> bool:
        """
        Compile a template and write it to the cache.

        Returns:
            True if the artifact was written, False if it could not be
            and the unit was activated from memory instead
        """
        compiled = self._compile(source, name)
        if self.store.write(path, compiled) is WriteResult.WRITTEN:
            return True

        self._fall_back_to_memory(name, unit_id, compiled)
        return False

    def _fall_back_to_memory(self, name: str, unit_id: str, compiled: str) -> str:
        """Activate compiled output that could not be persisted."""
        self._log.log_fallback(name, "cache artifact is not writable")
        return self._activate_compiled(name, unit_id, compiled)

    def _activate_compiled(self, name: str, unit_id: str, compiled: str) -> str:
        unit = self.activator.activate(unit_id, compiled, f"<loom template {name!r}>")
        self.registry.register(unit_id, unit)
        return unit_id
