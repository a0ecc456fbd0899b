"""
profilekit configuration management (YAML layers + environment overrides).
"""
from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional, Set, Tuple

from profilekit.core.exceptions import ConfigError
from profilekit.core.schemas import SchemaValidationError, load_schema, validate_payload
from profilekit.core.utils.io import read_yaml
from profilekit.core.utils.merge import deep_merge
from profilekit.core.utils.paths import get_user_config_dir
from profilekit.data import get_data_path

logger = logging.getLogger(__name__)

ENV_PREFIX = "PROFILEKIT_"
CONFIG_SCHEMA = "config.schema"


class ConfigManager:
    """Load, merge, and validate profilekit configuration.

    Configuration sources (highest to lowest priority):
    1. Environment variables: PROFILEKIT_<section>__<key>[__<key>...]
    2. User config: <user-config-dir>/config.yaml (or config.yml)
    3. Bundled defaults: profilekit.data/config/*.yaml (alphabetical order)

    Only variables containing a ``__`` separator are treated as overrides, so
    plain switches such as PROFILEKIT_USER_CONFIG_DIR never leak into the tree.
    Values are coerced to bool/int/float/JSON unless the schema declares the
    target key a string, in which case the text is kept as-is.
    """

    def __init__(
        self,
        user_config_dir: Optional[Path] = None,
        *,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.core_config_dir = get_data_path("config")
        self.user_config_dir = Path(user_config_dir) if user_config_dir else get_user_config_dir()
        self._environ = environ

    @property
    def environ(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ

    def load_yaml(self, path: Path) -> Dict[str, Any]:
        # Fail closed: configuration must never silently ignore invalid YAML.
        try:
            data = read_yaml(path, default={}, raise_on_error=True)
        except Exception as exc:
            raise ConfigError(f"Invalid configuration file {path}: {exc}", context={"path": str(path)}) from exc
        if not isinstance(data, dict):
            raise ConfigError(
                f"Configuration file {path} must contain a mapping, got {type(data).__name__}",
                context={"path": str(path)},
            )
        return data

    def _core_files(self) -> List[Path]:
        return sorted(
            p for p in self.core_config_dir.glob("*.y*ml") if p.suffix in (".yaml", ".yml")
        )

    def _user_file(self) -> Optional[Path]:
        for name in ("config.yaml", "config.yml"):
            candidate = self.user_config_dir / name
            if candidate.is_file():
                return candidate
        return None

    # ---------- environment overrides ----------

    def _as_bool(self, v: str) -> Optional[bool]:
        low = v.strip().lower()
        if low in {"true", "false"}:
            return low == "true"
        return None

    def _as_int(self, v: str) -> Optional[int]:
        if re.fullmatch(r"[-+]?\d+", v.strip() or " "):
            return int(v)
        return None

    def _as_float(self, v: str) -> Optional[float]:
        s = v.strip()
        if re.fullmatch(r"[-+]?\d*\.\d+", s) or re.fullmatch(r"[-+]?\d+\.\d*", s):
            return float(s)
        return None

    def _as_json(self, v: str) -> Optional[Any]:
        s = v.strip()
        if (s.startswith("{") and s.endswith("}")) or (s.startswith("[") and s.endswith("]")):
            try:
                return json.loads(s)
            except json.JSONDecodeError:
                return None
        return None

    def _coerce_type(self, value: str) -> Any:
        if value.strip().lower() in {"null", "none"}:
            return None
        for caster in (self._as_bool, self._as_int, self._as_float, self._as_json):
            result = caster(value)
            if result is not None:
                return result
        return value.strip()

    def _iter_env_overrides(self) -> Iterator[Tuple[List[str], str]]:
        env = self.environ
        for key in sorted(env.keys()):
            if not key.startswith(ENV_PREFIX):
                continue
            raw = key[len(ENV_PREFIX):]
            if "__" not in raw:
                continue
            segs = raw.split("__")
            if any(not s for s in segs):
                raise ConfigError(f"Malformed {ENV_PREFIX}* key: empty segment in '{key}'.")
            yield [s.lower() for s in segs], env[key]

    def _schema_types(self, schema: Dict[str, Any], path: List[str]) -> Set[str]:
        """Return the JSON types the schema declares at ``path`` (empty when undeclared)."""
        node: Any = schema
        for part in path:
            props = node.get("properties") if isinstance(node, dict) else None
            if not isinstance(props, dict) or part not in props:
                return set()
            node = props[part]
        declared = node.get("type") if isinstance(node, dict) else None
        if isinstance(declared, str):
            return {declared}
        return set(declared or ())

    def _coerce_for(self, schema: Dict[str, Any], path: List[str], raw: str) -> Any:
        """Coerce ``raw``, keeping it as text where the target key expects a string."""
        value = self._coerce_type(raw)
        types = self._schema_types(schema, path)
        if "string" in types and not isinstance(value, str):
            if value is None and "null" in types:
                return None
            return raw.strip()
        return value

    def _set_nested(self, root: Dict[str, Any], path: List[str], value: Any) -> None:
        cur = root
        for part in path[:-1]:
            nxt = cur.get(part)
            if not isinstance(nxt, dict):
                nxt = {}
                cur[part] = nxt
            cur = nxt
        cur[path[-1]] = value

    def apply_env_overrides(self, cfg: Dict[str, Any]) -> None:
        schema = load_schema(CONFIG_SCHEMA)
        for path, raw in self._iter_env_overrides():
            typed_value = self._coerce_for(schema, path, raw)
            logger.debug("Config override from environment: %s", ".".join(path))
            self._set_nested(cfg, path, typed_value)

    # ---------- loading ----------

    def load_config(self, validate: bool = True) -> Dict[str, Any]:
        """Return the merged configuration tree.

        Raises:
            ConfigError: If a layer is malformed or the result fails validation.
        """
        cfg: Dict[str, Any] = {}
        for path in self._core_files():
            cfg = deep_merge(cfg, self.load_yaml(path))

        user_file = self._user_file()
        if user_file is not None:
            logger.debug("Loading user config %s", user_file)
            cfg = deep_merge(cfg, self.load_yaml(user_file))

        self.apply_env_overrides(cfg)

        if validate:
            try:
                validate_payload(cfg, CONFIG_SCHEMA)
            except SchemaValidationError as exc:
                raise ConfigError(str(exc), context={"errors": exc.errors}) from exc
        return cfg

    def get_all(self) -> Dict[str, Any]:
        return self.load_config()

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a dotted key (e.g. ``profiles.search_mode``)."""
        cur: Any = self.load_config()
        for part in [p for p in key.split(".") if p]:
            if not isinstance(cur, dict) or part not in cur:
                return default
            cur = cur[part]
        return cur


__all__ = ["ConfigManager", "ENV_PREFIX"]
