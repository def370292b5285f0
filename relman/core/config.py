"""Typed configuration for release steps.

Settings are read from ``relman.toml`` in the project root, or from the
``[tool.relman]`` table of ``pyproject.toml``. Every key is optional:

    relx = "./relx"
    relx_config = "rel/relx.config"
    output_dir = "rel"
    build_tool = "mix"
    env_var = "MIX_ENV"
    default_env = "dev"
    executable = "elixir"
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str, get_table

__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "RelmanConfig",
    "find_config_file",
    "load_config",
    "load_config_or_default",
]

CONFIG_FILENAME = "relman.toml"

DEFAULT_RELX = "./relx"
DEFAULT_RELX_CONFIG = "rel/relx.config"
DEFAULT_OUTPUT_DIR = "rel"
DEFAULT_BUILD_TOOL = "mix"
DEFAULT_ENV_VAR = "MIX_ENV"
DEFAULT_ENV = "dev"
DEFAULT_EXECUTABLE = "elixir"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class RelmanConfig:
    """Paths and tool names used to build command lines.

    Attributes:
        relx: Path to the relx executable, relative to the project root.
        relx_config: Config file handed to relx (never parsed here).
        output_dir: Directory holding ``<project>/releases/<version>``.
        build_tool: Host build tool invoked by ``build_tool`` steps.
        env_var: Variable selecting the build environment.
        default_env: Environment used when ``env_var`` is unset.
        executable: Executable whose installation root is resolved.
    """

    relx: str = DEFAULT_RELX
    relx_config: str = DEFAULT_RELX_CONFIG
    output_dir: str = DEFAULT_OUTPUT_DIR
    build_tool: str = DEFAULT_BUILD_TOOL
    env_var: str = DEFAULT_ENV_VAR
    default_env: str = DEFAULT_ENV
    executable: str = DEFAULT_EXECUTABLE

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> RelmanConfig:
        """Create a config from a parsed TOML table."""
        return cls(
            relx=get_str(data, "relx") or DEFAULT_RELX,
            relx_config=get_str(data, "relx_config") or DEFAULT_RELX_CONFIG,
            output_dir=get_str(data, "output_dir") or DEFAULT_OUTPUT_DIR,
            build_tool=get_str(data, "build_tool") or DEFAULT_BUILD_TOOL,
            env_var=get_str(data, "env_var") or DEFAULT_ENV_VAR,
            default_env=get_str(data, "default_env") or DEFAULT_ENV,
            executable=get_str(data, "executable") or DEFAULT_EXECUTABLE,
        )

    def release_output_dir(self, name: str) -> str:
        return f"{self.output_dir}/{name}"


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    import tomllib

    try:
        data_obj: object = tomllib.loads(path.read_bytes().decode("utf-8"))
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ConfigError("Config root must be a TOML table", path=path))
    return Ok(data)


def find_config_file(root: Path) -> Path | None:
    """Return the config file for a project root, if any.

    ``relman.toml`` wins over ``pyproject.toml``.
    """
    candidate = root / CONFIG_FILENAME
    if candidate.is_file():
        return candidate
    pyproject = root / "pyproject.toml"
    if pyproject.is_file():
        return pyproject
    return None


def load_config(path: Path) -> Result[RelmanConfig, ConfigError]:
    """Load configuration from a TOML file.

    For ``pyproject.toml`` only the ``[tool.relman]`` table is read; a
    pyproject without that table yields the defaults.
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    data: StrDict = result.value
    if path.name == "pyproject.toml":
        tool = get_table(data, "tool") or {}
        section = tool.get("relman")
        if section is None:
            return Ok(RelmanConfig())
        table = as_str_dict(section)
        if table is None:
            return Err(ConfigError("[tool.relman] must be a TOML table", path=path))
        data = table

    return Ok(RelmanConfig.from_dict(data))


def load_config_or_default(root: Path) -> Result[RelmanConfig, ConfigError]:
    """Load the project's config, or defaults when there is no config file."""
    path = find_config_file(root)
    if path is None:
        return Ok(RelmanConfig())
    return load_config(path)
