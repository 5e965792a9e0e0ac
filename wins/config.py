"""Server configuration: defaults, YAML loading, validation and saving."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

import yaml

DEFAULT_LISTEN = "rancher_wins"
DEFAULT_PROXY = "rancher_wins_proxy"

PathLike = Union[str, Path]


class ConfigError(Exception):
    """Raised when a configuration cannot be loaded, saved or validated."""


@dataclass
class WhiteListConfig:
    """Allowed process paths and proxy ports."""

    process_paths: list[str] = field(default_factory=list)
    proxy_ports: list[int] = field(default_factory=list)

    def validate(self) -> None:
        """Raise ConfigError on a blank path or an out-of-range port."""
        for process_path in self.process_paths:
            if process_path.strip() == "":
                raise ConfigError("could not accept blank path as process white list")
        for proxy_port in self.proxy_ports:
            if proxy_port < 0 or proxy_port > 0xFFFF:
                raise ConfigError("could not accept invalid port number in proxy ports")

    def _as_mapping(self) -> dict[str, Any]:
        return {"processPaths": list(self.process_paths), "proxyPorts": list(self.proxy_ports)}

    def _update(self, data: Any) -> None:
        if data is None:
            return
        if not isinstance(data, dict):
            raise ConfigError("cannot unmarshal white_list: expected a mapping")
        found, value = _lookup(data, "processPaths")
        if found:
            self.process_paths = _string_list(value, "processPaths")
        found, value = _lookup(data, "proxyPorts")
        if found:
            self.proxy_ports = _int_list(value, "proxyPorts")


@dataclass
class Config:
    """The server's settings."""

    debug: bool = False
    listen: str = ""
    proxy: str = ""
    white_list: WhiteListConfig = field(default_factory=WhiteListConfig)
    system_agent: Optional[dict[str, Any]] = None
    agent_strict_tls_mode: bool = False
    csi_proxy: Optional[dict[str, Any]] = None
    tls_config: Optional[dict[str, Any]] = None

    def validate(self) -> None:
        """Raise ConfigError when the settings are not usable."""
        if self.listen.strip() == "":
            raise ConfigError("[Validate] listen cannot be blank")
        try:
            self.white_list.validate()
        except ConfigError as exc:
            raise ConfigError(f"[Validate] failed to validate white list field: {exc}") from exc

    def _as_mapping(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "debug": self.debug,
            "listen": self.listen,
            "proxy": self.proxy,
            "white_list": self.white_list._as_mapping(),
            "agentStrictTLSMode": self.agent_strict_tls_mode,
        }
        if self.system_agent is not None:
            data["systemagent"] = self.system_agent
        if self.csi_proxy is not None:
            data["csi-proxy"] = self.csi_proxy
        if self.tls_config is not None:
            data["tls-config"] = self.tls_config
        return data

    def _update(self, data: dict[str, Any]) -> None:
        for key, attr in (("debug", "debug"), ("agentStrictTLSMode", "agent_strict_tls_mode")):
            found, value = _lookup(data, key)
            if found and value is not None:
                if not isinstance(value, bool):
                    raise ConfigError(f"cannot unmarshal {type(value).__name__} into {key}")
                setattr(self, attr, value)

        for key in ("listen", "proxy"):
            found, value = _lookup(data, key)
            if found and value is not None:
                if not isinstance(value, str):
                    raise ConfigError(f"cannot unmarshal {type(value).__name__} into {key}")
                setattr(self, key, value)

        found, value = _lookup(data, "white_list")
        if found:
            self.white_list._update(value)

        for key, attr in (
            ("systemagent", "system_agent"),
            ("csi-proxy", "csi_proxy"),
            ("tls-config", "tls_config"),
        ):
            found, value = _lookup(data, key)
            if found:
                if value is not None and not isinstance(value, dict):
                    raise ConfigError(f"cannot unmarshal {type(value).__name__} into {key}")
                setattr(self, attr, value)


def _lookup(data: dict[Any, Any], key: str) -> tuple[bool, Any]:
    """Find a key, preferring an exact match and then ignoring case."""
    if key in data:
        return True, data[key]
    lowered = key.lower()
    for name, value in data.items():
        if isinstance(name, str) and name.lower() == lowered:
            return True, value
    return False, None


def _string_list(value: Any, key: str) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"cannot unmarshal {key}: expected a list of strings")
    return list(value)


def _int_list(value: Any, key: str) -> list[int]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(
        isinstance(item, int) and not isinstance(item, bool) for item in value
    ):
        raise ConfigError(f"cannot unmarshal {key}: expected a list of integers")
    return list(value)


def default_config() -> Config:
    """Return a configuration holding the default settings."""
    return Config(
        listen=DEFAULT_LISTEN,
        proxy=DEFAULT_PROXY,
        white_list=WhiteListConfig(process_paths=[], proxy_ports=[]),
        agent_strict_tls_mode=False,
    )


def decode_config(path: PathLike, config: Config) -> Config:
    """Read YAML from ``path`` into ``config``, overriding only the keys present."""
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML: {exc}") from exc
    if data is None:
        return config
    if not isinstance(data, dict):
        raise ConfigError("cannot unmarshal config: expected a mapping")
    config._update(data)
    return config


def load_config(path: PathLike, config: Optional[Config]) -> Config:
    """Load ``path`` into ``config`` and validate it.

    A missing file leaves ``config`` unchanged.
    """
    if config is None:
        raise ConfigError("config cannot be nil")

    file_path = Path(path)
    try:
        is_dir = file_path.stat() and file_path.is_dir()
    except FileNotFoundError:
        return config
    except OSError as exc:
        raise ConfigError(f"could not load config: {exc}") from exc
    if is_dir:
        raise ConfigError("could not load config from directory")

    try:
        decode_config(file_path, config)
    except (ConfigError, OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"could not decode config: {exc}") from exc

    config.validate()
    return config


def save_config(path: PathLike, config: Optional[Config]) -> None:
    """Write ``config`` to ``path`` as YAML."""
    if config is None:
        raise ConfigError("config cannot be nil")
    try:
        text = yaml.safe_dump(config._as_mapping(), default_flow_style=False)
    except yaml.YAMLError as exc:
        raise ConfigError(f"could not marshal provided config: {exc}") from exc
    Path(path).write_text(text, encoding="utf-8")