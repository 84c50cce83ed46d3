"""Config parser use case for the mock region server."""

import yaml
from typing import TYPE_CHECKING, Any

from mock_regionserver.domain.exceptions import RegionServerConfigError

if TYPE_CHECKING:
    from mock_regionserver.domain.settings import RegionServerSettings


class ConfigParser:
    """Parses mock region server YAML configuration to settings."""

    def parse(self, yaml_str: str) -> "RegionServerSettings":
        """Parse YAML config to settings.

        Args:
            yaml_str: YAML string with a required "server" section and
                      optional "scanner", "metrics" and "properties" sections.

        Returns:
            RegionServerSettings domain object

        Raises:
            RegionServerConfigError: If YAML is invalid or required fields are missing
        """
        try:
            config = yaml.safe_load(yaml_str)
        except yaml.YAMLError as e:
            raise RegionServerConfigError(f"Invalid YAML: {e}") from e

        if not isinstance(config, dict):
            raise RegionServerConfigError("Config must be a dictionary")

        try:
            hostname = config["server"]["hostname"]
            port = config["server"]["port"]
        except (KeyError, TypeError) as e:
            raise RegionServerConfigError(f"Missing required field in config: {e}") from e

        start_code = config["server"].get("start_code", 0)
        scanner = self._section(config, "scanner")
        metrics = self._section(config, "metrics")
        properties = self._section(config, "properties")

        # Import here to avoid circular dependency
        from mock_regionserver.domain.server_name import ServerName
        from mock_regionserver.domain.settings import RegionServerSettings

        return RegionServerSettings(
            server_name=ServerName(
                hostname=str(hostname), port=port, start_code=start_code
            ),
            # YAML scalars arrive typed; the configuration handle is all strings
            properties={
                str(k): self._to_property(str(k), v) for k, v in properties.items()
            },
            scanner_seed=scanner.get("seed"),
            metrics_enabled=self._to_enabled(metrics.get("enabled", False)),
            metrics_prefix=metrics.get("prefix", "mock_regionserver"),
        )

    @staticmethod
    def _section(config: dict[str, Any], name: str) -> dict[str, Any]:
        section = config.get(name)
        if section is None:
            return {}
        if not isinstance(section, dict):
            raise RegionServerConfigError(f"'{name}' must be a dictionary")
        return section

    @staticmethod
    def _to_enabled(value: Any) -> bool:
        from mock_regionserver.domain.settings import parse_bool

        if isinstance(value, bool):
            return value
        parsed = parse_bool(value) if isinstance(value, str) else None
        if parsed is None:
            raise RegionServerConfigError(
                f"metrics.enabled must be a boolean, got: {value!r}"
            )
        return parsed

    @staticmethod
    def _to_property(key: str, value: Any) -> str:
        if value is None:
            raise RegionServerConfigError(f"property {key!r} has no value")
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)
