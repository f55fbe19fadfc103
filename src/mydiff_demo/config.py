"""Environment-based configuration for the mydiff demo."""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings

from mydiff_demo.types import Endpoint, ServerRole


class DemoSettings(BaseSettings):
    """Demo configuration.

    All settings can be overridden via environment variables with
    MYDIFF_DEMO_ prefix. For example:
        MYDIFF_DEMO_SERVER1=10.0.0.5:3306
        MYDIFF_DEMO_SCHEMA_NAME=employees
    """

    # Database servers under comparison
    server1: str = "127.0.0.1:33060"
    server2: str = "127.0.0.1:33062"
    schema_name: str = "acme_inc"

    # Database client used to load fixtures
    db_user: str = "root"
    mysql_client: str = "mysql"
    sql_dir: Path = Path("sql")

    # Containerized diff tool
    dockerfile: Path = Path("Dockerfile.client")
    build_context: Path = Path(".")
    tool_path: str = "/mydiff"
    container_tty: bool = False

    # Local servers for `mydiff-demo servers`
    compose_file: Path = Path("docker/docker-compose.yaml")

    model_config = {"env_prefix": "MYDIFF_DEMO_"}

    @field_validator("server1", "server2")
    @classmethod
    def _check_endpoint(cls, value: str) -> str:
        Endpoint.parse(value)
        return value

    @field_validator("schema_name")
    @classmethod
    def _check_schema(cls, value: str) -> str:
        if not value or any(c.isspace() for c in value):
            raise ValueError(f"Schema name must be a single token, got {value!r}")
        return value

    def endpoint(self, role: ServerRole) -> Endpoint:
        """Resolve a server role to its configured endpoint."""
        if role == "server1":
            return Endpoint.parse(self.server1)
        if role == "server2":
            return Endpoint.parse(self.server2)
        raise ValueError(f"Unknown server role: {role}")

    def endpoints(self) -> tuple[Endpoint, Endpoint]:
        """Return (source, target) endpoints."""
        return self.endpoint("server1"), self.endpoint("server2")
