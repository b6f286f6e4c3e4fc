"""Health status domain model."""

from pydantic import BaseModel, ConfigDict, Field

BLOCKING_CHECKS = ("securityTokenOK", "databaseOK")


class HealthStatus(BaseModel):
    """Status flags reported by the PTV health check endpoint."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    security_token_ok: bool = Field(alias="securityTokenOK")
    client_clock_ok: bool = Field(alias="clientClockOK")
    memcache_ok: bool = Field(alias="memcacheOK")
    database_ok: bool = Field(alias="databaseOK")

    def failed_checks(self) -> list[str]:
        """Wire names of every check that reported False."""
        flags = self.model_dump(by_alias=True)
        return [name for name, ok in flags.items() if not ok]

    def blocking_failures(self) -> list[str]:
        """Failed checks that must stop a query from proceeding."""
        return [name for name in self.failed_checks() if name in BLOCKING_CHECKS]
