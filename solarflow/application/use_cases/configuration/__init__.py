"""Configuration use cases (validated stage/section/question writes)."""

from solarflow.application.use_cases.configuration.configuration_service import (
    ConfigurationService,
)

__all__ = ["ConfigurationService"]
