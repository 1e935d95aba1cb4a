"""Application environment types.

Defines the runtime environments a host application can run faultlog in.
Used by Settings and the container to pick the development logger renderer.

Environments:
- DEVELOPMENT: Local development, human-readable console output
- TESTING: Automated test execution, JSON console output
- CI: Continuous integration environment, JSON console output
- PRODUCTION: Production deployment
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
