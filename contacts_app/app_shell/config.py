import logging
import os

from contacts_app.rules.models import Rules

logger = logging.getLogger(__name__)


class ConfigError(RuntimeError):
    pass


def validate_ops_rules(rules: Rules) -> None:
    """
    Validate operational requirements before startup.

    Raises ConfigError listing every missing required environment variable.
    """
    missing = [env_var for env_var in rules.ops.required_env if env_var not in os.environ]
    if missing:
        raise ConfigError(f"Missing required environment variables: {', '.join(missing)}")

    logger.info("Configuration validated for %s.", rules.project.slug)
