"""Startup-time logging of the effective processor configuration."""

from sqlalchemy.engine import make_url

from payflow.common.config import ProcessorSettings
from payflow.common.logging import logger


SECRET_MARKERS = ("key", "secret", "password", "token")


def _display_value(field: str, value) -> object:
    """Mask secrets; DSNs keep host/database but lose their password."""

    if value is None:
        return "<unset>"
    if any(marker in field for marker in SECRET_MARKERS):
        return "<redacted>"
    if field.endswith("_dsn"):
        return make_url(value).render_as_string(hide_password=True)
    return value


def log_startup_config(config: ProcessorSettings, fields: list[str]) -> dict[str, object]:
    """Log selected settings fields for quick troubleshooting and return them."""

    snapshot: dict[str, object] = {"service": config.service_name}
    for field in fields:
        snapshot[field] = _display_value(field, getattr(config, field))
    logger.info("startup_config=%s", snapshot)
    return snapshot
