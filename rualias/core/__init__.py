# Core module exports
from rualias.core.config import settings, get_settings, Settings
from rualias.core.logging import (
    configure_logging,
    get_logger,
    bind_context,
    clear_context,
    unbind_context,
    generate_correlation_id,
    api_logger,
    engine_logger,
    provider_logger,
    pipeline_logger,
)
