import logging

HEALTH_PATHS = ("/healthz", "/_stcore/health", "/_stcore/host-config")


class HealthCheckFilter(logging.Filter):
    """Drops access-log lines for Streamlit's liveness probes."""

    def filter(self, record: logging.LogRecord) -> bool:
        msg = record.getMessage()
        return not any(path in msg for path in HEALTH_PATHS)


def setup_logging(level: str = "INFO"):
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )
    for logger_name in ["tornado.access", "streamlit.web.server"]:
        logging.getLogger(logger_name).addFilter(HealthCheckFilter())
    # the per-session loops are long lived; keep asyncio chatter out of INFO
    logging.getLogger("asyncio").setLevel(logging.WARNING)
