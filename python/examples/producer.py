import io, json
from uuid import uuid4
from opentelemetry.context import create_key, set_value, get_current
from jsonlog import Config, init, shutdown, context_with_logger, logger_from_context_or_default

REQUEST_ID = create_key("request_id")

def main():
    logger = init(Config(context_keys={REQUEST_ID: "request_id"}))
    ctx = set_value(REQUEST_ID, str(uuid4()), get_current())
    ctx = context_with_logger(ctx, logger.with_context(ctx))

    log = logger_from_context_or_default(ctx)
    log.info("publishing signal", {"event": "signals.emit", "symbol": "AAPL"})
    log.debug("not shown at the default level")

    buf = io.StringIO()
    log.with_writer(buf).warning("captured")
    print("captured line:", json.loads(buf.getvalue()))

    shutdown()

if __name__ == "__main__":
    main()
