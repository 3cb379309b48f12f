import time
from jsonlog import DEFAULT_LOGGER, Level, use_logger, logger_from_context_or_default

def handle(symbol):
    logger = logger_from_context_or_default()
    logger.debug("consumed signal", {"event": "signals.consume", "symbol": symbol})

def main():
    verbose = DEFAULT_LOGGER.with_level(Level.DEBUG)
    with use_logger(verbose):
        handle("AAPL")
        time.sleep(0.1)
    handle("MSFT")  # dropped: back to the default logger

if __name__ == "__main__":
    main()
