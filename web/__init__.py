"""aiohttp adapter: configuration, logging, middlewares and handlers."""
