from cashews import Cache

from dispatcher.config import config

cache = Cache(name="default")
cache.setup(str(config.cache.backend_dsn))
