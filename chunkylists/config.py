import os


class Config:
    DEFAULT_CHUNK_SIZE = int(os.getenv("CHUNKYLISTS_CHUNK_SIZE", "8"))
    LOG_LEVEL = os.getenv("CHUNKYLISTS_LOG_LEVEL", "WARNING")
