from .mongo import ConnectionMode, MongoConnection

__all__ = ["ConnectionMode", "MongoConnection"]
