import os

MONGO_URI = os.getenv("MONGO_URI", "mongodb://localhost:27017")
MONGO_DB = os.getenv("MONGO_DB", "testdb")
MONGO_COLLECTION = os.getenv("MONGO_COLLECTION", "accounts")

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
