"""
Infrastructure: configuration, logging, SQLite access and the key-value
persistence adapter used by the stores.
"""
