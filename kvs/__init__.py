"""
KVS: In-Memory Key-Value Store

A small key-value storage engine with a command-line front end.
Values live in process memory; nothing survives a restart.
"""

__version__ = "0.1.0"
