"""Writing export artifacts to disk"""
