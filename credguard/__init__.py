"""
CREDGUARD API package
"""
