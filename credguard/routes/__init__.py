"""
API blueprints
"""
