"""
HTTP API for the generation client.
"""
