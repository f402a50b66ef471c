"""
Reference analytics providers and the provider factory.
"""
