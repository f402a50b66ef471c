"""
Core tracking contracts and the fan-out dispatcher.
"""
