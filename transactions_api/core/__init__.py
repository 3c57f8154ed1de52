"""
Core settings
"""
