"""
Class Comparator - runtime property introspection and comparison
"""
