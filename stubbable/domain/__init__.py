"""Domain layer for Stubbable.

Contains the exception hierarchy and the value objects that describe
interface contracts. The domain layer has no dependencies on the
application or infrastructure layers.
"""
