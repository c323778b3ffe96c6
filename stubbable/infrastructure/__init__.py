"""Infrastructure layer for Stubbable.

Holds the concrete stubs for the shipped contracts and cross-cutting
observability setup.
"""
