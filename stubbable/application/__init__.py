"""Application layer for Stubbable.

Contains the contract ports shipped with the library and the stubbing
mechanism (stub sets, stub instances, the factory and call recorders).
"""
