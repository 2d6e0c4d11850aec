"""Domain layer - core business objects and interfaces.

This layer contains:
- Domain entities (Flight, FlightData)
- Repository interfaces
"""
