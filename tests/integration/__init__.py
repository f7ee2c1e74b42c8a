"""
Integration Tests Package for AlkeParking

Integration tests drive the application service end to end:
1. Raw payloads through DTO validation into the registry
2. Failure kinds surfacing as responses, never exceptions
3. Settings-driven construction of the registry
"""
