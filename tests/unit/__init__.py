"""
Unit Tests Package for AlkeParking

Each module exercises one layer in isolation:
- test_models: vehicle categories, vehicles, result values, events
- test_strategies: the standard tariff
- test_repositories: the in-memory vehicle store
- test_aggregates: the VehicleRegistry aggregate
- test_config: settings and logging setup
"""
