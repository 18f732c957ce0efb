"""Pipeline stages: fetching, aggregation, rendering and deployment."""
