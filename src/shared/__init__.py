"""Building blocks shared across the service: errors, builders, HTTP glue and health checks."""
