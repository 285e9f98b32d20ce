"""Feature packages: HATEOAS lookup, query encoding and response normalization."""
