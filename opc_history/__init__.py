"""Wire models and codec for OPC UA event-history reads."""
