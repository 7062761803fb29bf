"""Together Pray: read-through cache layer and the services that use it."""
