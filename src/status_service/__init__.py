"""Status Service: health-check endpoint with a periodic log emitter."""
