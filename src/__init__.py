"""vidstash - local video upload service."""
