"""Client plumbing: configuration, logging and the HTTP executor."""
