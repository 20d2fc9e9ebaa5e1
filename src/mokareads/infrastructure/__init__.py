"""Infrastructure layer — filesystem, remote API, and the published library."""
